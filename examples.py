EXAMPLES = {
    "soma": {
        "name": "Soma simples (C = 10)",
        "code": "A = 2\nB = 8\nC = A + B\nC",
    },
    "reatribuicao": {
        "name": "Reatribuição (Z = 26)",
        "code": "A = 2\nB = 22\nZ = 91\nK = A + B\nZ = K + A\nZ",
    },
    "literais": {
        "name": "Soma de literais (A = 3)",
        "code": "A = 2 + 1\nB = A + 9\nC = A + B\nA",
    },
    "erro_sintaxe": {
        "name": "Erro de sintaxe ('A + B')",
        "code": "A = 2 + 1\nB = A + 9\nC = A + B\nA + B",
    },
}
