from lexer import Lexer, TokenType
from meu_ast import *

class Parser:
    """
    Classifica cada linha pela quantidade de tokens e pela posição
    fixa das palavras-chave:

    - SYM = VAL          -> Assignment
    - SYM = VAL + VAL    -> Addition
    - SYM                -> Return
    - qualquer outra     -> Invalid
    """
    def classify(self, tokens, line):
        types = [token.type for token in tokens]
        values = [token.value for token in tokens]

        if len(tokens) == 3 and types[1] == TokenType.ASSIGN:
            return Assignment(values[0], values[2], line)
        elif (len(tokens) == 5 and types[1] == TokenType.ASSIGN
              and types[3] == TokenType.PLUS):
            return Addition(values[0], values[2], values[4], line)
        elif len(tokens) == 1:
            return Return(values[0], line)
        return Invalid(values, line)

    def classify_line(self, text, line):
        return self.classify(Lexer(text).tokenize(), line)

    def parse_program(self, lines):
        """Classifica todas as linhas sem executar nada."""
        return [self.classify_line(text, number) for number, text in enumerate(lines, start=1)]
