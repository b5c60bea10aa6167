import math
import re

from errors import InvalidLiteral, UnresolvedSymbol

INTEGER = re.compile(r'[+-]?\d+')
NUMERIC = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')

class TermResolver:
    """
    Converte um termo de instrução em inteiro: literal numérico ou
    símbolo já definido na tabela.
    """
    def __init__(self, symbol_table):
        self.symbol_table = symbol_table

    @staticmethod
    def is_numeric(term):
        # Aceita qualquer forma decimal, inclusive com ponto ou expoente
        return NUMERIC.fullmatch(term) is not None

    @staticmethod
    def parse_literal(term):
        if INTEGER.fullmatch(term):
            try:
                return int(term)
            except ValueError:
                # Inteiros acima do limite de dígitos do Python
                raise InvalidLiteral(f"Literal numérico muito longo: {len(term)} caracteres")
        if NUMERIC.fullmatch(term):
            value = float(term)
            if math.isfinite(value):
                return int(value)
        raise InvalidLiteral(f"Literal numérico inválido: '{term}'")

    def resolve(self, term):
        if self.is_numeric(term):
            return self.parse_literal(term)
        try:
            return self.symbol_table.lookup(term)
        except UnresolvedSymbol:
            raise UnresolvedSymbol(f"Termo não resolvido: '{term}' não é número nem símbolo definido")
