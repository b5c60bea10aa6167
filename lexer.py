from dataclasses import dataclass
from enum import Enum, auto

class TokenType(Enum):
    WORD = auto()
    ASSIGN = auto()
    PLUS = auto()

@dataclass
class Token:
    type: TokenType
    value: str
    column: int

def split_lines(source):
    """
    Separa o texto do programa em instruções, uma por linha.
    Linhas vazias no final são descartadas; as do meio são mantidas.
    """
    lines = [line[:-1] if line.endswith('\r') else line for line in source.split('\n')]
    while lines and lines[-1] == '':
        lines.pop()
    return lines

class Lexer:
    def __init__(self, source):
        self.source = source
        self.pos = 0
        self.column = 1
        self.current_char = self.source[0] if source else None

    def advance(self):
        self.pos += 1
        self.column += 1
        if self.pos < len(self.source):
            self.current_char = self.source[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self):
        while self.current_char and self.current_char.isspace():
            self.advance()

    def word(self):
        start_pos = self.pos
        while self.current_char and not self.current_char.isspace():
            self.advance()
        return self.source[start_pos:self.pos]

    def tokenize(self):
        tokens = []

        while self.current_char:
            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            start_column = self.column
            word = self.word()
            if word == '=':
                tokens.append(Token(TokenType.ASSIGN, word, start_column))
            elif word == '+':
                tokens.append(Token(TokenType.PLUS, word, start_column))
            else:
                tokens.append(Token(TokenType.WORD, word, start_column))

        return tokens
