class Assignment:
    def __init__(self, symbol, value, line):
        self.symbol = symbol
        self.value = value
        self.line = line

class Addition:
    def __init__(self, symbol, left, right, line):
        self.symbol = symbol
        self.left = left
        self.right = right
        self.line = line

class Return:
    def __init__(self, symbol, line):
        self.symbol = symbol
        self.line = line

class Invalid:
    def __init__(self, tokens, line):
        self.tokens = tokens
        self.line = line
