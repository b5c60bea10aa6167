class InterpreterError(Exception):
    def __init__(self, message, line=None, text=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.text = text

    def __str__(self):
        if self.line is None:
            return self.message
        return f"Linha {self.line} - {self.message}"

class MalformedInstruction(InterpreterError):
    pass

class UnresolvedSymbol(InterpreterError):
    pass

class InvalidLiteral(InterpreterError):
    pass

class SymbolTableFull(InterpreterError):
    pass
