import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional

from errors import InterpreterError, MalformedInstruction
from lexer import split_lines
from meu_ast import *
from parser import Parser
from resolver import TermResolver
from symbol_table import CAPACITY, SymbolTable

class RunState(Enum):
    READY = auto()
    RUNNING = auto()
    SUCCEEDED = auto()
    FAILED = auto()

@dataclass
class RunResult:
    success: bool
    outputs: List[int] = field(default_factory=list)
    error: Optional[InterpreterError] = None
    failed_line: Optional[int] = None
    symbols: Dict[str, int] = field(default_factory=dict)

    def __bool__(self):
        return self.success

class Interpreter:
    def __init__(self, capacity=CAPACITY, verbose=False):
        self.symbol_table = SymbolTable(capacity)
        self.resolver = TermResolver(self.symbol_table)
        self.parser = Parser()
        self.verbose = verbose
        self.state = RunState.READY
        self.outputs = []

    def log(self, message):
        if self.verbose:
            print(f"[mini] {message}", file=sys.stderr)

    def execute(self, source):
        return self.run(split_lines(source))

    def run(self, lines):
        """
        Executa as linhas em ordem e para na primeira instrução que falhar.
        A tabela é limpa no início de cada execução; o que foi gravado antes
        de uma falha permanece na tabela.
        """
        self.symbol_table.reset()
        self.outputs = []
        self.state = RunState.RUNNING

        for line_num, text in enumerate(lines, start=1):
            try:
                self.interpret_instruction(text, line_num)
            except InterpreterError as e:
                if e.line is None:
                    e.line = line_num
                if e.text is None:
                    e.text = text
                self.state = RunState.FAILED
                self.log(f"falha: {e}")
                return RunResult(False, list(self.outputs), e, line_num, self.symbol_table.snapshot())

        self.state = RunState.SUCCEEDED
        return RunResult(True, list(self.outputs), symbols=self.symbol_table.snapshot())

    def interpret_instruction(self, text, line_num):
        stmt = self.parser.classify_line(text, line_num)
        self.log(f"linha {line_num}: {type(stmt).__name__} <- {text!r}")

        if isinstance(stmt, Assignment):
            self._assign(stmt)
        elif isinstance(stmt, Addition):
            self._add(stmt)
        elif isinstance(stmt, Return):
            self._return(stmt)
        else:
            raise MalformedInstruction(
                f"Instrução inválida: '{text}' ({len(stmt.tokens)} tokens)",
                line_num, text
            )

    def _assign(self, stmt):
        # Só aceita literal: um símbolo do lado direito é erro de literal
        value = self.resolver.parse_literal(stmt.value)
        self.symbol_table.upsert(stmt.symbol, value)

    def _add(self, stmt):
        left_val = self.resolver.resolve(stmt.left)
        right_val = self.resolver.resolve(stmt.right)
        self.symbol_table.upsert(stmt.symbol, left_val + right_val)

    def _return(self, stmt):
        value = self.symbol_table.lookup(stmt.symbol)
        self.outputs.append(value)
