from fastapi import FastAPI, HTTPException
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from typing import List, Dict, Any, Optional
import os

from lexer import Lexer, split_lines
from parser import Parser
from interpreter import Interpreter
from meu_ast import Assignment, Addition, Return, Invalid
from examples import EXAMPLES

app = FastAPI(title="Mini Interpreter", version="1.0.0")

# --- Modelos de Dados ---
class CodeRequest(BaseModel):
    code: str

class RunResponse(BaseModel):
    success: bool
    outputs: List[int] = []
    symbols: Dict[str, int] = {}
    errors: List[str] = []
    failed_line: Optional[int] = None

# --- Lógica Auxiliar ---

def run_code(code: str) -> RunResponse:
    """Executa o programa numa execução isolada e monta a resposta."""
    result = Interpreter().execute(code)
    return RunResponse(
        success=result.success,
        outputs=result.outputs,
        symbols=result.symbols,
        errors=[str(result.error)] if result.error else [],
        failed_line=result.failed_line,
    )

def instruction_to_dict(stmt, tokens) -> Dict[str, Any]:
    result = {
        "line": stmt.line,
        "type": type(stmt).__name__,
        "tokens": [{"type": t.type.name, "value": t.value, "column": t.column} for t in tokens],
    }
    if isinstance(stmt, Assignment):
        result.update(symbol=stmt.symbol, value=stmt.value)
    elif isinstance(stmt, Addition):
        result.update(symbol=stmt.symbol, left=stmt.left, right=stmt.right)
    elif isinstance(stmt, Return):
        result.update(symbol=stmt.symbol)
    return result

# --- Endpoints da API ---
@app.post("/api/run", response_model=RunResponse)
async def run_program(request: CodeRequest):
    return run_code(request.code)

@app.post("/api/classify")
async def classify_code(request: CodeRequest):
    lines = split_lines(request.code)
    parser = Parser()
    instructions = []
    for line_num, text in enumerate(lines, start=1):
        tokens = Lexer(text).tokenize()
        instructions.append(instruction_to_dict(parser.classify(tokens, line_num), tokens))
    invalid = [i["line"] for i in instructions if i["type"] == Invalid.__name__]
    return {"success": not invalid, "instructions": instructions, "invalid_lines": invalid}

@app.get("/api/examples")
async def get_examples():
    return EXAMPLES

@app.get("/api/examples/{key}/run", response_model=RunResponse)
async def run_example(key: str):
    if key not in EXAMPLES:
        raise HTTPException(status_code=404, detail=f"Exemplo '{key}' não existe")
    return run_code(EXAMPLES[key]["code"])

# --- Configuração do App ---
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
