#!/usr/bin/env python3
"""
Script para executar o Mini Interpreter no console ou iniciar a API
"""
import argparse
import sys

from interpreter import Interpreter
from lexer import split_lines
from examples import EXAMPLES

HOST = "0.0.0.0"
PORT = 8000

def print_symbols(symbols):
    """Imprime a tabela de símbolos"""
    print("Tabela de símbolos:")
    for name, value in symbols.items():
        print(f"   {name} = {value}")

def run_program(interpreter, code, dump=False):
    """Executa um programa, imprimindo as instruções e os retornos"""
    print("|*****Nova Entrada*****|")
    lines = split_lines(code)
    for line in lines:
        print(line)

    result = interpreter.run(lines)
    for value in result.outputs:
        print(f"Retorno: {value}")
    if not result:
        print("Erro, verifique a entrada.")
    if dump:
        print_symbols(result.symbols)
    return result.success

def serve():
    print("🚀 Mini Interpreter API")
    print("=" * 50)
    print(f"🔄 Iniciando servidor FastAPI em http://{HOST}:{PORT} ...")
    try:
        import uvicorn
        uvicorn.run("main:app", host=HOST, port=PORT)
    except KeyboardInterrupt:
        print("\n👋 Servidor interrompido. Até logo!")

def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Mini Interpreter - executa programas de atribuição e soma'
    )
    parser.add_argument('arquivo', nargs='?',
                        help='Arquivo com o programa (padrão: executa os exemplos)')
    parser.add_argument('--serve', action='store_true',
                        help='Inicia a API HTTP com uvicorn')
    parser.add_argument('--dump', action='store_true',
                        help='Imprime a tabela de símbolos após cada execução')
    parser.add_argument('--verbose', action='store_true',
                        help='Rastreia cada instrução em stderr')
    args = parser.parse_args(argv)

    if args.serve:
        serve()
        return 0

    interpreter = Interpreter(verbose=args.verbose)
    if args.arquivo:
        try:
            with open(args.arquivo, encoding='utf-8') as f:
                programs = [f.read()]
        except OSError as e:
            print(f"❌ Não foi possível ler {args.arquivo}: {e}", file=sys.stderr)
            return 1
    else:
        programs = [example["code"] for example in EXAMPLES.values()]

    results = [run_program(interpreter, code, dump=args.dump) for code in programs]
    return 0 if all(results) else 1

if __name__ == "__main__":
    sys.exit(main())
