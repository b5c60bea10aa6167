"""Testes do executor de console."""

from run import main


def test_runs_builtin_examples(capsys):
    """Sem argumentos, todos os exemplos executam e o último falha."""
    status = main([])
    out = capsys.readouterr().out
    assert status == 1
    assert out.count("|*****Nova Entrada*****|") == 4
    assert "Retorno: 10" in out
    assert "Retorno: 26" in out
    assert "Retorno: 3" in out
    assert out.count("Erro, verifique a entrada.") == 1


def test_runs_program_file(tmp_path, capsys):
    program = tmp_path / "prog.txt"
    program.write_text("A = 2\nB = 8\nC = A + B\nC\n", encoding="utf-8")
    status = main([str(program), "--dump"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Retorno: 10" in out
    assert "Erro" not in out
    assert "   C = 10" in out


def test_failing_program_file(tmp_path, capsys):
    program = tmp_path / "prog.txt"
    program.write_text("A = 1\nB\n", encoding="utf-8")
    assert main([str(program)]) == 1
    assert "Erro, verifique a entrada." in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nada.txt")]) == 1
    assert "Não foi possível ler" in capsys.readouterr().err
