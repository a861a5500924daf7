from texsolve.cli import main


def test_main_prints_banner(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "LaTeX Solver\n"