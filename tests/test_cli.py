import pytest

from squaremat.cli import main


def test_main_returns_zero(capsys):
    assert main([]) == 0
    capsys.readouterr()


def test_main_prints_filled_matrix_first(capsys):
    main([])
    out = capsys.readouterr().out
    assert out.startswith("6\t6\t6\t6\t\n" * 4 + "\n")


def test_main_prints_identity_and_diagonal(capsys):
    main([])
    out = capsys.readouterr().out
    assert "1\t0\t0\t\n0\t1\t0\t\n0\t0\t1\t\n\n" in out
    assert "5\t0\t\n0\t5\t\n\n" in out


def test_main_prints_a(capsys):
    main([])
    out = capsys.readouterr().out
    assert "a:\n12\t12\t12\t\n12\t12\t12\t\n12\t12\t1\t\nb:\n" in out


def test_main_section_order(capsys):
    main([])
    out = capsys.readouterr().out
    headers = ["a:\n", "b:\n", "3*a:\n", "b%2:\n", "a*b\n", "det(-b):\n"]
    positions = [out.index(h) for h in headers]
    assert positions == sorted(positions)


def test_main_prints_determinant_last(capsys):
    main([])
    out = capsys.readouterr().out
    value = float(out.rsplit("det(-b):\n", 1)[1])
    assert value == pytest.approx(-74.1, abs=1e-4)


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])