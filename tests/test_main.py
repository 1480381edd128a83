import io
import sys

import pytest

from hammock.main import main


def run_main(monkeypatch, *args: str):
    monkeypatch.setattr(sys, "argv", ["hammock", *args])
    main()


def test_run_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "guests.txt"
    path.write_text("Ann\nBob\n\n  Ann  \n")

    run_main(monkeypatch, str(path))

    # duplicates are kept when reading a file
    assert capsys.readouterr().out == (
        "== table: 4 buckets, 3 keys ==\n"
        "load 0.75, rehash above 2.00\n"
        "Bucket[00]: -- empty --\n"
        "Bucket[01]:  --> Ann  --> Ann\n"
        "Bucket[02]: -- empty --\n"
        "Bucket[03]:  --> Bob\n"
    )


def test_run_missing_file(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, str(tmp_path / "missing.txt"))
    assert exc.value.code == 74
    assert "Could not read" in capsys.readouterr().err


def test_usage(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "a", "b")
    assert exc.value.code == 64
    assert capsys.readouterr().out == "Usage: hammock [path]\n"


def test_repl(monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "stdin", io.StringIO("Ann\nAnn\n\n?Ann\n?Bob\n:list\n:stats\n:bogus\n")
    )

    run_main(monkeypatch)

    captured = capsys.readouterr()
    assert captured.out == (
        "added\nalready here\nyes\nno\n['Ann']\n[0, 1, 0, 0]\n"
    )
    assert captured.err == "Unknown command ':bogus'\n"


def test_repl_clear_and_show(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("Ann\n:clear\n?Ann\n:show\n"))

    run_main(monkeypatch)

    assert capsys.readouterr().out == (
        "added\n"
        "no\n"
        "== table: 4 buckets, 0 keys ==\n"
        "load 0.00, rehash above 2.00\n"
        "Bucket[00]: -- empty --\n"
        "Bucket[01]: -- empty --\n"
        "Bucket[02]: -- empty --\n"
        "Bucket[03]: -- empty --\n"
    )
