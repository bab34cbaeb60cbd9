"""
Tests for the berust command line.
"""

import pytest

from berust.translator.cli import main


def test_translates_into_cwd(source_file, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert main([str(source_file)]) == 0

    out = capsys.readouterr().out
    assert "✅ Transpilation complete. Output written to: hello.rs" in out
    assert (tmp_path / "hello.rs").read_text(encoding="utf-8").splitlines()[0] == "fn greet() {"


def test_quiet(source_file, tmp_path, capsys):
    target = tmp_path / "quiet.rs"

    assert main([str(source_file), "-o", str(target), "--quiet"]) == 0

    assert capsys.readouterr().out == ""
    assert target.exists()


def test_missing_source(tmp_path, capsys):
    assert main([str(tmp_path / "missing.be")]) == 1

    assert "Error opening file:" in capsys.readouterr().err


def test_unwritable_output(source_file, tmp_path, capsys):
    target = tmp_path / "no_such_dir" / "out.rs"

    assert main([str(source_file), "-o", str(target)]) == 1

    assert "Error creating output file:" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["a.be", "b.be"]])
def test_usage_without_exactly_one_source(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 2
    assert "usage: berust" in capsys.readouterr().err
