"""
Tests for the file boundary.
"""

import pytest
from pathlib import Path

from berust.core.errors import OutputWriteError, SourceNotFoundError
from berust.translator.converter import convert_file, default_output_path


def test_default_output_path_uses_cwd():
    assert default_output_path("/some/dir/hello.be") == Path("hello.rs")


def test_default_output_path_strips_last_extension_only():
    assert default_output_path("archive.tar.be", ".rs") == Path("archive.tar.rs")


def test_default_output_path_without_extension():
    assert default_output_path("program", ".out") == Path("program.out")


def test_convert_writes_next_to_cwd(source_file, tmp_path, monkeypatch):
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    written, result = convert_file(source_file)

    assert written == Path("hello.rs")
    assert (workdir / "hello.rs").read_text(encoding="utf-8") == result.code
    assert result.code.startswith("fn greet() {\n")


def test_convert_explicit_output(source_file, tmp_path):
    target = tmp_path / "out.rs"

    written, result = convert_file(source_file, output_path=target)

    assert written == target
    assert target.read_text(encoding="utf-8").splitlines() == result.lines


def test_existing_output_is_overwritten(source_file, tmp_path):
    target = tmp_path / "out.rs"
    target.write_text("stale", encoding="utf-8")

    convert_file(source_file, output_path=target)

    assert "stale" not in target.read_text(encoding="utf-8")


def test_missing_source(tmp_path):
    with pytest.raises(SourceNotFoundError) as exc_info:
        convert_file(tmp_path / "missing.be", output_path=tmp_path / "missing.rs")

    assert exc_info.value.details == {"path": str(tmp_path / "missing.be")}
    assert not (tmp_path / "missing.rs").exists()


def test_unwritable_output(source_file, tmp_path):
    target = tmp_path / "no_such_dir" / "out.rs"

    with pytest.raises(OutputWriteError):
        convert_file(source_file, output_path=target)


def test_default_output_path_for_dotfile():
    assert default_output_path(".hidden", ".rs") == Path(".rs")


def test_convert_keeps_one_line_per_input_line(tmp_path):
    source = tmp_path / "feeds.be"
    source.write_bytes('x be "a\x0cb"\r\nmsg be "c\rd"\n'.encode("utf-8"))
    target = tmp_path / "feeds.rs"

    _, result = convert_file(source, output_path=target)

    assert result.lines == ['let x = "a\x0cb";', 'let msg = "c\rd";']
    assert target.read_bytes() == 'let x = "a\x0cb";\nlet msg = "c\rd";\n'.encode("utf-8")
