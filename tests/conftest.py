"""
Shared pytest fixtures for translator, CLI and API tests.
"""

import pytest
from pathlib import Path

from berust.translator import LineTranslator, TranslationContext, Translator


SAMPLE_SOURCE = """\
greet() {
    name be "world"
    println!(f"Hello {name}")
    n = f"{n}"
}
main() {
    greet()
    println!(x)
}
"""


@pytest.fixture
def context() -> TranslationContext:
    """Fresh translation context"""
    return TranslationContext()


@pytest.fixture
def line_translator() -> LineTranslator:
    return LineTranslator()


@pytest.fixture
def translator() -> Translator:
    return Translator(indent_width=4)


@pytest.fixture
def sample_source() -> str:
    return SAMPLE_SOURCE


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Sample source written to a temporary directory"""
    path = tmp_path / "hello.be"
    path.write_text(SAMPLE_SOURCE, encoding="utf-8")
    return path
