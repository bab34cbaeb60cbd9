"""
Tests for f-string line rewriting.
"""

import pytest

from berust.translator.interpolation import (
    has_interpolated_literal,
    translate_interpolation,
)


class TestSinglePlaceholderAssignment:

    def test_assignment_form(self, context):
        result = translate_interpolation('n = f"{n}"', context)

        assert result == 'let n = format!("{}", n);'
        assert context.bindings == {"n": "n"}

    def test_spacing_around_equals_is_flexible(self, context):
        result = translate_interpolation('label=f"{count}"', context)

        assert result == 'let label = format!("{}", count);'
        assert context.bindings == {"label": "count"}

    def test_last_write_wins(self, context):
        translate_interpolation('a = f"{b}"', context)
        translate_interpolation('a = f"{c}"', context)

        assert context.bindings == {"a": "c"}

    def test_surrounding_text_is_not_the_assignment_form(self, context):
        result = translate_interpolation('n = f"{n}" + 1', context)

        assert result == 'n = format!("{}", n) + 1'
        assert context.bindings == {}


class TestPrintOfLiteral:

    def test_print_is_double_wrapped(self, context):
        result = translate_interpolation('println!(f"Hello {name}")', context)

        assert result == 'println!("{}", format!("Hello {}", name));'

    def test_print_without_placeholders(self, context):
        result = translate_interpolation('println!(f"done")', context)

        assert result == 'println!("{}", format!("done"));'

    def test_print_does_not_record_bindings(self, context):
        translate_interpolation('println!(f"{a} {b}")', context)

        assert context.bindings == {}


class TestFallback:

    def test_only_literal_span_replaced(self, context):
        result = translate_interpolation('msg be f"Hi {name}!" // greeting', context)

        assert result == 'msg be format!("Hi {}!", name) // greeting'

    def test_only_first_literal_handled(self, context):
        result = translate_interpolation('call(f"{a}", f"{b}")', context)

        assert result == 'call(format!("{}", a), f"{b}")'

    def test_python_style_print(self, context):
        result = translate_interpolation('print(f"x={x}")', context)

        assert result == 'print(format!("x={}", x))'

    def test_no_literal_returns_line(self, context):
        assert translate_interpolation("print(foo)", context) == "print(foo)"

    def test_unterminated_literal_returns_line(self, context):
        assert translate_interpolation('x = f"oops', context) == 'x = f"oops'


@pytest.mark.parametrize(
    "line, expected",
    [
        ('f"x"', True),
        ("print(fmt)", True),
        ('"plain"', False),
        ("x be 5", False),
    ],
)
def test_has_interpolated_literal(line, expected):
    assert has_interpolated_literal(line) is expected
