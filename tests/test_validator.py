import pytest

from lsprotocol.types import DiagnosticSeverity

from catt.lexer import scan
from catt.types import Position
from catt.validator import BlockContext, Validator, validate


def _diags(source):
    return validate(scan(source))


def _span(diag):
    r = diag.range
    return (r.start.line, r.start.character, r.end.line, r.end.character)


@pytest.mark.parametrize(
    "source",
    [
        "",
        "var x = 5;",
        "var x = x;",
        "var x = 1; var y = x + 2; y;",
        "var s = \"hello\"; meow(s); meowln(s);",
        "return true;",
        "if (y) { }",
        "if (1) { if (2) { } }",
        "if (1) { { } }",
        "while (a < b) { var i = 0; }",
        "for (i) { }",
        "if (1) { else { } }",
        "if (1) { else if (2) { } }",
        "if (1) { while (2) { else { } } }",
        "}",
        "{ }",
        "meowln(undeclared + 1)",
    ],
)
def test_clean_sources(source):
    assert _diags(source) == []


# --- var ---

def test_undefined_in_initialization():
    (d,) = _diags("var x = y;")
    assert d.message == 'Undefined variable "y" in initialization'
    assert d.severity == DiagnosticSeverity.Error
    assert d.source == "Catt LSP"
    assert _span(d) == (0, 8, 0, 9)


def test_var_without_identifier(messages):
    assert messages("var = 5;") == ["var keyword must be followed by an identifier"]
    assert messages("var") == ["var keyword must be followed by an identifier"]
    assert messages("var 5 = 1;") == ["var keyword must be followed by an identifier"]


def test_var_without_equals_anchors_on_name():
    (d,) = _diags("var x 5;")
    assert d.message == "var declaration requires initialization with '='"
    assert _span(d) == (0, 4, 0, 5)
    (d,) = _diags("var x")
    assert d.message == "var declaration requires initialization with '='"


def test_var_missing_semicolon_anchors_on_last_token():
    (d,) = _diags("var x = 5")
    assert d.message == "var declaration must end with semicolon"
    assert _span(d) == (0, 8, 0, 9)
    (d,) = _diags("var x =")
    assert _span(d) == (0, 6, 0, 7)


def test_var_initializer_reports_each_undefined_name(messages):
    assert messages("var x = a + b") == [
        'Undefined variable "a" in initialization',
        'Undefined variable "b" in initialization',
        "var declaration must end with semicolon",
    ]


def test_declarations_are_not_block_scoped(messages):
    assert messages("if (1) { var inner = 1; } inner;") == []


def test_use_before_declaration(messages):
    assert messages("x; var x = 1; x;") == ['Undefined variable "x"']


# --- unknown characters and identifiers ---

def test_unexpected_character():
    (d,) = _diags("  @")
    assert d.message == "Unexpected character: @"
    assert _span(d) == (0, 2, 0, 3)


def test_undefined_variable_outside_var(messages):
    assert messages("y;") == ['Undefined variable "y"']


# --- meow / meowln ---

def test_scenario_d_unclosed_meow(messages):
    assert messages('meow("hi"') == ["Unclosed parenthesis in meow call"]


@pytest.mark.parametrize("kw", ["meow", "meowln"])
def test_print_call_requires_paren(kw, messages):
    assert messages(f'{kw} "hi";') == [f'Invalid {kw} call. Expected "(" after "{kw}"']


def test_print_call_nested_parens(messages):
    assert messages("meowln((1 + (2)))") == []
    assert messages("meowln((1)") == ["Unclosed parenthesis in meowln call"]


def test_unclosed_print_call_anchors_on_keyword():
    (d,) = _diags("  meow(")
    assert _span(d) == (0, 2, 0, 6)


def test_cursor_resumes_after_print_call(messages):
    assert messages("meow(1) y") == ['Undefined variable "y"']


# --- if / while / for ---

def test_condition_is_opaque_but_body_is_checked(messages):
    assert messages("if (y) { }") == []
    assert messages("if (a) { y; }") == ['Undefined variable "y"']


def test_scenario_c_unclosed_block():
    diags = _diags("if (a) {")
    assert [d.message for d in diags] == ["Unclosed block starting at position 4"]
    assert _span(diags[0]) == (0, 0, 0, 2)


@pytest.mark.parametrize("kw", ["if", "while", "for"])
def test_control_requires_paren(kw, messages):
    assert messages(f"{kw} {{ }}") == [f'Invalid {kw} statement. Expected "(" after "{kw}"']


@pytest.mark.parametrize("kw", ["if", "while", "for"])
def test_control_unclosed_condition(kw, messages):
    assert messages(f"{kw} (a") == [f"Unclosed parenthesis in {kw} condition"]


def test_control_requires_block():
    (d,) = _diags("while (1) 5;")
    assert d.message == 'Expected block starting with "{" for while statement'
    assert _span(d) == (0, 10, 0, 11)


def test_control_block_missing_at_end_anchors_on_keyword():
    (d,) = _diags("for (1)")
    assert d.message == 'Expected block starting with "{" for for statement'
    assert _span(d) == (0, 0, 0, 3)


def test_nested_brace_inside_block_stays_open(messages):
    assert messages("if (1) { { }") == ["Unclosed block starting at position 4"]


def test_unclosed_blocks_reported_bottom_up():
    diags = _diags("if (1) {\n  while (2) {")
    assert [d.message for d in diags] == [
        "Unclosed block starting at position 4",
        "Unclosed block starting at position 9",
    ]
    assert diags[0].range.start == Position(0, 0)
    assert diags[1].range.start == Position(1, 2)


# --- else ---

def test_scenario_e_else_without_if(messages):
    assert messages("else { }") == ["else statement without preceding if statement"]


def test_else_after_closed_if_has_nothing_to_bind(messages):
    # The if block is popped at its "}", so a following else finds no open if.
    assert messages("if (1) { } else { }") == ["else statement without preceding if statement"]


def test_else_does_not_bind_to_while(messages):
    assert messages("while (1) { else { } }") == ["else statement without preceding if statement"]


def test_else_block_is_not_an_if():
    # Inside the else block only the outer if is open.
    assert _diags("if (1) { else { else { } } }") == []
    assert [d.message for d in _diags("while (1) { if (2) { } else { else { } } }")] == [
        "else statement without preceding if statement",
        "else statement without preceding if statement",
    ]


def test_else_if_requires_paren():
    (d,) = _diags("if (1) { else if { } }")
    assert d.message == 'Invalid else if statement. Expected "(" after "if"'
    assert _span(d) == (0, 14, 0, 16)


def test_else_if_unclosed_condition(messages):
    assert messages("if (1) { else if (2") == [
        "Unclosed parenthesis in else if condition",
        "Unclosed block starting at position 4",
    ]


def test_else_requires_block():
    (d,) = _diags("if (1) { else 5 }")
    assert d.message == 'Expected block starting with "{" for else statement'
    assert _span(d) == (0, 14, 0, 15)


def test_unclosed_else_block_anchors_on_else():
    diags = _diags("if (1) { else {")
    assert [d.message for d in diags] == [
        "Unclosed block starting at position 4",
        "Unclosed block starting at position 6",
    ]
    assert _span(diags[1]) == (0, 9, 0, 13)


# --- pass state ---

def test_state_is_fresh_per_call(messages):
    assert messages("var x = 1;") == []
    assert messages("x;") == ['Undefined variable "x"']


def test_validator_tracks_blocks():
    v = Validator(scan("if (1) { while (2) {"))
    v.run()
    assert [b.start_index for b in v.block_stack] == [4, 9]
    assert [b.is_if for b in v.block_stack] == [True, False]
    assert all(isinstance(b, BlockContext) and b.brace_count == 1 for b in v.block_stack)
    assert v.current == len(v.tokens)


# --- text edge cases ---

def test_logical_operators_are_not_unexpected(messages):
    assert messages("var a = 1; var b = a && 0 || 1;") == []
    assert messages("a & b") == [
        'Undefined variable "a"',
        "Unexpected character: &",
        'Undefined variable "b"',
    ]


def test_leading_byte_order_mark(messages):
    assert messages("\ufeffvar x = 1;") == []


def test_diagnostic_after_astral_character():
    (d,) = _diags('"\U0001F600" y')
    assert d.message == 'Undefined variable "y"'
    assert _span(d) == (0, 5, 0, 6)
