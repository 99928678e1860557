import pytest

from sharpclj.core.errors import ParseError
from sharpclj.lexer import tokenize
from sharpclj.lexer.tokens import TokenKind
from sharpclj.parser.scopes import find_closing_paren, find_closing_scope, inner_scope
from sharpclj.parser.view import TokenView


def _view(source: str) -> TokenView:
	return TokenView.of(tokenize(source))


def test_closing_scope_honors_nesting():
	view = _view("{ { } { } } }")
	assert find_closing_scope(view, 0) == 5
	assert find_closing_scope(view, 1) == 2


@pytest.mark.parametrize(
	"source",
	[
		"a { b { c } d } e",
		"{ { { } } { } }",
		"f ( ) { if ( x ) { y ; } else { z ; } }",
	],
)
def test_closing_scope_returns_brace_at_starting_depth(source: str):
	view = _view(source)
	end = find_closing_scope(view, 0)
	assert view[end].kind is TokenKind.CLOSE_SCOPE
	depth = 0
	for tok in view[:end + 1]:
		if tok.kind is TokenKind.OPEN_SCOPE:
			depth += 1
		elif tok.kind is TokenKind.CLOSE_SCOPE:
			depth -= 1
	assert depth == 0


def test_closing_scope_underflow_is_a_parse_error():
	with pytest.raises(ParseError, match="unbalanced"):
		find_closing_scope(_view("x } {"), 0)


def test_closing_scope_missing_is_a_parse_error():
	with pytest.raises(ParseError, match="no matching"):
		find_closing_scope(_view("f ( ) { { }"), 0)


def test_closing_paren_matches_nested_calls():
	view = _view("if (f(x) == g(y)) { }")
	assert find_closing_paren(view, 0) == 11
	assert view[11].kind is TokenKind.CLOSE_PAREN


def test_inner_scope_is_strictly_between_braces():
	inner = inner_scope(_view("int F() { a; { b; } c; } tail"))
	assert inner.dump() == "NameIdentifier(a) Semicolon OpenScope NameIdentifier(b) Semicolon CloseScope NameIdentifier(c) Semicolon"


def test_inner_scope_without_braces_fails():
	with pytest.raises(ParseError, match="valid scope"):
		inner_scope(_view("a b c"))
