import pytest

from sharpclj.lexer import tokenize
from sharpclj.lexer.tokens import TokenKind
from sharpclj.parser.view import TokenView


def test_slices_are_relative_and_share_the_buffer():
	tokens = tokenize("a b c d e")
	view = TokenView.of(tokens)
	inner = view[1:4]
	assert len(inner) == 3
	assert inner[0].text == "b"
	assert inner[-1].text == "d"
	assert inner[1:][0].text == "c"
	assert inner._buffer is tokens


def test_out_of_range_index_raises():
	view = TokenView.of(tokenize("a b"))[1:]
	with pytest.raises(IndexError):
		view[1]
	assert view.kind_at(1) is None
	assert view.kind_at(-1) is None
	assert view.kind_at(0) is TokenKind.NAME_IDENTIFIER


def test_empty_slices_and_dump():
	view = TokenView.of(tokenize("f(x);"))
	assert len(view[3:1]) == 0
	assert view[:-1].dump() == "NameIdentifier(f) OpenParen NameIdentifier(x) CloseParen"
	assert view[2:3] == TokenView.of(tokenize("x"))
