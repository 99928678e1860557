# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Brace and parenthesis matching over token views.

All helpers track nesting depth and fail with `ParseError` on unbalanced
input: a closer seen at depth zero (underflow) or a window that ends before
the opener is closed.
"""

from __future__ import annotations

from sharpclj.core.errors import ParseError
from sharpclj.lexer.tokens import TokenKind

from .view import TokenView


def _match_forward(tokens: TokenView, start: int, opener: TokenKind, closer: TokenKind) -> int:
	depth = 0
	for idx in range(start, len(tokens)):
		kind = tokens[idx].kind
		if kind is opener:
			depth += 1
		elif kind is closer:
			if depth == 0:
				raise ParseError(
					f"unbalanced {closer.value} token while matching scopes",
					span=tokens[idx].span,
					notes=[f"tokens: {tokens[start:idx + 1].dump()}"],
				)
			depth -= 1
			if depth == 0:
				return idx
	raise ParseError(
		f"no matching {closer.value} token found",
		span=tokens.span() if start >= len(tokens) else tokens[start].span,
		notes=[f"tokens: {tokens[start:].dump()}"],
	)


def find_closing_scope(tokens: TokenView, start: int) -> int:
	"""
	Index of the `}` that closes the first `{` at or after `start`.

	The counter starts at zero at `start`, so the returned token always sits
	at the nesting depth of `start`.
	"""
	return _match_forward(tokens, start, TokenKind.OPEN_SCOPE, TokenKind.CLOSE_SCOPE)


def find_closing_paren(tokens: TokenView, start: int) -> int:
	"""Index of the `)` that closes the first `(` at or after `start`."""
	return _match_forward(tokens, start, TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN)


def inner_scope(tokens: TokenView) -> TokenView:
	"""Tokens strictly between the first `{` and its matching `}`."""
	for idx, tok in enumerate(tokens):
		if tok.kind is TokenKind.OPEN_SCOPE:
			close = find_closing_scope(tokens, idx)
			return tokens[idx + 1:close]
	raise ParseError(
		"failed to find a valid scope",
		span=tokens.span(),
		notes=[f"tokens: {tokens.dump()}"],
	)


__all__ = ["find_closing_scope", "find_closing_paren", "inner_scope"]
