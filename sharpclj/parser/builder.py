# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tree builder: token tuple -> AST.

The source subset is recognized with positional heuristics only. Top-level
members are found by their leading token shapes, method and branch bodies are
cut into statements at semicolons (or at the brace closing a nested scope), and
each statement span is handed to `parse_expression`, which tries a fixed list
of shapes and takes the first that matches.

All functions take a `TokenView` and return nodes; there is no shared scan
position, so any sub-span can be parsed on its own.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from sharpclj.core.errors import ParseError
from sharpclj.core.seq import group_while, index_of, last_index_of
from sharpclj.lexer.tokens import Token, TokenKind

from . import ast
from .scopes import find_closing_paren, find_closing_scope, inner_scope
from .view import TokenView

logger = logging.getLogger(__name__)

# Bitwise spellings of BooleanOperation; `&&` and `||` never split a span.
_BITWISE = ("|", "&")


def _is(kind: TokenKind):
	return lambda tok: tok.kind is kind


def _is_split_operator(tok: Token) -> bool:
	return tok.kind is TokenKind.NUMERIC_OPERATION or (
		tok.kind is TokenKind.BOOLEAN_OPERATION and tok.text in _BITWISE
	)


def parse_tokens(tokens: Sequence[Token]) -> ast.Namespace:
	"""
	Build the AST for a whole token stream.

	The stream must open with `namespace <Name>`; everything after it is
	scanned for methods, classes and bare call statements. Tokens that fit none
	of those shapes are skipped.
	"""
	view = TokenView.of(tokens)
	if view.kind_at(0) is not TokenKind.NAMESPACE or view.kind_at(1) is not TokenKind.NAME_IDENTIFIER:
		raise ParseError(
			"namespace declaration not found",
			span=view.span(),
			notes=["the source must start with `namespace <Name>`"],
		)
	name, idx = _parse_namespace_name(view)
	members: List[ast.Node] = []
	while idx < len(view):
		kind = view.kind_at(idx)
		if (
			kind is TokenKind.TYPE_DECLARATION
			and view.kind_at(idx + 1) is TokenKind.NAME_IDENTIFIER
			and view.kind_at(idx + 2) is TokenKind.OPEN_PAREN
		):
			end = find_closing_scope(view, idx)
			members.append(parse_method(view[idx:end + 1]))
			idx = end
		elif kind is TokenKind.CLASS and view.kind_at(idx + 1) is TokenKind.NAME_IDENTIFIER:
			end = find_closing_scope(view, idx)
			members.append(
				ast.Class(
					label=view[idx + 1].text,
					children=parse_block(inner_scope(view[idx:end + 1])),
				)
			)
			idx = end
		elif kind is TokenKind.NAME_IDENTIFIER and view.kind_at(idx + 1) is TokenKind.OPEN_PAREN:
			semi = index_of(view, _is(TokenKind.SEMICOLON), idx)
			end = len(view) if semi is None else semi
			members.append(parse_expression(view[idx:end]))
			idx = end
		idx += 1
	root = ast.Namespace(label=name, children=tuple(members))
	logger.debug("parsed namespace %s with %d top-level members", name, len(members))
	return root


def _parse_namespace_name(view: TokenView) -> Tuple[str, int]:
	"""Namespace label (dotted segments joined) and the index after it."""
	parts = [view[1].text or ""]
	idx = 2
	while view.kind_at(idx) is TokenKind.DOT_METHOD and view.kind_at(idx + 1) is TokenKind.NAME_IDENTIFIER:
		parts.append(view[idx + 1].text or "")
		idx += 2
	return ".".join(parts), idx


def parse_method(view: TokenView) -> ast.Method:
	"""
	Parse `type Name(type a, type b) { ... }`.

	Parameters are read positionally: the span between the first `(` and the
	first `)` repeats `type name ,`, so every third token from offset 1 is a
	parameter name.
	"""
	open_idx = index_of(view, _is(TokenKind.OPEN_PAREN))
	close_idx = index_of(view, _is(TokenKind.CLOSE_PAREN))
	if open_idx is None or close_idx is None or close_idx < open_idx:
		raise ParseError(
			"malformed method parameter list",
			span=view.span(),
			notes=[f"tokens: {view.dump()}"],
		)
	params = view[open_idx + 1:close_idx]
	arguments = [
		ast.MethodArgument(label=params[i].text)
		for i in range(1, len(params), 3)
	]
	body = parse_block(inner_scope(view))
	return ast.Method(label=view[1].text, children=(*arguments, *body))


def parse_block(view: TokenView) -> Tuple[ast.Node, ...]:
	"""
	Parse a statement block (method, class or branch body).

	A statement normally ends at the next `;`. When a `{` shows up first the
	statement instead runs to the brace that closes it, which is how an
	`if`/`else` with a multi-statement body stays a single statement.
	"""
	nodes: List[ast.Node] = []
	idx = 0
	while idx < len(view):
		tok = view[idx]
		if tok.kind in (TokenKind.RETURN, TokenKind.CLOSE_SCOPE, TokenKind.SEMICOLON):
			idx += 1
			continue
		if tok.kind is TokenKind.COMMENT:
			nodes.append(ast.Comment(label=tok.text))
			idx += 1
			continue
		semi = index_of(view, _is(TokenKind.SEMICOLON), idx)
		brace = index_of(view, _is(TokenKind.OPEN_SCOPE), idx)
		if brace is not None and (semi is None or brace < semi):
			end = find_closing_scope(view, idx)
		elif semi is not None:
			end = semi
		else:
			end = len(view) - 1
		nodes.append(parse_expression(view[idx:end + 1]))
		idx = end + 1
	return group_assignments(nodes)


def group_assignments(nodes: Sequence[ast.Node]) -> Tuple[ast.Node, ...]:
	"""
	Merge each run of two or more consecutive assignments into one compound
	assignment; Clojure binds them in a single `let`.
	"""

	def both_assignments(prev: ast.Node, cur: ast.Node) -> bool:
		return prev.kind is ast.NodeKind.ASSIGNMENT and cur.kind is ast.NodeKind.ASSIGNMENT

	grouped: List[ast.Node] = []
	for run in group_while(nodes, both_assignments):
		if len(run) == 1:
			grouped.append(run[0])
		else:
			grouped.append(ast.Assignment(children=tuple(run)))
	return tuple(grouped)


def parse_expression(view: TokenView) -> ast.Node:
	"""
	Parse one statement or expression span. The shapes below are tried in
	order and the first match wins; there is no backtracking.

	Operators are split at their first occurrence, not by precedence:
	`a * b + c` becomes `(* a (+ b c))`.
	"""
	if len(view) and view[-1].kind is TokenKind.SEMICOLON:
		view = view[:-1]
	if not len(view):
		raise ParseError("empty expression")

	first = view[0]

	if len(view) == 1:
		if first.text is None:
			raise ParseError(
				f"failed to parse expression {view.dump()}",
				span=first.span,
				notes=[f"{first.kind.value} token has no value"],
			)
		return ast.Literal(label=first.text)

	if first.kind is TokenKind.RETURN:
		return parse_expression(view[1:])

	if first.kind is TokenKind.OPEN_PAREN:
		close = last_index_of(view, _is(TokenKind.CLOSE_PAREN))
		if close is not None and close > 0:
			return parse_expression(view[1:close])

	if first.kind is TokenKind.BRANCHING_OPERATOR and first.text == "if":
		return _parse_if(view)

	if first.kind is TokenKind.BRANCHING_OPERATOR and first.text == "else":
		start = 2 if view.kind_at(1) is TokenKind.OPEN_SCOPE else 1
		return ast.Branch(label="else", children=parse_block(view[start:]))

	assign = index_of(view, _is(TokenKind.ASSIGNMENT_OPERATOR))
	if assign is not None and assign > 0 and view[assign - 1].kind is TokenKind.NAME_IDENTIFIER:
		return _parse_assignment(view, assign)

	if (
		first.kind is TokenKind.NAME_IDENTIFIER
		and view.kind_at(1) is TokenKind.OPEN_PAREN
		and view[-1].kind is TokenKind.CLOSE_PAREN
	):
		return ast.Expression(label=first.text, children=parse_elements(view[2:-1]))

	if first.kind is TokenKind.OPEN_COLLECTION and view[-1].kind is TokenKind.CLOSE_COLLECTION:
		return ast.Collection(children=parse_elements(view[1:-1]))

	op = index_of(view, _is_split_operator)
	if op is not None:
		operands = [part for part in (view[:op], view[op + 1:]) if len(part)]
		return ast.Expression(
			label=view[op].text,
			children=tuple(parse_expression(part) for part in operands),
		)

	eq = index_of(view, _is(TokenKind.EQUALITY_OPERATOR))
	if eq is not None:
		return ast.EqualityCheck(
			label=view[eq].text,
			children=(parse_expression(view[:eq]), parse_expression(view[eq + 1:])),
		)

	if (
		len(view) >= 4
		and first.kind is TokenKind.NAME_IDENTIFIER
		and view[1].kind is TokenKind.DOT_METHOD
		and view[2].kind is TokenKind.NAME_IDENTIFIER
		and view[3].kind is TokenKind.OPEN_PAREN
		and view[-1].kind is TokenKind.CLOSE_PAREN
	):
		# receiver.Method(args) lowers to (Method receiver args...)
		return ast.Expression(
			label=view[2].text,
			children=(ast.Literal(label=first.text), *parse_elements(view[4:-1])),
		)

	raise ParseError(f"failed to parse expression {view.dump()}", span=first.span)


def _parse_if(view: TokenView) -> ast.Branch:
	open_idx = index_of(view, _is(TokenKind.OPEN_PAREN))
	if open_idx is None:
		raise ParseError(f"missing condition in {view.dump()}", span=view.span())
	close = find_closing_paren(view, open_idx)
	condition = parse_expression(view[open_idx + 1:close])
	body_start = close + 1
	if view.kind_at(body_start) is TokenKind.OPEN_SCOPE:
		body_start += 1
	return ast.Branch(label="if", children=(condition, *parse_block(view[body_start:])))


def _parse_assignment(view: TokenView, assign: int) -> ast.Assignment:
	target = view[assign - 1]
	op = view[assign]
	value = parse_expression(view[assign + 1:])
	if op.text is not None:
		# `x += y` is `x = x + y`.
		value = ast.Expression(label=op.text[0], children=(ast.Literal(label=target.text), value))
	return ast.Assignment(label=target.text, children=(value,))


def parse_elements(view: TokenView) -> Tuple[ast.Node, ...]:
	"""Parse a comma separated list (call arguments, collection items)."""

	def neither_comma(prev: Token, cur: Token) -> bool:
		return prev.kind is not TokenKind.COMMA and cur.kind is not TokenKind.COMMA

	return tuple(
		parse_expression(TokenView.of(group))
		for group in group_while(view, neither_comma)
		if group[0].kind is not TokenKind.COMMA
	)


__all__ = [
	"parse_tokens",
	"parse_method",
	"parse_block",
	"parse_expression",
	"parse_elements",
	"group_assignments",
]
