# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lexer: source text -> ordered token tuple.

The terminal set lives in `grammar.lark`; Lark's basic lexer does the
character-level work (longest match, whitespace skipping, line/column
tracking). This module classifies the raw Lark terminals into `TokenKind`s:
words become keywords, type names or identifiers, numeric suffixes are
stripped and comment markers removed.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Tuple

from lark import Lark, Token as LarkToken
from lark.exceptions import UnexpectedCharacters

from sharpclj.core.errors import LexError
from sharpclj.core.span import Span

from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_LEXER = Lark(_GRAMMAR_SRC, parser="lalr", lexer="basic", start="start")

# Words with a fixed meaning and no payload.
_BARE_KEYWORDS = {
	"namespace": TokenKind.NAMESPACE,
	"class": TokenKind.CLASS,
	"return": TokenKind.RETURN,
}

# Words that keep their spelling as token text.
_TEXT_KEYWORDS = {
	"true": TokenKind.BOOLEAN_LITERAL,
	"false": TokenKind.BOOLEAN_LITERAL,
	"null": TokenKind.NULL_LITERAL,
	"if": TokenKind.BRANCHING_OPERATOR,
	"else": TokenKind.BRANCHING_OPERATOR,
}

TYPE_NAMES = frozenset(
	{
		"var",
		"int",
		"long",
		"float",
		"double",
		"decimal",
		"string",
		"char",
		"bool",
		"object",
		"void",
	}
)

_GENERIC_SEGMENT = re.compile(r"<[^<>]+>")

# Structural terminals: no text.
_STRUCTURAL = {
	"EQUAL": TokenKind.ASSIGNMENT_OPERATOR,
	"LPAR": TokenKind.OPEN_PAREN,
	"RPAR": TokenKind.CLOSE_PAREN,
	"LBRACE": TokenKind.OPEN_SCOPE,
	"RBRACE": TokenKind.CLOSE_SCOPE,
	"LSQB": TokenKind.OPEN_COLLECTION,
	"RSQB": TokenKind.CLOSE_COLLECTION,
	"SEMI": TokenKind.SEMICOLON,
	"COMMA": TokenKind.COMMA,
	"DOT": TokenKind.DOT_METHOD,
}

# Operator terminals: the spelling is the text.
_OPERATORS = {
	"EQEQ": TokenKind.EQUALITY_OPERATOR,
	"BOOLOP": TokenKind.BOOLEAN_OPERATION,
	"OPASSIGN": TokenKind.ASSIGNMENT_OPERATOR,
	"NUMOP": TokenKind.NUMERIC_OPERATION,
	"BITOP": TokenKind.BOOLEAN_OPERATION,
}


def classify_word(word: str) -> Tuple[TokenKind, str | None]:
	"""Map a letter-initial word to its token kind and text."""
	if word in _BARE_KEYWORDS:
		return _BARE_KEYWORDS[word], None
	if word in _TEXT_KEYWORDS:
		return _TEXT_KEYWORDS[word], word
	if word in TYPE_NAMES or _GENERIC_SEGMENT.search(word):
		return TokenKind.TYPE_DECLARATION, word
	return TokenKind.NAME_IDENTIFIER, word


def _convert(raw: LarkToken) -> Token:
	span = Span.from_loc(raw)
	value = str(raw)
	ttype = raw.type
	if ttype == "WORD":
		kind, text = classify_word(value)
		return Token(kind, text, span)
	if ttype == "NUMBER":
		return Token(TokenKind.NUMERIC_LITERAL, value.replace("f", "").replace("d", ""), span)
	if ttype == "COMMENT":
		return Token(TokenKind.COMMENT, value[2:], span)
	if ttype in _STRUCTURAL:
		return Token(_STRUCTURAL[ttype], None, span)
	if ttype in _OPERATORS:
		return Token(_OPERATORS[ttype], value, span)
	# Every terminal in grammar.lark is handled above.
	raise AssertionError(f"unmapped lexer terminal {ttype}")


def tokenize(source: str) -> Tuple[Token, ...]:
	"""
	Lex the whole `source` into tokens.

	There is no error recovery: the first unrecognized character raises
	`LexError` naming the character and its position.
	"""
	try:
		tokens = tuple(_convert(raw) for raw in _LEXER.lex(source))
	except UnexpectedCharacters as err:
		char = err.char
		raise LexError(
			f"unrecognized character {char!r}",
			char=char,
			span=Span(line=err.line, column=err.column),
		) from None
	logger.debug("lexed %d characters into %d tokens", len(source), len(tokens))
	return tokens


__all__ = ["tokenize", "classify_word", "TYPE_NAMES"]
