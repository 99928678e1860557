# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token model shared by the lexer and the tree builder.

Token kinds are a closed set; their values are the stable identifiers used
in diagnostics and token dumps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from sharpclj.core.span import Span


class TokenKind(Enum):
	NAMESPACE = "Namespace"
	CLASS = "Class"
	TYPE_DECLARATION = "TypeDeclaration"
	NAME_IDENTIFIER = "NameIdentifier"
	OPEN_PAREN = "OpenParen"
	CLOSE_PAREN = "CloseParen"
	OPEN_SCOPE = "OpenScope"
	CLOSE_SCOPE = "CloseScope"
	OPEN_COLLECTION = "OpenCollection"
	CLOSE_COLLECTION = "CloseCollection"
	SEMICOLON = "Semicolon"
	COMMA = "Comma"
	RETURN = "Return"
	NULL_LITERAL = "NullLiteral"
	NUMERIC_LITERAL = "NumericLiteral"
	BOOLEAN_LITERAL = "BooleanLiteral"
	NUMERIC_OPERATION = "NumericOperation"
	BOOLEAN_OPERATION = "BooleanOperation"
	ASSIGNMENT_OPERATOR = "AssignmentOperator"
	EQUALITY_OPERATOR = "EqualityOperator"
	BRANCHING_OPERATOR = "BranchingOperator"
	COMMENT = "Comment"
	DOT_METHOD = "DotMethod"


@dataclass(frozen=True)
class Token:
	"""
	A lexed token. `text` is absent for purely structural tokens.

	`span` is diagnostic-only and excluded from equality, so tokens built by
	hand in tests compare equal to lexed ones.
	"""

	kind: TokenKind
	text: Optional[str] = None
	span: Span = field(default_factory=Span, compare=False, repr=False)

	def dump(self) -> str:
		if self.text is None:
			return self.kind.value
		return f"{self.kind.value}({self.text})"


__all__ = ["TokenKind", "Token"]
