# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Stage errors for the transpiler pipeline.

Every stage failure is terminal: the pipeline aborts on the first error and
the driver reports it as a diagnostic. The errors are `ValueError` subclasses
so callers that only care about "bad input" can catch them uniformly, and they
carry a best-effort span so the driver can pin the report to the source.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .diagnostics import Diagnostic
from .span import Span


class TranspileError(ValueError):
	"""Base class for user-facing transpiler failures."""

	phase = "driver"

	def __init__(self, message: str, *, span: Optional[Span] = None, notes: Iterable[str] = ()) -> None:
		super().__init__(message)
		self.message = message
		self.span = span if span is not None else Span()
		self.notes = list(notes)

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(message=self.message, phase=self.phase, span=self.span, notes=list(self.notes))


class LexError(TranspileError):
	"""Raised for a character the lexer does not recognize."""

	phase = "lexer"

	def __init__(self, message: str, *, char: str, span: Optional[Span] = None) -> None:
		super().__init__(message, span=span)
		self.char = char


class ParseError(TranspileError):
	"""
	Raised when the token stream violates the structural assumptions of the
	tree builder: missing namespace header, unbalanced scopes, or a token span
	no expression rule accepts.
	"""

	phase = "parser"


class GenerationError(TranspileError):
	"""Raised for AST nodes the Clojure generator cannot render (e.g. classes)."""

	phase = "codegen"


__all__ = ["TranspileError", "LexError", "ParseError", "GenerationError"]
