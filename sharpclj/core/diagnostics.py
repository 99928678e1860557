# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for the lexer/parser/codegen stages.

A diagnostic is a message plus an optional span and phase label. Stage errors
convert themselves into diagnostics (`TranspileError.to_diagnostic`) so the CLI
can render them as text or JSON without knowing which stage failed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a compiler diagnostic (error/warning/etc.)."""

	message: str
	# Phase label ("lexer", "parser", "codegen", "driver").
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def format_human(self, source: Path | str | None = None) -> str:
		"""Render as `file:line:column: severity: message` (compiler style)."""
		file = self.span.file or (str(source) if source is not None else "<input>")
		text = f"{file}:{self.span.format()}: {self.severity}: {self.message}"
		for note in self.notes:
			text += f"\n  note: {note}"
		return text

	def to_json(self, source: Path | str | None = None) -> dict:
		"""Render to a structured JSON-friendly dict."""
		file = self.span.file
		if file is None and source is not None:
			file = str(source)
		return {
			"phase": self.phase,
			"message": self.message,
			"severity": self.severity,
			"file": file,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}


__all__ = ["Diagnostic"]
