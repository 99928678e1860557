"""
sharpclj.core: shared spans, diagnostics, errors and sequence helpers.

Modules:
  - span: source location carried by tokens and errors
  - diagnostics: Diagnostic record rendered by the CLI
  - errors: LexError / ParseError / GenerationError
  - seq: index_of / last_index_of / group_while / to_lisp_case
"""

from .diagnostics import Diagnostic
from .errors import GenerationError, LexError, ParseError, TranspileError
from .span import Span

__all__ = [
	"Diagnostic",
	"Span",
	"TranspileError",
	"LexError",
	"ParseError",
	"GenerationError",
]
