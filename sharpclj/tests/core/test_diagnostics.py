from sharpclj.core.diagnostics import Diagnostic
from sharpclj.core.errors import GenerationError, LexError, ParseError, TranspileError
from sharpclj.core.span import Span


def test_diagnostic_human_format_uses_span_position():
	diag = Diagnostic(message="boom", phase="parser", span=Span(line=3, column=7), notes=["hint"])
	assert diag.format_human("prog.cs") == "prog.cs:3:7: error: boom\n  note: hint"


def test_diagnostic_unknown_span_renders_question_marks():
	diag = Diagnostic(message="boom")
	assert diag.format_human("prog.cs") == "prog.cs:?:?: error: boom"


def test_diagnostic_json_shape():
	diag = Diagnostic(message="boom", phase="lexer", span=Span(line=1, column=2))
	assert diag.to_json("a.cs") == {
		"phase": "lexer",
		"message": "boom",
		"severity": "error",
		"file": "a.cs",
		"line": 1,
		"column": 2,
		"notes": [],
	}


def test_errors_carry_their_phase():
	assert LexError("x", char="#").to_diagnostic().phase == "lexer"
	assert ParseError("x").to_diagnostic().phase == "parser"
	assert GenerationError("x").to_diagnostic().phase == "codegen"
	assert issubclass(ParseError, TranspileError)
	assert issubclass(TranspileError, ValueError)


def test_span_from_loc_reads_location_attributes():
	class Loc:
		line = 2
		column = 5
		end_line = 2
		end_column = 9

	span = Span.from_loc(Loc())
	assert (span.line, span.column, span.end_line, span.end_column) == (2, 5, 2, 9)
	assert Span.from_loc(None) == Span()
	assert Span.from_loc(span) is span
