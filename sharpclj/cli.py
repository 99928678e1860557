#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
sharpclj CLI: read a C#-subset source file, write the Clojure translation.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from sharpclj.config import INDENT_CHARACTERS, LayoutConfig
from sharpclj.core.diagnostics import Diagnostic
from sharpclj.core.errors import TranspileError
from sharpclj.core.seq import to_lisp_case
from sharpclj.pipeline import transpile

logger = logging.getLogger(__name__)

STDOUT = "-"


def default_output_path(source: Path) -> Path:
	"""`src/MyProgram.cs` -> `src/my-program.clj`."""
	return source.with_name(to_lisp_case(source.stem) + ".clj")


def _report(diags: list[Diagnostic], source: Path, as_json: bool) -> None:
	if as_json:
		print(
			json.dumps(
				{
					"exit_code": 1,
					"diagnostics": [d.to_json(source) for d in diags],
				}
			)
		)
		return
	for d in diags:
		print(d.format_human(source), file=sys.stderr)


def compile_file(source_path: Path, output: str | None, config: LayoutConfig) -> str:
	"""Run the pipeline on `source_path`; returns where the output went."""
	source = source_path.read_text(encoding="utf-8")
	result = transpile(source, config)
	if output == STDOUT:
		sys.stdout.write(result)
		return "<stdout>"
	output_path = Path(output) if output is not None else default_output_path(source_path)
	output_path.write_text(result, encoding="utf-8")
	return str(output_path)


def main(argv: list[str] | None = None) -> int:
	"""
	Transpile one source file. Any stage failure is reported as a diagnostic
	and yields exit code 1; there is no partial output.
	"""
	parser = argparse.ArgumentParser(prog="sharpclj", description="sharpclj: C# subset -> Clojure transpiler")
	parser.add_argument("source", type=Path, help="Path to the C# source file")
	parser.add_argument(
		"-o",
		"--output",
		help="Output path (default: <source dir>/<lisp-case stem>.clj; '-' for stdout)",
	)
	parser.add_argument(
		"--indent-char",
		choices=sorted(INDENT_CHARACTERS),
		default="space",
		help="Indentation character for the layout pass (default: space)",
	)
	parser.add_argument(
		"--indent-width",
		type=int,
		default=4,
		help="Indentation characters per nesting level (default: 4)",
	)
	parser.add_argument(
		"--json",
		action="store_true",
		help="Emit diagnostics as JSON (phase/message/severity/file/line/column)",
	)
	parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline stages to stderr")
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		stream=sys.stderr,
		format="%(levelname)s %(name)s: %(message)s",
	)

	try:
		config = LayoutConfig.from_cli(args.indent_char, args.indent_width)
	except ValueError as err:
		parser.error(str(err))

	try:
		written = compile_file(args.source, args.output, config)
	except TranspileError as err:
		_report([err.to_diagnostic()], args.source, args.json)
		return 1
	except OSError as err:
		_report([Diagnostic(message=f"{err.strerror or err}", phase="driver")], Path(err.filename or args.source), args.json)
		return 1
	logger.info("wrote %s", written)
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
