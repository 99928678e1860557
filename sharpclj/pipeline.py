# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
The transpiler pipeline: lexer -> tree builder -> Clojure generator -> layout.

Each stage fully materializes its output before the next one starts, and the
first stage error aborts the run (`TranspileError` subclasses propagate
unchanged).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from sharpclj.codegen.clojure import generate
from sharpclj.codegen.layout import prettify
from sharpclj.config import LayoutConfig
from sharpclj.lexer import Token, tokenize
from sharpclj.parser import ast, parse_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranspileResult:
	"""All intermediate products of one run (handy for tests and debugging)."""

	tokens: Tuple[Token, ...]
	tree: ast.Namespace
	generated: str
	output: str


def run_pipeline(source: str, config: Optional[LayoutConfig] = None) -> TranspileResult:
	tokens = tokenize(source)
	tree = parse_tokens(tokens)
	if logger.isEnabledFor(logging.DEBUG):
		logger.debug("syntax tree:\n%s", ast.dump(tree))
	generated = generate(tree)
	output = prettify(generated, config)
	return TranspileResult(tokens=tokens, tree=tree, generated=generated, output=output)


def transpile(source: str, config: Optional[LayoutConfig] = None) -> str:
	"""Transpile C#-subset `source` into indented Clojure text."""
	return run_pipeline(source, config).output


__all__ = ["TranspileResult", "run_pipeline", "transpile"]
