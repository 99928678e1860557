# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
sharpclj: a C#-subset to Clojure transpiler.

Stages:
  lexer:   source text -> tokens (Lark basic lexer)
  parser:  tokens -> AST
  codegen: AST -> Clojure text -> indented Clojure text

The CLI entrypoint is `sharpclj.cli:main`.
"""

from .config import LayoutConfig
from .pipeline import run_pipeline, transpile

__all__ = ["LayoutConfig", "run_pipeline", "transpile"]
