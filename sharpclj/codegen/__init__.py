"""
sharpclj.codegen: AST -> Clojure text, plus the indentation pass.
"""

from .clojure import ClojureGenerator, generate
from .layout import Prettifier, prettify

__all__ = ["ClojureGenerator", "generate", "Prettifier", "prettify"]
