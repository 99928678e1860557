"""
sharpclj.parser: tokens -> AST.
"""

from . import ast
from .builder import parse_block, parse_expression, parse_tokens
from .view import TokenView

__all__ = ["ast", "parse_tokens", "parse_block", "parse_expression", "TokenView"]
