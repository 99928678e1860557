# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Layout pass: re-indent generated Clojure by parenthesis depth.

Only whitespace changes. Every newline inside an open form is followed by
`depth * indent_unit_count` indent characters, and whitespace right before a
`)` is dropped so closers hug the last expression.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sharpclj.config import LayoutConfig

from .clojure import LINE_COMMENT

logger = logging.getLogger(__name__)


class Prettifier:
	def __init__(self, config: Optional[LayoutConfig] = None) -> None:
		self.config = config or LayoutConfig()
		self._unit = self.config.indent_character * self.config.indent_unit_count

	def prettify(self, text: str) -> str:
		out: List[str] = []
		# One flag per output line: does it hold a line comment?
		commented: List[bool] = [False]
		depth = 0
		for ch in text:
			if commented[-1] and ch != "\n":
				# Comment text never changes the depth.
				out.append(ch)
				continue
			if ch == "(":
				depth += 1
			elif ch == ")":
				self._strip_trailing_whitespace(out, commented)
				if commented[-1]:
					# Keep the closer off the comment line.
					out.append("\n" + self._unit * depth)
					commented.append(False)
				depth -= 1
			elif ch == LINE_COMMENT:
				commented[-1] = True
			out.append(ch)
			if ch == "\n":
				commented.append(False)
				if depth > 0:
					out.append(self._unit * depth)
		result = "".join(out)
		logger.debug("layout pass: %d -> %d characters", len(text), len(result))
		return result

	@staticmethod
	def _strip_trailing_whitespace(out: List[str], commented: List[bool]) -> None:
		while out and out[-1].isspace():
			for _ in range(out.pop().count("\n")):
				commented.pop()


def prettify(text: str, config: Optional[LayoutConfig] = None) -> str:
	return Prettifier(config).prettify(text)


__all__ = ["Prettifier", "prettify"]
