# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Layout configuration for the indentation pass.
"""

from __future__ import annotations

from dataclasses import dataclass

# CLI spellings for the indent character.
INDENT_CHARACTERS = {
	"space": " ",
	"tab": "\t",
}


@dataclass(frozen=True)
class LayoutConfig:
	"""
	How the layout pass indents: `indent_unit_count` copies of
	`indent_character` per open parenthesis.

	The defaults (four spaces) match the reference output of the tool.
	"""

	indent_character: str = " "
	indent_unit_count: int = 4

	def __post_init__(self) -> None:
		if not isinstance(self.indent_character, str) or len(self.indent_character) != 1:
			raise ValueError(f"indent_character must be a single character, got {self.indent_character!r}")
		if not self.indent_character.isspace():
			raise ValueError(f"indent_character must be whitespace, got {self.indent_character!r}")
		if isinstance(self.indent_unit_count, bool) or not isinstance(self.indent_unit_count, int):
			raise ValueError(f"indent_unit_count must be an integer, got {self.indent_unit_count!r}")
		if self.indent_unit_count <= 0:
			raise ValueError(f"indent_unit_count must be positive, got {self.indent_unit_count}")

	@classmethod
	def from_cli(cls, indent_char: str, indent_width: int) -> "LayoutConfig":
		"""Build from the CLI names (`space`/`tab`) and width."""
		try:
			character = INDENT_CHARACTERS[indent_char]
		except KeyError:
			raise ValueError(f"unknown indent character {indent_char!r} (expected one of {sorted(INDENT_CHARACTERS)})") from None
		return cls(indent_character=character, indent_unit_count=indent_width)


__all__ = ["LayoutConfig", "INDENT_CHARACTERS"]
