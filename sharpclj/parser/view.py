# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Zero-copy windows over the token buffer.

The tree builder slices the token stream constantly (method bodies, branch
bodies, statement spans, call arguments). A `TokenView` is a `(buffer, start,
end)` triple; indexing and slicing are relative to the window and produce new
views over the same tuple.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple, Union, overload

from sharpclj.core.span import Span
from sharpclj.lexer.tokens import Token


class TokenView(Sequence[Token]):
	__slots__ = ("_buffer", "_start", "_end")

	def __init__(self, buffer: Tuple[Token, ...], start: int = 0, end: int | None = None) -> None:
		if end is None:
			end = len(buffer)
		if not 0 <= start <= end <= len(buffer):
			raise IndexError(f"token window [{start}:{end}] out of range for {len(buffer)} tokens")
		self._buffer = buffer
		self._start = start
		self._end = end

	@classmethod
	def of(cls, tokens: Sequence[Token]) -> "TokenView":
		if isinstance(tokens, TokenView):
			return tokens
		return cls(tuple(tokens))

	def __len__(self) -> int:
		return self._end - self._start

	@overload
	def __getitem__(self, index: int) -> Token: ...

	@overload
	def __getitem__(self, index: slice) -> "TokenView": ...

	def __getitem__(self, index: Union[int, slice]) -> Union[Token, "TokenView"]:
		if isinstance(index, slice):
			start, stop, step = index.indices(len(self))
			if step != 1:
				raise ValueError("token views do not support stepped slices")
			stop = max(start, stop)
			return TokenView(self._buffer, self._start + start, self._start + stop)
		size = len(self)
		if index < 0:
			index += size
		if not 0 <= index < size:
			raise IndexError(f"token index {index} out of range for window of {size}")
		return self._buffer[self._start + index]

	def __iter__(self) -> Iterator[Token]:
		for idx in range(self._start, self._end):
			yield self._buffer[idx]

	def __repr__(self) -> str:
		return f"TokenView[{self._start}:{self._end}]({self.dump()})"

	def __eq__(self, other: object) -> bool:
		if isinstance(other, TokenView):
			return tuple(self) == tuple(other)
		return NotImplemented

	__hash__ = None  # type: ignore[assignment]

	def kind_at(self, index: int):
		"""Token kind at `index`, or None past either end of the window."""
		if 0 <= index < len(self):
			return self[index].kind
		return None

	def dump(self) -> str:
		"""Textual dump used in parse diagnostics: `Kind(text) Kind ...`."""
		return " ".join(tok.dump() for tok in self)

	def span(self) -> Span:
		"""Span of the first token of the window (unknown for empty windows)."""
		if not len(self):
			return Span()
		return self[0].span


__all__ = ["TokenView"]
