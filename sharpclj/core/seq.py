# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Small sequence helpers shared by the tree builder and the driver.

Searches return `None` for "not found" rather than a sentinel index.
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

_LISP_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def index_of(seq: Sequence[T], predicate: Callable[[T], bool], start: int = 0) -> Optional[int]:
	"""Index of the first item at or after `start` satisfying `predicate`."""
	for idx in range(max(start, 0), len(seq)):
		if predicate(seq[idx]):
			return idx
	return None


def last_index_of(seq: Sequence[T], predicate: Callable[[T], bool]) -> Optional[int]:
	"""Index of the first item satisfying `predicate`, scanning backward."""
	for idx in range(len(seq) - 1, -1, -1):
		if predicate(seq[idx]):
			return idx
	return None


def group_while(seq: Sequence[T], predicate: Callable[[T, T], bool]) -> List[List[T]]:
	"""
	Partition `seq` into maximal runs where `predicate(prev, cur)` holds for
	every adjacent pair.

	    group_while([1, 2, 2, 2, 1], lambda a, b: a == b) -> [[1], [2, 2, 2], [1]]
	"""
	groups: List[List[T]] = []
	current: List[T] = []
	for item in seq:
		if current and not predicate(current[-1], item):
			groups.append(current)
			current = []
		current.append(item)
	if current:
		groups.append(current)
	return groups


def to_lisp_case(name: str) -> str:
	"""`UpperCamelCase` -> `upper-camel-case`."""
	return _LISP_CASE_BOUNDARY.sub(r"\1-\2", name).lower()


__all__ = ["index_of", "last_index_of", "group_while", "to_lisp_case"]
