# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
AST for the C#-subset front end.

Every node is an immutable `label` + `children` pair; the concrete class fixes
the node kind. The kind set is closed (`NodeKind`) and the generator keeps one
visitor per kind.

Pipeline placement:
  tokens -> AST (this file) -> Clojure text -> re-indented text
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple


class NodeKind(Enum):
	NAMESPACE = "Namespace"
	CLASS = "Class"
	METHOD = "Method"
	METHOD_ARGUMENT = "MethodArgument"
	LITERAL = "Literal"
	EXPRESSION = "Expression"
	ASSIGNMENT = "Assignment"
	EQUALITY_CHECK = "EqualityCheck"
	BRANCH = "Branch"
	COMMENT = "Comment"
	COLLECTION = "Collection"


@dataclass(frozen=True)
class Node:
	"""Base class for all AST nodes."""

	kind: ClassVar[NodeKind]
	label: Optional[str] = None
	children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Namespace(Node):
	"""Tree root; label is the namespace name, children the top-level members."""

	kind: ClassVar[NodeKind] = NodeKind.NAMESPACE


@dataclass(frozen=True)
class Class(Node):
	kind: ClassVar[NodeKind] = NodeKind.CLASS


@dataclass(frozen=True)
class Method(Node):
	"""Children: MethodArgument nodes first, then the grouped body statements."""

	kind: ClassVar[NodeKind] = NodeKind.METHOD

	@property
	def arguments(self) -> Tuple[Node, ...]:
		return tuple(c for c in self.children if c.kind is NodeKind.METHOD_ARGUMENT)

	@property
	def body(self) -> Tuple[Node, ...]:
		return tuple(c for c in self.children if c.kind is not NodeKind.METHOD_ARGUMENT)


@dataclass(frozen=True)
class MethodArgument(Node):
	kind: ClassVar[NodeKind] = NodeKind.METHOD_ARGUMENT


@dataclass(frozen=True)
class Literal(Node):
	"""Identifier or literal value, spelled as in the source."""

	kind: ClassVar[NodeKind] = NodeKind.LITERAL


@dataclass(frozen=True)
class Expression(Node):
	"""Operator or call; label is the operator / callee name."""

	kind: ClassVar[NodeKind] = NodeKind.EXPRESSION


@dataclass(frozen=True)
class Assignment(Node):
	"""
	Local binding.

	Simple form: label is the variable name, single child is the value.
	Compound form (from statement grouping): no label, children are simple
	assignments in source order.
	"""

	kind: ClassVar[NodeKind] = NodeKind.ASSIGNMENT

	@property
	def is_compound(self) -> bool:
		return self.label is None


@dataclass(frozen=True)
class EqualityCheck(Node):
	kind: ClassVar[NodeKind] = NodeKind.EQUALITY_CHECK


@dataclass(frozen=True)
class Branch(Node):
	"""
	`if` / `else` arm. An `if` branch carries its condition as the first
	child; an `else` branch has body statements only.
	"""

	kind: ClassVar[NodeKind] = NodeKind.BRANCH

	@property
	def condition(self) -> Optional[Node]:
		if self.label == "if" and self.children:
			return self.children[0]
		return None

	@property
	def body(self) -> Tuple[Node, ...]:
		return self.children[1:] if self.label == "if" else self.children


@dataclass(frozen=True)
class Comment(Node):
	kind: ClassVar[NodeKind] = NodeKind.COMMENT


@dataclass(frozen=True)
class Collection(Node):
	kind: ClassVar[NodeKind] = NodeKind.COLLECTION


def dump(node: Node, indent: int = 0) -> str:
	"""Indented one-node-per-line rendering, used by tests and debug logs."""
	label = "" if node.label is None else f" {node.label!r}"
	lines = [f"{'  ' * indent}{node.kind.value}{label}"]
	for child in node.children:
		lines.append(dump(child, indent + 1))
	return "\n".join(lines)


__all__ = [
	"NodeKind",
	"Node",
	"Namespace",
	"Class",
	"Method",
	"MethodArgument",
	"Literal",
	"Expression",
	"Assignment",
	"EqualityCheck",
	"Branch",
	"Comment",
	"Collection",
	"dump",
]
