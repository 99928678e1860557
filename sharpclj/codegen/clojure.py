# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Clojure generator: AST -> target text.

One visitor per node kind (`_visit_<Kind>`), looked up from `Node.kind`. The
output is flat (one statement per line, no indentation); the layout pass
indents it afterwards.

Bindings and branches are emitted *open*: a `let` scopes every statement that
follows it in the same body, and an `if` stays open so a following `else`
branch lands in it. Methods then close whatever is still open, and branches
close everything except their own `if`/`do` form.
"""

from __future__ import annotations

import logging
from typing import Iterable

from sharpclj.core.errors import GenerationError
from sharpclj.parser import ast

logger = logging.getLogger(__name__)

LINE_COMMENT = ";"


def _strip_comment(line: str) -> str:
	# Generated code only contains `;` as the comment marker.
	cut = line.find(LINE_COMMENT)
	return line if cut < 0 else line[:cut]


def unmatched_parens(text: str) -> int:
	"""Count of `(` without a matching `)`, ignoring line-comment text."""
	balance = 0
	for line in text.split("\n"):
		code = _strip_comment(line)
		balance += code.count("(") - code.count(")")
	return balance


def close_unmatched(text: str, slack: int = 0) -> str:
	"""
	Append one `)` per unmatched `(` in `text`, less `slack`.

	Closers never go on a line that ends in a comment.
	"""
	missing = unmatched_parens(text) - slack
	if missing <= 0:
		return text
	last_line = text.rsplit("\n", 1)[-1]
	if LINE_COMMENT in last_line:
		text += "\n"
	return text + ")" * missing


class ClojureGenerator:
	"""Render a Namespace AST as Clojure source text."""

	def generate(self, root: ast.Node) -> str:
		if root.kind is not ast.NodeKind.NAMESPACE:
			raise GenerationError(f"expected a Namespace root, got {root.kind.value}")
		text = self.render(root)
		logger.debug("generated %d characters for namespace %s", len(text), root.label)
		return text

	def render(self, node: ast.Node) -> str:
		"""Dispatch a node to its per-kind visitor."""
		method = getattr(self, f"_visit_{node.kind.value}", None)
		if method is None:
			raise GenerationError(f"unable to convert syntax tree node {node.kind.value} to code")
		return method(node)

	def _render_all(self, nodes: Iterable[ast.Node], sep: str) -> str:
		return sep.join(self.render(n) for n in nodes)

	def _visit_Namespace(self, node: ast.Namespace) -> str:
		parts = [f"(ns {node.label})\n\n"]
		for member in node.children:
			text = self.render(member)
			if member.kind is not ast.NodeKind.METHOD:
				text += "\n\n"
			parts.append(text)
		return "".join(parts)

	def _visit_Class(self, node: ast.Class) -> str:
		raise GenerationError(
			f"classes are not supported (class {node.label})",
			notes=["only namespace-level methods and calls can be transpiled"],
		)

	def _visit_Method(self, node: ast.Method) -> str:
		params = " ".join(arg.label or "" for arg in node.arguments)
		text = f"(defn {node.label} [{params}]\n" + self._render_all(node.body, "\n")
		return close_unmatched(text) + "\n\n"

	def _visit_MethodArgument(self, node: ast.MethodArgument) -> str:
		return node.label or ""

	def _visit_Literal(self, node: ast.Literal) -> str:
		if node.label == "null":
			return "nil"
		return node.label or ""

	def _visit_Expression(self, node: ast.Expression) -> str:
		if not node.children:
			return f"({node.label})"
		return f"({node.label} {self._render_all(node.children, ' ')})"

	def _visit_EqualityCheck(self, node: ast.EqualityCheck) -> str:
		return f"(= {self._render_all(node.children, ' ')})"

	def _visit_Assignment(self, node: ast.Assignment) -> str:
		if node.is_compound:
			bindings = "\n".join(self._binding(child) for child in node.children)
		else:
			bindings = self._binding(node)
		return f"(let [{bindings}]"

	def _binding(self, node: ast.Node) -> str:
		if node.kind is not ast.NodeKind.ASSIGNMENT or node.label is None or len(node.children) != 1:
			raise GenerationError(f"malformed assignment node:\n{ast.dump(node)}")
		return f"{node.label} {self.render(node.children[0])}"

	def _visit_Branch(self, node: ast.Branch) -> str:
		if node.label == "if":
			if node.condition is None:
				raise GenerationError("if branch without a condition")
			head = f"(if {self.render(node.condition)}\n"
		else:
			head = ""
		text = head + self._branch_body(node.body)
		# The if/do form itself is closed one level up.
		return close_unmatched(text, slack=1)

	def _branch_body(self, body: tuple) -> str:
		if not body:
			return "nil"
		if len(body) == 1:
			return self.render(body[0])
		inner = self._render_all(body, "\n")
		if LINE_COMMENT in inner.rsplit("\n", 1)[-1]:
			inner += "\n"
		return "(do\n" + inner + ")"

	def _visit_Comment(self, node: ast.Comment) -> str:
		return f"{LINE_COMMENT}{node.label or ''}"

	def _visit_Collection(self, node: ast.Collection) -> str:
		return f"[{self._render_all(node.children, ' ')}]"


def generate(root: ast.Node) -> str:
	return ClojureGenerator().generate(root)


__all__ = ["ClojureGenerator", "generate", "unmatched_parens", "close_unmatched"]
