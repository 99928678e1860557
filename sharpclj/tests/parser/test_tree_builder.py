import pytest

from sharpclj.core.errors import ParseError
from sharpclj.lexer import tokenize
from sharpclj.parser import ast, parse_tokens
from sharpclj.parser.builder import parse_block
from sharpclj.parser.view import TokenView


def _lit(text: str) -> ast.Literal:
	return ast.Literal(label=text)


def _block(source: str) -> tuple:
	return parse_block(TokenView.of(tokenize(source)))


def test_add_method_tree():
	tree = parse_tokens(tokenize("namespace App int Add(int a, int b) { return a + b; }"))
	assert tree == ast.Namespace(
		label="App",
		children=(
			ast.Method(
				label="Add",
				children=(
					ast.MethodArgument(label="a"),
					ast.MethodArgument(label="b"),
					ast.Expression(label="+", children=(_lit("a"), _lit("b"))),
				),
			),
		),
	)


def test_missing_namespace_header_fails():
	with pytest.raises(ParseError, match="namespace"):
		parse_tokens(tokenize("int Add(int a) { return a; }"))
	with pytest.raises(ParseError, match="namespace"):
		parse_tokens(())


def test_dotted_namespace_name():
	tree = parse_tokens(tokenize("namespace Demo.App.Core { }"))
	assert tree.label == "Demo.App.Core"
	assert tree.children == ()


def test_modifiers_and_braced_namespace_are_skipped():
	tree = parse_tokens(
		tokenize(
			"""
namespace App
{
	// top-level comments are skipped
	public static void Main()
	{
		Print(1);
	}
}
"""
		)
	)
	(method,) = tree.children
	assert method == ast.Method(label="Main", children=(ast.Expression(label="Print", children=(_lit("1"),)),))


def test_top_level_bare_call_statement():
	tree = parse_tokens(tokenize("namespace App Main(); void Main() { }"))
	assert tree.children == (
		ast.Expression(label="Main"),
		ast.Method(label="Main"),
	)


def test_class_is_parsed_as_statement_block():
	tree = parse_tokens(tokenize("namespace App class Foo { int x = 1; } void F() { }"))
	assert tree.children == (
		ast.Class(label="Foo", children=(ast.Assignment(label="x", children=(_lit("1"),)),)),
		ast.Method(label="F"),
	)


def test_unbalanced_method_body_fails():
	with pytest.raises(ParseError, match="no matching"):
		parse_tokens(tokenize("namespace App int F() { return 1;"))


def test_if_else_statement_block():
	nodes = _block("if (a == b) { return a; } else { return b; }")
	assert nodes == (
		ast.Branch(
			label="if",
			children=(ast.EqualityCheck(label="==", children=(_lit("a"), _lit("b"))), _lit("a")),
		),
		ast.Branch(label="else", children=(_lit("b"),)),
	)
	assert nodes[0].condition == ast.EqualityCheck(label="==", children=(_lit("a"), _lit("b")))
	assert nodes[1].body == (_lit("b"),)


def test_nested_if_inside_branch_body():
	(outer,) = _block("if (a) { if (b) { x; } y; }")
	assert outer == ast.Branch(
		label="if",
		children=(
			_lit("a"),
			ast.Branch(label="if", children=(_lit("b"), _lit("x"))),
			_lit("y"),
		),
	)


def test_condition_with_nested_parentheses():
	(branch,) = _block("if (Ready(x)) { z; }")
	assert branch.condition == ast.Expression(label="Ready", children=(_lit("x"),))
	assert branch.body == (_lit("z"),)


def test_else_if_nests_an_if_in_the_else_branch():
	nodes = _block("if (a) { x; } else if (b) { y; } else { z; }")
	assert nodes == (
		ast.Branch(label="if", children=(_lit("a"), _lit("x"))),
		ast.Branch(label="else", children=(ast.Branch(label="if", children=(_lit("b"), _lit("y"))),)),
		ast.Branch(label="else", children=(_lit("z"),)),
	)


def test_consecutive_assignments_are_grouped():
	nodes = _block("int x = 1; int y = 2; Print(x, y);")
	assert nodes == (
		ast.Assignment(
			children=(
				ast.Assignment(label="x", children=(_lit("1"),)),
				ast.Assignment(label="y", children=(_lit("2"),)),
			)
		),
		ast.Expression(label="Print", children=(_lit("x"), _lit("y"))),
	)
	assert nodes[0].is_compound


def test_comments_and_empty_statements_in_blocks():
	nodes = _block("// first\n;; Print(1); return;")
	assert nodes == (
		ast.Comment(label=" first"),
		ast.Expression(label="Print", children=(_lit("1"),)),
	)


def test_method_arguments_come_before_body():
	tree = parse_tokens(tokenize("namespace App void F(List<int> xs, string name, bool flag) { Use(xs); }"))
	(method,) = tree.children
	assert [a.label for a in method.arguments] == ["xs", "name", "flag"]
	assert method.body == (ast.Expression(label="Use", children=(_lit("xs"),)),)


def test_array_parameter_yields_an_unnamed_argument():
	# Every third token is `[` for `string[] args`.
	tree = parse_tokens(tokenize("namespace App void Main(string[] args) { Run(); }"))
	(method,) = tree.children
	assert method.arguments == (ast.MethodArgument(label=None),)
	assert method.body == (ast.Expression(label="Run"),)


def test_array_return_type_is_not_a_method():
	with pytest.raises(ParseError, match="failed to parse expression"):
		parse_tokens(tokenize("namespace App static int[] F() { }"))
