import pytest

from sharpclj.codegen.layout import Prettifier, prettify
from sharpclj.config import LayoutConfig


def _squeeze(text: str) -> str:
	return "".join(text.split())


def test_indents_by_depth():
	generated = "(ns App)\n\n(defn Add [a b]\n(+ a b))\n\n"
	assert prettify(generated) == "(ns App)\n\n(defn Add [a b]\n    (+ a b))\n\n"


def test_whitespace_before_closer_is_dropped():
	assert prettify("(a\n)") == "(a)"
	assert prettify("(foo )") == "(foo)"
	assert prettify("(a\n\n  )") == "(a)"


def test_closer_after_comment_gets_its_own_line():
	generated = "(defn F []\n(Print 1)\n; done\n)\n\n"
	assert prettify(generated) == "(defn F []\n    (Print 1)\n    ; done\n    )\n\n"


def test_parens_inside_comments_do_not_change_depth():
	generated = "(defn F []\n; see (Foo\n(Print 1))"
	assert prettify(generated) == "(defn F []\n    ; see (Foo\n    (Print 1))"


def test_tab_indentation():
	config = LayoutConfig(indent_character="\t", indent_unit_count=1)
	assert Prettifier(config).prettify("(a\n(b\nc))") == "(a\n\t(b\n\t\tc))"


def test_custom_width():
	assert prettify("(a\nb)", LayoutConfig(indent_unit_count=2)) == "(a\n  b)"


def test_empty_text():
	assert prettify("") == ""


@pytest.mark.parametrize(
	"generated",
	[
		"(ns App)\n\n(defn Max [a b]\n(if (= a b)\na\nb))\n\n",
		"(defn F []\n(let [x 1\ny 2]\n(Print x y)))\n\n",
		"(defn F []\n(Print 1)\n; done\n)\n\n",
	],
)
def test_only_whitespace_changes(generated: str):
	assert _squeeze(prettify(generated)) == _squeeze(generated)
