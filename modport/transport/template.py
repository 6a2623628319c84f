# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Id prefix templates.

A template is literal text with `{field}` placeholders that are filled from
package metadata. Templates are parsed once and cached.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Tree
from lark.exceptions import LarkError

from modport.graph.model import Package
from modport.transport.errors import TemplateError

_GRAMMAR_PATH = Path(__file__).with_name("template.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text(encoding="utf-8")

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	start="start",
	maybe_placeholders=False,
)

TEMPLATE_FIELDS = ("id", "name", "version", "main")


def _name(tree: Tree) -> str:
	return str(tree.data)


def _token(tree: Tree, template: str) -> str:
	tok = tree.children[0] if tree.children else None
	if not isinstance(tok, Token):
		raise TemplateError(f"expected a token under {_name(tree)} in id template {template!r}")
	return tok.value


@lru_cache(maxsize=256)
def compile_template(template: str) -> tuple[str | tuple[str], ...]:
	try:
		tree = _PARSER.parse(template)
	except LarkError as err:
		raise TemplateError(f"malformed id template {template!r}: {err}") from err

	segments: list[str | tuple[str]] = []
	for child in tree.children:
		if not isinstance(child, Tree):
			continue
		kind = _name(child)
		if kind == "text":
			segments.append(_token(child, template))
		elif kind == "lbrace":
			segments.append("{")
		elif kind == "rbrace":
			segments.append("}")
		elif kind == "placeholder":
			field = _token(child, template)
			if field not in TEMPLATE_FIELDS:
				raise TemplateError(
					f"unknown placeholder {{{field}}} in id template {template!r}",
					known=TEMPLATE_FIELDS,
				)
			segments.append((field,))
		else:
			raise TemplateError(f"unexpected template node {kind} in id template {template!r}")
	return tuple(segments)


def render_template(template: str, pkg: Package) -> str:
	"""Render `template` against the metadata of `pkg`."""
	out: list[str] = []
	for seg in compile_template(template):
		if isinstance(seg, tuple):
			out.append(str(getattr(pkg, seg[0])))
		else:
			out.append(seg)
	return "".join(out)
