# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest
from lark import Tree

from modport.transport.errors import TemplateError
from modport.transport.template import _token, compile_template, render_template


def test_render_substitutes_package_fields(make_pkg) -> None:
	pkg = make_pkg("foo", "1.0.0", main="foo.js")
	assert render_template("{name}/{version}/", pkg) == "foo/1.0.0/"
	assert render_template("{id}:{main}", pkg) == "foo@1.0.0:foo.js"
	assert render_template("static/", pkg) == "static/"
	assert render_template("", pkg) == ""


def test_render_supports_escaped_braces(make_pkg) -> None:
	pkg = make_pkg("foo")
	assert render_template("{{{name}", pkg) == "{foo"
	assert render_template("a}}b", pkg) == "a}b"


def test_compile_is_cached_and_segmented() -> None:
	first = compile_template("x/{name}-{version}")
	assert first == ("x/", ("name",), "-", ("version",))
	assert compile_template("x/{name}-{version}") is first


@pytest.mark.parametrize("template", ["{name", "{name}}", "a}b", "{}", "{1abc}"])
def test_malformed_templates_are_rejected(template: str, make_pkg) -> None:
	with pytest.raises(TemplateError, match="malformed id template"):
		render_template(template, make_pkg("foo"))


def test_unknown_placeholder_is_rejected(make_pkg) -> None:
	with pytest.raises(TemplateError) as excinfo:
		render_template("{family}/{name}", make_pkg("foo"))
	err = excinfo.value
	assert err.reason_code == "bad-template"
	assert "unknown placeholder {family}" in err.message
	assert err.known == ("id", "name", "version", "main")


def test_node_without_token_is_a_template_error() -> None:
	with pytest.raises(TemplateError, match="expected a token under placeholder"):
		_token(Tree("placeholder", []), "{}")
