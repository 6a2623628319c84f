# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from modport.graph.model import FileEdge, Require, extension_of


def test_extension_of_strips_dot() -> None:
	assert extension_of("a/b.js") == "js"
	assert extension_of("style.css") == "css"
	assert extension_of("lib/util") == ""
	assert extension_of("tpl.min.handlebars") == "handlebars"


def test_require_defaults_relative_to_same_package(make_pkg) -> None:
	bar = make_pkg("bar")
	app = make_pkg("app", files=["index.js", "util.js"], deps=[bar])
	index = app.files["index.js"]
	index.require(app.files["util.js"])
	index.require(bar.files["index.js"])
	assert [r.is_relative for r in index.requires] == [True, False]


def test_lookup_visits_in_discovery_order_and_skips_seed(make_pkg) -> None:
	app = make_pkg("app", files=["index.js", "a.js", "b.js", "c.js"])
	f = app.files
	f["index.js"].require(f["a.js"])
	f["index.js"].require(f["c.js"])
	f["a.js"].require(f["b.js"])
	f["b.js"].require(f["index.js"])

	seen = f["index.js"].lookup(lambda e: e.filepath)
	assert seen == ["a.js", "b.js", "c.js"]


def test_lookup_terminates_on_cycles(make_pkg) -> None:
	app = make_pkg("app", files=["index.js", "a.js", "b.js"])
	f = app.files
	f["index.js"].require(f["a.js"])
	f["a.js"].require(f["b.js"])
	f["b.js"].require(f["a.js"])
	f["b.js"].require(f["index.js"])

	calls: list[str] = []

	def visit(edge: FileEdge) -> str:
		calls.append(edge.filepath)
		return edge.filepath

	assert f["index.js"].lookup(visit) == ["a.js", "b.js"]
	assert calls == ["a.js", "b.js"]


def test_lookup_dedups_results_keeping_first(make_pkg) -> None:
	jquery = make_pkg("jquery", files=["index.js", "plugin.js"])
	app = make_pkg("app", files=["index.js", "util.js"], deps=[jquery])
	f = app.files
	f["index.js"].require(jquery.files["index.js"])
	f["index.js"].require(f["util.js"])
	f["index.js"].require(jquery.files["plugin.js"])

	out = f["index.js"].lookup(lambda e: e.pkg.name)
	assert out == ["jquery", "app"]


def test_lookup_skips_false_and_none(make_pkg) -> None:
	app = make_pkg("app", files=["index.js", "a.js", "b.js"])
	f = app.files
	f["index.js"].require(f["a.js"])
	f["index.js"].require(f["b.js"])
	out = f["index.js"].lookup(lambda e: False if e.filepath == "a.js" else None)
	assert out == []


def test_lookup_does_not_descend_into_ignored_edges(make_pkg) -> None:
	zepto = make_pkg("zepto")
	jquery = make_pkg("jquery", deps=[zepto])
	jquery.files["index.js"].require(zepto.files["index.js"])
	app = make_pkg("app", deps=[jquery])
	app.files["index.js"].requires.append(Require(pkg=jquery, filepath="index.js", is_relative=False, ignore=True))

	out = app.files["index.js"].lookup(lambda e: f"{e.pkg.name}:{e.ignore}")
	assert out == ["jquery:True"]


def test_lookup_seeds_extra_edges_after_own_requires(make_pkg) -> None:
	shim = make_pkg("import-style", files=["index.js", "inject.js"])
	shim.files["index.js"].require(shim.files["inject.js"])
	app = make_pkg("app", files=["index.js", "style.css"])
	app.files["index.js"].require(app.files["style.css"])
	extra = [FileEdge(filepath="index.js", pkg=shim, is_relative=False, extension="js")]

	out = app.files["index.js"].lookup(lambda e: f"{e.pkg.name}/{e.filepath}", extra)
	assert out == ["app/style.css", "import-style/index.js", "import-style/inject.js"]


def test_lookup_visits_a_file_once_per_edge_kind(make_pkg) -> None:
	bar = make_pkg("bar", files=["index.js", "a.js", "b.js"])
	bar.files["a.js"].require(bar.files["index.js"])
	bar.files["index.js"].require(bar.files["b.js"])
	app = make_pkg("app", deps=[bar])
	app.files["index.js"].require(bar.files["a.js"])
	app.files["index.js"].require(bar.files["index.js"])

	calls: list[tuple[str, bool]] = []

	def visit(edge: FileEdge) -> None:
		calls.append((edge.filepath, edge.is_relative))

	app.files["index.js"].lookup(visit)
	# bar/index.js is expanded once, so bar/b.js is reached once
	assert calls == [("a.js", False), ("index.js", True), ("b.js", True), ("index.js", False)]


def test_has_ext_honors_predicate(make_pkg) -> None:
	app = make_pkg("app", files=["index.js", "a.js", "style.css"])
	f = app.files
	f["index.js"].require(f["a.js"])
	f["a.js"].require(f["style.css"])
	assert f["index.js"].has_ext("css")
	assert not f["index.js"].has_ext("handlebars")
	assert not f["index.js"].has_ext("css", lambda e: e.filepath != "style.css")
	# the seed itself is not a dependency
	assert not f["style.css"].has_ext("css")


def test_get_packages_flattens_self_first_and_handles_cycles(make_pkg) -> None:
	c = make_pkg("c")
	b = make_pkg("b", deps=[c])
	a = make_pkg("a", deps=[b, c])
	c.dependencies["a"] = a

	pkgs = a.get_packages()
	assert list(pkgs) == ["a@1.0.0", "b@1.0.0", "c@1.0.0"]
	assert pkgs["c@1.0.0"] is c
