# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from typing import Callable

import pytest

from modport.graph.model import Package


def _make_pkg(
	name: str,
	version: str = "1.0.0",
	*,
	files: tuple[str, ...] | list[str] = ("index.js",),
	dest: str | None = None,
	main: str = "index.js",
	deps: tuple[Package, ...] | list[Package] = (),
) -> Package:
	pkg = Package(
		id=f"{name}@{version}",
		name=name,
		version=version,
		dest=dest if dest is not None else f"/out/{name}",
		main=main,
	)
	for filepath in files:
		pkg.add_file(filepath)
	for dep in deps:
		pkg.dependencies[dep.name] = dep
	return pkg


@pytest.fixture
def make_pkg() -> Callable[..., Package]:
	"""
	Build a package `<name>@<version>` rooted at `/out/<name>`.

	Files are created empty; tests wire requires with `FileNode.require`.
	"""
	return _make_pkg
