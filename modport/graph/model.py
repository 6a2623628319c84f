# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
In-memory package graph.

Packages and files are built once by a loader (see `graph_v0`) and then only
read by the transport engine. Identity is by object: two packages with equal
fields are still different nodes.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Callable, Iterable


def extension_of(filepath: str) -> str:
	"""Return the extension of `filepath` without the leading dot ('' if none)."""
	return posixpath.splitext(filepath)[1][1:]


@dataclass(eq=False)
class Package:
	id: str
	name: str
	version: str
	dest: str
	main: str = "index.js"
	default_ext: str = "js"
	files: dict[str, FileNode] = field(default_factory=dict)
	dependencies: dict[str, Package] = field(default_factory=dict)

	def __repr__(self) -> str:
		return f"Package({self.id!r})"

	def add_file(self, filepath: str) -> FileNode:
		node = self.files.get(filepath)
		if node is None:
			node = FileNode(filepath=filepath, pkg=self)
			self.files[filepath] = node
		return node

	def get_packages(self) -> dict[str, Package]:
		"""
		Flatten this package and every transitive dependency into an id map.

		Self comes first, the rest follow depth-first discovery order.
		"""
		out: dict[str, Package] = {}
		stack: list[Package] = [self]
		while stack:
			pkg = stack.pop()
			if pkg.id in out:
				continue
			out[pkg.id] = pkg
			stack.extend(reversed(list(pkg.dependencies.values())))
		return out


@dataclass(frozen=True)
class Require:
	"""An outgoing require edge as resolved by the graph builder."""

	pkg: Package
	filepath: str
	is_relative: bool
	ignore: bool = False


@dataclass(frozen=True)
class FileEdge:
	"""What a `lookup` visitor sees for each reachable file."""

	filepath: str
	pkg: Package
	is_relative: bool
	extension: str
	ignore: bool = False


Visitor = Callable[[FileEdge], "str | bool | None"]


@dataclass(eq=False)
class FileNode:
	filepath: str
	pkg: Package
	requires: list[Require] = field(default_factory=list)

	def __repr__(self) -> str:
		return f"FileNode({self.pkg.id!r}, {self.filepath!r})"

	@property
	def extension(self) -> str:
		return extension_of(self.filepath)

	def require(self, target: FileNode, *, is_relative: bool | None = None, ignore: bool = False) -> None:
		if is_relative is None:
			is_relative = target.pkg is self.pkg
		self.requires.append(Require(pkg=target.pkg, filepath=target.filepath, is_relative=is_relative, ignore=ignore))

	def lookup(self, visitor: Visitor, extra: Iterable[FileEdge] = ()) -> list[str]:
		"""
		Walk the transitive require graph and collect visitor results.

		The visitor runs once per distinct edge, keyed by (package id,
		filepath, is_relative, ignore), so a file reached both through a
		relative require and an entry require is seen both ways. Each file is
		expanded once; the seed itself is never visited. Extra edges are
		seeded after the file's own requires. Results that are `None` or
		`False` are skipped, the rest are deduplicated keeping the first
		occurrence.
		"""
		seed = (self.pkg.id, self.filepath)
		expanded: set[tuple[str, str]] = {seed}
		visited: set[tuple[str, str, bool, bool]] = set()
		out: list[str] = []
		seen: set[str] = set()

		stack: list[FileEdge] = list(reversed(list(extra)))
		stack.extend(reversed(self._edges()))
		while stack:
			edge = stack.pop()
			key = (edge.pkg.id, edge.filepath)
			if key == seed:
				continue
			sig = (edge.pkg.id, edge.filepath, edge.is_relative, edge.ignore)
			if sig in visited:
				continue
			visited.add(sig)

			result = visitor(edge)
			if result is not None and result is not False and result not in seen:
				seen.add(result)
				out.append(result)

			if edge.ignore or key in expanded:
				continue
			node = edge.pkg.files.get(edge.filepath)
			if node is not None:
				expanded.add(key)
				stack.extend(reversed(node._edges()))
		return out

	def has_ext(self, ext: str, predicate: Callable[[FileEdge], bool] | None = None) -> bool:
		"""Whether a reachable file accepted by `predicate` has extension `ext`."""

		def visit(edge: FileEdge) -> str | None:
			if edge.extension != ext:
				return None
			if predicate is not None and not predicate(edge):
				return None
			return "hit"

		return bool(self.lookup(visit))

	def _edges(self) -> list[FileEdge]:
		return [
			FileEdge(
				filepath=r.filepath,
				pkg=r.pkg,
				is_relative=r.is_relative,
				extension=extension_of(r.filepath),
				ignore=r.ignore,
			)
			for r in self.requires
		]
