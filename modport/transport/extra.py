# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Runtime shims implied by file extensions.

A template compiles to code that calls the template runtime, and a stylesheet
compiles to code that calls the style injector, so any file that is (or pulls
in) such a file also depends on the runtime package.
"""

from __future__ import annotations

import logging

from modport.graph.model import FileEdge, FileNode, Package, extension_of
from modport.transport.errors import MissingDependencyError
from modport.transport.options import Options

logger = logging.getLogger(__name__)

EXT_DEPS: dict[str, str] = {
	"handlebars": "handlebars-runtime",
	"css": "import-style",
}


def get_extra(file: FileNode, pkg: Package, options: Options | None = None) -> list[FileEdge]:
	"""
	Return the synthetic shim edges to seed `file.lookup` with.

	The shim must be declared by the build's root package (`options.pkg`,
	or `pkg` when no root is given). Nothing is mutated.
	"""
	options = options if options is not None else Options()
	scope = options.pkg if options.pkg is not None else pkg

	def counts(edge: FileEdge) -> bool:
		# a stylesheet pulled in from outside pkg and its direct deps does not count
		if edge.extension != "css":
			return True
		return edge.pkg.name == pkg.name or edge.pkg.name in pkg.dependencies

	out: list[FileEdge] = []
	for ext, name in EXT_DEPS.items():
		if file.extension != ext and not file.has_ext(ext, counts):
			continue
		shim = scope.dependencies.get(name)
		if shim is None:
			raise MissingDependencyError(
				f"{name} not exist, but required .{ext}",
				path=file.filepath,
				package_id=scope.id,
				dependency=name,
				extension=ext,
			)
		out.append(
			FileEdge(
				filepath=shim.main,
				pkg=shim,
				is_relative=False,
				extension=extension_of(shim.main),
			)
		)

	logger.debug("extra deps of %s in package %s: %s", file.filepath, pkg.id, [e.pkg.id for e in out])
	return out
