# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import logging

from modport.graph.model import FileEdge, Package
from modport.transport.errors import NotIncludedError
from modport.transport.extra import get_extra
from modport.transport.ids import transport_id
from modport.transport.ignore import get_deps_package
from modport.transport.options import Options

logger = logging.getLogger(__name__)


def transport_deps(filepath: str, pkg: Package, options: Options | None = None) -> list[str]:
	"""
	Dependency ids to declare in the header of `filepath`.

	All transitive requires are walked, but relative requires inside other
	packages are skipped: those packages were transported on their own.
	Ignored packages are reported by bare name. With include="all" only the
	ignored packages are reported.
	"""
	file = pkg.files.get(filepath)
	if file is None:
		raise NotIncludedError(
			f"{filepath} is not included in {', '.join(pkg.files)}",
			path=filepath,
			package_id=pkg.id,
			known=tuple(pkg.files),
		)

	options = options if options is not None else Options()
	include = options.include
	extra = get_extra(file, pkg, options)
	ignore = set(get_deps_package(options.ignore, pkg))

	def is_self(other: Package) -> bool:
		return other.name == pkg.name

	def visit_all(edge: FileEdge) -> str | None:
		if not edge.is_relative and (edge.ignore or edge.pkg.id in ignore):
			return edge.pkg.name
		return None

	def visit(edge: FileEdge) -> str | None:
		if edge.ignore:
			return edge.pkg.name

		# stylesheets are injected, never declared
		if edge.extension == "css":
			return None

		# own files are bundled unless this file is transported alone
		if is_self(edge.pkg):
			return transport_id(edge.filepath, edge.pkg, options) if include == "self" else None

		# relative files of a dependency were handled when it was built
		if edge.is_relative:
			return None
		if edge.pkg.id in ignore:
			return edge.pkg.name
		if include == "self":
			return None
		return transport_id(edge.filepath, edge.pkg, options)

	if include == "all":
		deps = file.lookup(visit_all, extra)
	else:
		deps = file.lookup(visit, extra)

	logger.debug("transport deps(%s) of package %s, include: %s", deps, pkg.id, include)
	return deps
