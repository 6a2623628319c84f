# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import logging
from typing import Iterable

from modport.graph.model import Package

logger = logging.getLogger(__name__)


def get_deps_package(names: str | Iterable[str] | None, pkg: Package) -> list[str]:
	"""
	Expand ignored package names into the ids of every package they pull in.

	The dependency tree of `pkg` is walked depth-first (`pkg` itself is not a
	candidate). A dependency whose key matches one of `names` is included
	together with everything reachable from it. Ids are returned once, in
	discovery order.
	"""
	if names is None:
		wanted: set[str] = set()
	elif isinstance(names, str):
		wanted = {names}
	else:
		wanted = set(names)

	out: list[str] = []
	# package id -> whether it has been walked as included
	walked: dict[str, bool] = {}
	stack: list[tuple[str, Package, bool]] = [(key, dep, False) for key, dep in reversed(pkg.dependencies.items())]
	while stack:
		key, dep, inherited = stack.pop()
		included = inherited or key in wanted
		prior = walked.get(dep.id)
		if prior is not None and (prior or not included):
			continue
		walked[dep.id] = included
		if included and dep.id not in out:
			out.append(dep.id)
		stack.extend((k, d, included) for k, d in reversed(dep.dependencies.items()))

	logger.debug("ignore %s of package %s expands to %s", sorted(wanted), pkg.id, out)
	return out
