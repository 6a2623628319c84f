# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Package graph manifest (v0).

A manifest is a JSON snapshot of an already-parsed source tree: packages,
their output roots and declared dependencies, and the resolved require edges
of every file. Loading it never touches source code.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from modport.graph.model import Package, Require

_ALLOWED_TOP = {"format", "version", "root", "packages", "x"}
_ALLOWED_PKG = {"name", "version", "dest", "main", "default_ext", "dependencies", "files", "x"}
_ALLOWED_EDGE = {"package", "path", "relative", "ignore"}


def _require_str(raw: dict[str, Any], key: str, *, what: str) -> str:
	value = raw.get(key)
	if not isinstance(value, str) or not value:
		raise ValueError(f"{what} is missing {key}")
	return value


def _normalize_dest(dest: str) -> str:
	dest = dest.replace("\\", "/")
	if len(dest) > 1:
		dest = dest.rstrip("/")
	return dest


def parse_graph_v0(data: Any) -> Package:
	"""Build a package graph from a decoded manifest and return the root package."""
	if not isinstance(data, dict):
		raise ValueError("graph manifest must be a JSON object")
	if data.get("format") != "modport-graph" or data.get("version") != 0:
		raise ValueError("unsupported graph manifest format/version")
	unknown_top = sorted(set(data.keys()) - _ALLOWED_TOP)
	if unknown_top:
		raise ValueError(f"graph manifest has unknown top-level fields: {', '.join(unknown_top)}")
	root_id = data.get("root")
	if not isinstance(root_id, str) or not root_id:
		raise ValueError("graph manifest is missing root")
	pkgs_raw = data.get("packages")
	if not isinstance(pkgs_raw, dict) or not pkgs_raw:
		raise ValueError("graph manifest packages must be a non-empty object")

	pkgs: dict[str, Package] = {}
	for package_id, raw in pkgs_raw.items():
		what = f"graph package '{package_id}'"
		if not isinstance(raw, dict):
			raise ValueError(f"{what} must be an object")
		unknown = sorted(set(raw.keys()) - _ALLOWED_PKG)
		if unknown:
			raise ValueError(f"{what} has unknown fields: {', '.join(unknown)}")
		pkg = Package(
			id=package_id,
			name=_require_str(raw, "name", what=what),
			version=_require_str(raw, "version", what=what),
			dest=_normalize_dest(_require_str(raw, "dest", what=what)),
		)
		if "main" in raw:
			pkg.main = _require_str(raw, "main", what=what)
		if "default_ext" in raw:
			pkg.default_ext = _require_str(raw, "default_ext", what=what)
		files = raw.get("files", {})
		if not isinstance(files, dict):
			raise ValueError(f"{what} files must be an object")
		for filepath in files:
			pkg.add_file(filepath)
		pkgs[package_id] = pkg

	if root_id not in pkgs:
		raise ValueError(f"graph manifest root '{root_id}' is not a known package")

	for package_id, raw in pkgs_raw.items():
		pkg = pkgs[package_id]
		deps = raw.get("dependencies", {})
		if not isinstance(deps, dict):
			raise ValueError(f"graph package '{package_id}' dependencies must be an object")
		for dep_name, dep_id in deps.items():
			if dep_id not in pkgs:
				raise ValueError(f"graph package '{package_id}' depends on unknown package '{dep_id}'")
			if pkgs[dep_id].name != dep_name:
				raise ValueError(
					f"graph package '{package_id}' dependency '{dep_name}' points at package named '{pkgs[dep_id].name}'"
				)
			pkg.dependencies[dep_name] = pkgs[dep_id]

		for filepath, edges in raw.get("files", {}).items():
			what = f"graph file '{filepath}' of package '{package_id}'"
			if not isinstance(edges, list):
				raise ValueError(f"{what} requires must be a list")
			node = pkg.files[filepath]
			for edge in edges:
				if not isinstance(edge, dict):
					raise ValueError(f"{what} require must be an object")
				unknown = sorted(set(edge.keys()) - _ALLOWED_EDGE)
				if unknown:
					raise ValueError(f"{what} require has unknown fields: {', '.join(unknown)}")
				target_id = _require_str(edge, "package", what=f"{what} require")
				target_path = _require_str(edge, "path", what=f"{what} require")
				if target_id not in pkgs:
					raise ValueError(f"{what} requires unknown package '{target_id}'")
				target_pkg = pkgs[target_id]
				ignore = bool(edge.get("ignore", False))
				if not ignore and target_path not in target_pkg.files:
					raise ValueError(f"{what} requires unknown file '{target_path}' of package '{target_id}'")
				is_relative = edge.get("relative")
				if not isinstance(is_relative, bool):
					raise ValueError(f"{what} require field 'relative' must be a boolean")
				if is_relative and target_pkg is not pkg:
					raise ValueError(f"{what} has a relative require into another package '{target_id}'")
				node.requires.append(Require(pkg=target_pkg, filepath=target_path, is_relative=is_relative, ignore=ignore))

	return pkgs[root_id]


def load_graph_v0(path: Path) -> Package:
	"""Load and validate a graph manifest file, returning the root package."""
	data = json.loads(path.read_text(encoding="utf-8"))
	return parse_graph_v0(data)
