# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Transport config file (v0).

Example:

	{
		"format": "modport-transport",
		"version": 0,
		"idleading": "{name}/{version}/",
		"rename": [{"suffix": "-debug"}],
		"ignore": ["jquery"],
		"include": "relative",
		"style_box": false
	}

Every key other than format/version is optional. Computed idleading and
rename callables are only available through the Python API.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from modport.graph.model import Package
from modport.transport.options import INCLUDE_MODES, Options, make_options

_ALLOWED_TOP = {"format", "version", "idleading", "rename", "ignore", "include", "style_box", "x"}


def parse_config_v0(data: Any, *, pkg: Package | None = None) -> Options:
	if not isinstance(data, dict):
		raise ValueError("transport config must be a JSON object")
	if data.get("format") != "modport-transport" or data.get("version") != 0:
		raise ValueError("unsupported transport config format/version")
	unknown = sorted(set(data.keys()) - _ALLOWED_TOP)
	if unknown:
		raise ValueError(f"transport config has unknown fields: {', '.join(unknown)}")

	idleading = data.get("idleading")
	if idleading is not None and not isinstance(idleading, str):
		raise ValueError("transport config idleading must be a string")
	rename = data.get("rename", [])
	if not isinstance(rename, list):
		raise ValueError("transport config rename must be a list of rules")
	ignore = data.get("ignore", [])
	if isinstance(ignore, str):
		ignore = [ignore]
	if not isinstance(ignore, list) or any((not isinstance(n, str) or not n) for n in ignore):
		raise ValueError("transport config ignore must be a package name or a list of package names")
	include = data.get("include")
	if include is not None and include not in INCLUDE_MODES:
		raise ValueError(f"transport config include must be one of: {', '.join(INCLUDE_MODES)}")
	style_box = data.get("style_box", False)
	if not isinstance(style_box, bool):
		raise ValueError("transport config style_box must be a boolean")

	return make_options(
		idleading=idleading,
		rename=rename,
		ignore=ignore,
		include=include,
		style_box=style_box,
		pkg=pkg,
	)


def load_config_v0(path: Path, *, pkg: Package | None = None) -> Options:
	data = json.loads(path.read_text(encoding="utf-8"))
	return parse_config_v0(data, pkg=pkg)
