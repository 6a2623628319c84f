# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Module headers for the build host.

The host hands over one emitted file at a time; this module works out its id
and dependency list and renders the `define(...)` wrapper around its body.
File contents and disk I/O stay with the host.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from modport.graph.model import extension_of
from modport.transport.deps import transport_deps
from modport.transport.errors import TransportError
from modport.transport.ids import get_style_id, transport_id
from modport.transport.locate import EmittedFile, get_file_info
from modport.transport.options import Options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModuleHeader:
	id: str
	deps: list[str]
	style_id: str | None = None

	def to_dict(self) -> dict[str, Any]:
		return {"id": self.id, "deps": list(self.deps), "style_id": self.style_id}


def transport_file(file: EmittedFile, options: Options) -> ModuleHeader:
	"""Compute the header of one emitted file of the build rooted at `options.pkg`."""
	if options.pkg is None:
		raise TransportError("pkg missing", path=file.path, code="pkg-missing")

	info = get_file_info(file, options.pkg)
	id_ = transport_id(info.origin_path, info.pkg, options)
	deps = transport_deps(info.origin_path, info.pkg, options)

	style_id = None
	if options.style_box and extension_of(info.origin_path) == "css":
		style_id = get_style_id(file, options)

	logger.debug("header of %s: id=%s deps=%s", file.path, id_, deps)
	return ModuleHeader(id=id_, deps=deps, style_id=style_id)


def render_define(header: ModuleHeader, body: str) -> str:
	"""Wrap `body` in a CMD `define` call carrying the header."""
	deps = ", ".join(json.dumps(d) for d in header.deps)
	return f"define({json.dumps(header.id)}, [{deps}], function(require, exports, module){{\n{body}\n}});\n"
