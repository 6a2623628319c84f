# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Module transport.

Computes loader ids for files of a package build and the dependency ids each
transported module declares in its `define` header:

- `transport_id`: id of a file within its package
- `transport_deps`: ordered dependency ids of a file
- `get_file_info`: which package an emitted file belongs to
- `get_extra`: runtime shim edges implied by file extensions
- `get_deps_package`: expansion of ignored package names
- `transport_file` / `render_define`: the header for one emitted file
"""

from modport.transport.deps import transport_deps
from modport.transport.errors import (
	InvalidPathError,
	MissingDependencyError,
	NotFoundError,
	NotIncludedError,
	TemplateError,
	TransportError,
)
from modport.transport.extra import get_extra
from modport.transport.header import ModuleHeader, render_define, transport_file
from modport.transport.ids import get_style_id, transport_id
from modport.transport.ignore import get_deps_package
from modport.transport.locate import EmittedFile, FileInfo, get_file_info
from modport.transport.options import ComputedLeading, LiteralLeading, Options, make_options

__all__ = [
	"ComputedLeading",
	"EmittedFile",
	"FileInfo",
	"InvalidPathError",
	"LiteralLeading",
	"MissingDependencyError",
	"ModuleHeader",
	"NotFoundError",
	"NotIncludedError",
	"Options",
	"TemplateError",
	"TransportError",
	"get_deps_package",
	"get_extra",
	"get_file_info",
	"get_style_id",
	"make_options",
	"render_define",
	"transport_deps",
	"transport_file",
	"transport_id",
]
