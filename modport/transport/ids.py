# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Module identifiers.

A module id is what the loader asks for: `<prefix><path>` where the prefix
comes from the `idleading` template and the path is the renamed output path
relative to the package root, without a trailing `.js`.
"""

from __future__ import annotations

import logging
import posixpath

from modport.graph.model import Package
from modport.transport.errors import InvalidPathError, TransportError
from modport.transport.locate import EmittedFile, get_file_info
from modport.transport.options import Options, resolve_idleading
from modport.transport.paths import add_ext, hide_ext, is_relative, relative, win_path
from modport.transport.rename import rename_path
from modport.transport.template import render_template

logger = logging.getLogger(__name__)


def transport_id(filepath: str, pkg: Package, options: Options | None = None) -> str:
	"""
	Compute the module id of `filepath` (relative to `pkg.dest`).

	Pure: the same (filepath, pkg, options) always yields the same id.
	"""
	options = options if options is not None else Options()
	if is_relative(filepath):
		raise InvalidPathError("do not support relative path", path=filepath, package_id=pkg.id)

	prefix = render_template(resolve_idleading(options.idleading, filepath, pkg), pkg)

	# rename with the full output path; a leading "/" is still under dest
	fullpath = add_ext(posixpath.join(pkg.dest, win_path(filepath).lstrip("/")), pkg.default_ext)
	fullpath = rename_path(fullpath, options.rename, origin=fullpath)

	relpath = hide_ext(relative(pkg.dest, fullpath))

	# stylesheets are addressed as js modules by the loader
	if posixpath.splitext(relpath)[1] == ".css":
		relpath += ".js"

	prefix = win_path(prefix)
	id_ = posixpath.normpath(posixpath.join(prefix, relpath) if prefix else relpath)
	logger.debug("transport id(%s) of package %s", id_, pkg.id)
	return id_


def get_style_id(file: EmittedFile, options: Options) -> str:
	"""
	Scope class for a stylesheet: the rendered id prefix with `/` -> `-`
	and `.` -> `_` (`foo/1.0.0/` gives `foo-1_0_0`).
	"""
	if options.pkg is None:
		raise TransportError("pkg missing", path=file.path, code="pkg-missing")
	info = get_file_info(file, options.pkg)
	idleading = resolve_idleading(options.idleading, info.origin_path, info.pkg)
	prefix = win_path(render_template(idleading, info.pkg))
	if prefix.endswith("/"):
		prefix = prefix[:-1]
	return prefix.replace("/", "-").replace(".", "_")
