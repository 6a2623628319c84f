# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import logging
from dataclasses import dataclass

from modport.graph.model import Package
from modport.transport.errors import NotFoundError
from modport.transport.paths import is_under, relative, win_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmittedFile:
	"""
	A file as the build host sees it.

	`origin_path` is set when an earlier step changed the path (css -> css.js),
	`rev_orig_path` when a content-hash step did. Both are absolute.
	"""

	path: str
	origin_path: str | None = None
	rev_orig_path: str | None = None

	@property
	def original(self) -> str:
		return self.rev_orig_path or self.origin_path or self.path


@dataclass(frozen=True)
class FileInfo:
	origin_path: str
	path: str
	pkg: Package


def get_file_info(file: EmittedFile, pkg: Package) -> FileInfo:
	"""
	Find the logical path and owning package of an emitted file.

	`pkg` is tried first; when it does not own the original path, every
	transitive dependency whose output root contains the file is a candidate
	and the deepest root wins.
	"""
	origin_full = win_path(file.original)
	origin_path = relative(pkg.dest, origin_full)

	if origin_path not in pkg.files:
		candidates = [p for p in pkg.get_packages().values() if is_under(p.dest, origin_full)]
		if not candidates:
			raise NotFoundError(
				f"not found {origin_path} of pkg {pkg.id}",
				path=origin_full,
				package_id=pkg.id,
			)
		pkg = max(candidates, key=lambda p: (relative(p.dest, origin_full) in p.files, len(p.dest)))
		origin_path = relative(pkg.dest, origin_full)

	path = relative(pkg.dest, file.path)
	logger.debug("found file info path(%s)/origin(%s) pkg(%s)", path, origin_path, pkg.id)
	return FileInfo(origin_path=origin_path, path=path, pkg=pkg)
