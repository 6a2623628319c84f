# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import posixpath


def win_path(path: str) -> str:
	return path.replace("\\", "/")


def is_relative(path: str) -> bool:
	path = win_path(path)
	return path in (".", "..") or path.startswith("./") or path.startswith("../")


def add_ext(path: str, ext: str = "js") -> str:
	if posixpath.splitext(path)[1]:
		return path
	return f"{path}.{ext}"


def hide_ext(path: str) -> str:
	return path[: -len(".js")] if path.endswith(".js") else path


def relative(base: str, path: str) -> str:
	return posixpath.relpath(win_path(path), win_path(base) or ".")


def is_under(root: str, path: str) -> bool:
	"""Whether `path` is `root` or lies below it (whole segments only)."""
	root = win_path(root).rstrip("/")
	path = win_path(path)
	return path == root or path.startswith(root + "/")
