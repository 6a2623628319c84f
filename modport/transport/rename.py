# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Output path rename rules.

Rules run in order over the absolute output path of a file. Each rule sees
the path produced by the previous one plus the original, unrenamed path.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Union


@dataclass(frozen=True)
class PathParts:
	dirname: str
	basename: str
	extname: str  # with the leading dot, "" if none

	@classmethod
	def parse(cls, path: str) -> PathParts:
		dirname, filename = posixpath.split(path)
		basename, extname = posixpath.splitext(filename)
		return cls(dirname=dirname, basename=basename, extname=extname)

	def join(self) -> str:
		return posixpath.join(self.dirname, self.basename + self.extname)


@dataclass(frozen=True)
class Prefix:
	text: str

	def apply(self, parts: PathParts, origin: str) -> PathParts:
		return replace(parts, basename=self.text + parts.basename)


@dataclass(frozen=True)
class Suffix:
	"""Insert text between the basename and the extension (`a.js` -> `a-debug.js`)."""

	text: str

	def apply(self, parts: PathParts, origin: str) -> PathParts:
		return replace(parts, basename=parts.basename + self.text)


@dataclass(frozen=True)
class Extname:
	ext: str

	def apply(self, parts: PathParts, origin: str) -> PathParts:
		ext = self.ext
		if ext and not ext.startswith("."):
			ext = "." + ext
		return replace(parts, extname=ext)


@dataclass(frozen=True)
class Computed:
	"""
	A rule backed by a callable.

	The callable receives the current parts and the original path and returns
	new parts, a full replacement path, or None to leave the path unchanged.
	"""

	fn: Callable[[PathParts, str], Union[PathParts, str, None]]

	def apply(self, parts: PathParts, origin: str) -> PathParts:
		out = self.fn(parts, origin)
		if out is None:
			return parts
		if isinstance(out, str):
			return PathParts.parse(out.replace("\\", "/"))
		if not isinstance(out, PathParts):
			raise TypeError(f"rename callable must return PathParts, str or None, got {type(out).__name__}")
		return out


RenameRule = Union[Prefix, Suffix, Extname, Computed]

_RULE_KEYS: dict[str, Callable[[str], RenameRule]] = {
	"prefix": Prefix,
	"suffix": Suffix,
	"extname": Extname,
}


def rename_path(path: str, rules: Iterable[RenameRule], *, origin: str | None = None) -> str:
	"""Apply `rules` in order to `path` and return the renamed path."""
	origin = path if origin is None else origin
	parts = PathParts.parse(path)
	for rule in rules:
		parts = rule.apply(parts, origin)
	return parts.join()


def coerce_rename_rule(raw: Any) -> RenameRule:
	"""Accept a rule object, a callable, or the config form `{"suffix": "-debug"}`."""
	if isinstance(raw, (Prefix, Suffix, Extname, Computed)):
		return raw
	if callable(raw):
		return Computed(raw)
	if isinstance(raw, dict):
		if len(raw) != 1:
			raise ValueError(f"rename rule must have exactly one key, got: {', '.join(sorted(raw)) or '(none)'}")
		((key, value),) = raw.items()
		make = _RULE_KEYS.get(key)
		if make is None:
			raise ValueError(f"unknown rename rule '{key}' (expected one of: {', '.join(_RULE_KEYS)})")
		if not isinstance(value, str):
			raise ValueError(f"rename rule '{key}' must be a string")
		return make(value)
	raise ValueError(f"unsupported rename rule: {raw!r}")
