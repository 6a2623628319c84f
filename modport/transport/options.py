# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Union

from modport.graph.model import Package
from modport.transport.rename import RenameRule, coerce_rename_rule

INCLUDE_MODES = ("self", "relative", "all")
DEFAULT_IDLEADING = "{name}/{version}"


@dataclass(frozen=True)
class LiteralLeading:
	"""An id prefix template such as `{name}/{version}/`."""

	template: str


@dataclass(frozen=True)
class ComputedLeading:
	"""An id prefix computed from `(filepath, pkg)`; the result is still a template."""

	fn: Callable[[str, Package], str]


Idleading = Union[LiteralLeading, ComputedLeading]


@dataclass(frozen=True)
class Options:
	idleading: Idleading = LiteralLeading(DEFAULT_IDLEADING)
	rename: tuple[RenameRule, ...] = ()
	ignore: tuple[str, ...] = ()
	include: str = "relative"
	style_box: bool = False
	pkg: Package | None = field(default=None, compare=False)

	def __post_init__(self) -> None:
		if not isinstance(self.idleading, (LiteralLeading, ComputedLeading)):
			raise TypeError("idleading must be LiteralLeading or ComputedLeading (use make_options to coerce)")
		if self.include not in INCLUDE_MODES:
			raise ValueError(f"include must be one of {', '.join(INCLUDE_MODES)}, got: {self.include!r}")
		if not all(isinstance(name, str) and name for name in self.ignore):
			raise ValueError("ignore must be a list of non-empty package names")


def coerce_idleading(raw: Any) -> Idleading:
	if isinstance(raw, (LiteralLeading, ComputedLeading)):
		return raw
	if isinstance(raw, str):
		return LiteralLeading(raw)
	if callable(raw):
		return ComputedLeading(raw)
	raise ValueError(f"idleading must be a template string or a callable, got: {type(raw).__name__}")


def make_options(
	*,
	idleading: Any = None,
	rename: Iterable[Any] | None = None,
	ignore: str | Iterable[str] | None = None,
	include: str | None = None,
	style_box: bool = False,
	pkg: Package | None = None,
) -> Options:
	"""Build Options from loose values: a bare ignore name, a template string, rule dicts."""
	if isinstance(ignore, str):
		ignore = [ignore]
	return Options(
		idleading=coerce_idleading(idleading) if idleading is not None else LiteralLeading(DEFAULT_IDLEADING),
		rename=tuple(coerce_rename_rule(r) for r in (rename or ())),
		ignore=tuple(ignore or ()),
		include=include or "relative",
		style_box=bool(style_box),
		pkg=pkg,
	)


def resolve_idleading(idleading: Idleading, filepath: str, pkg: Package) -> str:
	"""Return the prefix template for `filepath`; a computed leading is called here."""
	if isinstance(idleading, ComputedLeading):
		return idleading.fn(filepath, pkg)
	return idleading.template
