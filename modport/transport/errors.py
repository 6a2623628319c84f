# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class TransportError(Exception):
	"""
	A structured, serializable error raised by the transport engine.

	Every failure is immediate: nothing is retried and nothing is partially
	applied. The host decides whether to abort the whole build.
	"""

	message: str
	path: str | None = None
	package_id: str | None = None
	known: tuple[str, ...] | None = None
	dependency: str | None = None
	extension: str | None = None
	code: str | None = None

	reason_code: ClassVar[str] = "transport-error"

	def __str__(self) -> str:
		return self.format_human()

	@property
	def reason(self) -> str:
		return self.code or self.reason_code

	def to_dict(self) -> dict[str, Any]:
		return {
			"reason_code": self.reason,
			"message": self.message,
			"path": self.path,
			"package_id": self.package_id,
			"known": list(self.known) if self.known is not None else None,
			"dependency": self.dependency,
			"extension": self.extension,
		}

	def format_human(self) -> str:
		parts: list[str] = [f"[{self.reason}] {self.message}"]
		if self.path is not None:
			parts.append(f"path={self.path}")
		if self.package_id is not None:
			parts.append(f"package_id={self.package_id}")
		if self.dependency is not None:
			parts.append(f"dependency={self.dependency}")
		if self.extension is not None:
			parts.append(f"extension={self.extension}")
		if self.known is not None:
			parts.append(f"known=[{', '.join(self.known)}]")
		return " ".join(parts)


class InvalidPathError(TransportError):
	"""A relative path was given where a package-rooted path is required."""

	reason_code = "invalid-path"


class NotIncludedError(TransportError):
	"""The seed file is not part of the owning package's file set."""

	reason_code = "not-included"


class MissingDependencyError(TransportError):
	"""A file extension needs a runtime shim package that is not declared."""

	reason_code = "missing-dependency"


class NotFoundError(TransportError):
	"""An emitted file cannot be attributed to any known package."""

	reason_code = "not-found"


class TemplateError(TransportError):
	reason_code = "bad-template"
