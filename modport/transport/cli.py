# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from modport.graph.graph_v0 import load_graph_v0
from modport.graph.model import Package
from modport.transport.config_v0 import load_config_v0
from modport.transport.deps import transport_deps
from modport.transport.errors import TransportError
from modport.transport.header import render_define, transport_file
from modport.transport.ids import transport_id
from modport.transport.ignore import get_deps_package
from modport.transport.locate import EmittedFile, get_file_info
from modport.transport.options import INCLUDE_MODES, LiteralLeading, Options, make_options


def _add_graph_args(p: argparse.ArgumentParser, *, options: bool = True) -> None:
	p.add_argument("--graph", type=Path, required=True, help="Path to a modport-graph manifest (JSON)")
	p.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
	if not options:
		return
	p.add_argument("--config", type=Path, default=None, help="Path to a modport-transport config (JSON)")
	p.add_argument("--idleading", type=str, default=None, help="Id prefix template, e.g. '{name}/{version}/'")
	p.add_argument(
		"--ignore",
		dest="ignore",
		action="append",
		default=None,
		help="Package name to externalize (repeatable); replaces the config value",
	)
	p.add_argument("--include", choices=list(INCLUDE_MODES), default=None, help="Dependency include mode")
	p.add_argument("--style-box", action="store_true", help="Compute a scope class for stylesheets")


def _add_package_arg(p: argparse.ArgumentParser) -> None:
	p.add_argument(
		"--package",
		dest="package_id",
		type=str,
		default=None,
		help="Owning package id (default: the manifest root)",
	)


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="modport", description="Module id and dependency transport for package builds")
	p.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
	sub = p.add_subparsers(dest="cmd", required=True)

	id_cmd = sub.add_parser("id", help="Print the module id of a file")
	id_cmd.add_argument("file", type=str, help="File path relative to the package output root")
	_add_package_arg(id_cmd)
	_add_graph_args(id_cmd)

	deps = sub.add_parser("deps", help="Print the dependency ids to declare for a file")
	deps.add_argument("file", type=str, help="File path relative to the package output root")
	_add_package_arg(deps)
	_add_graph_args(deps)

	ignore = sub.add_parser("ignore", help="Expand ignored package names into package ids")
	ignore.add_argument("names", nargs="+", help="Package names")
	_add_package_arg(ignore)
	_add_graph_args(ignore, options=False)

	locate = sub.add_parser("locate", help="Attribute an emitted file to its package")
	locate.add_argument("path", type=str, help="Current output path of the file")
	locate.add_argument("--origin-path", type=str, default=None, help="Path before an extension rewrite")
	locate.add_argument("--rev-orig-path", type=str, default=None, help="Path before a content-hash rename")
	_add_graph_args(locate, options=False)

	header = sub.add_parser("header", help="Print the module header (or wrapped body) of an emitted file")
	header.add_argument("path", type=str, help="Current output path of the file")
	header.add_argument("--origin-path", type=str, default=None, help="Path before an extension rewrite")
	header.add_argument("--rev-orig-path", type=str, default=None, help="Path before a content-hash rename")
	header.add_argument("--body", type=Path, default=None, help="Wrap this file's contents in define(...)")
	_add_graph_args(header)
	return p


def _options_from_args(args: argparse.Namespace, root: Package) -> Options:
	opts = load_config_v0(args.config, pkg=root) if args.config is not None else make_options(pkg=root)
	if args.idleading is not None:
		opts = replace(opts, idleading=LiteralLeading(args.idleading))
	if args.ignore is not None:
		opts = replace(opts, ignore=tuple(args.ignore))
	if args.include is not None:
		opts = replace(opts, include=args.include)
	if args.style_box:
		opts = replace(opts, style_box=True)
	return opts


def _select_package(root: Package, package_id: str | None) -> Package:
	if package_id is None:
		return root
	pkgs = root.get_packages()
	if package_id not in pkgs:
		raise ValueError(f"unknown package id '{package_id}' (known: {', '.join(pkgs)})")
	return pkgs[package_id]


def _emit(obj: Any, *, as_json: bool) -> None:
	if as_json:
		print(json.dumps(obj, sort_keys=True, separators=(",", ":")))
		return
	if isinstance(obj, list):
		for item in obj:
			print(item)
	elif isinstance(obj, dict):
		for key in sorted(obj):
			print(f"{key}: {obj[key]}")
	else:
		print(obj)


def _run(args: argparse.Namespace, root: Package) -> Any:
	if args.cmd == "id":
		pkg = _select_package(root, args.package_id)
		return transport_id(args.file, pkg, _options_from_args(args, root))

	if args.cmd == "deps":
		pkg = _select_package(root, args.package_id)
		return transport_deps(args.file, pkg, _options_from_args(args, root))

	if args.cmd == "ignore":
		pkg = _select_package(root, args.package_id)
		return get_deps_package(list(args.names), pkg)

	file = EmittedFile(path=args.path, origin_path=args.origin_path, rev_orig_path=args.rev_orig_path)
	if args.cmd == "locate":
		info = get_file_info(file, root)
		return {"origin_path": info.origin_path, "path": info.path, "package_id": info.pkg.id}

	if args.cmd == "header":
		header = transport_file(file, _options_from_args(args, root))
		if args.body is not None:
			return render_define(header, args.body.read_text(encoding="utf-8").rstrip("\n"))
		return header.to_dict()

	raise AssertionError("unreachable")


def main(argv: list[str] | None = None) -> int:
	p = _build_parser()
	args = p.parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
		stream=sys.stderr,
	)

	try:
		root = load_graph_v0(args.graph)
		result = _run(args, root)
	except TransportError as err:
		if args.json:
			print(json.dumps({"ok": False, "error": err.to_dict()}, sort_keys=True, separators=(",", ":")))
		else:
			print(err.format_human(), file=sys.stderr)
		return 2
	except (OSError, ValueError) as err:
		p.error(str(err))
		return 2

	if args.cmd == "header" and args.body is not None and not args.json:
		sys.stdout.write(result)
		return 0
	_emit(result, as_json=bool(args.json))
	return 0
