# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Package graph consumed by the transport engine.

The graph is produced ahead of time (by a source-tree parser or from a
`modport-graph` manifest) and is read-only once built.
"""

from modport.graph.model import FileEdge, FileNode, Package, Require, extension_of

__all__ = ["FileEdge", "FileNode", "Package", "Require", "extension_of"]
