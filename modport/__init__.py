# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
modport: build-time module transport for package trees.

Packages:
  graph: package/file graph model and the v0 manifest loader
  transport: module ids, dependency lists and headers
"""

__all__ = ["graph", "transport"]
