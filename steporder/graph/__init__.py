"""In-memory dependency graph built from precedence pairs."""

from steporder.graph.dependency_graph import DependencyGraph, build_graph

__all__ = ["DependencyGraph", "build_graph"]
