"""Enumerations shared by the engine and its callers."""

from __future__ import annotations

from enum import StrEnum


class TraversalMode(StrEnum):
    """Order in which a traversal discovers reachable nodes."""

    BFS = "bfs"
    DFS = "dfs"
