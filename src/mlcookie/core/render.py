from __future__ import annotations

"""
Tree Renderer.

Turns the flat lists of created directories and files into a nested Tree
and draws it with box connectors for ``--print-tree``.
"""

import os
from typing import Iterable, List, Optional

from mlcookie.domain.tree_models import FileNode, Tree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(root: str, dirs: Iterable[str], files: Iterable[str]) -> Tree:
    """
    Nest absolute paths below ``root`` into a Tree.

    Paths outside ``root`` are ignored.

    Args:
        root: Project root directory.
        dirs: Absolute directory paths.
        files: Absolute file paths.

    Returns:
        Tree: Nested dictionary keyed by path segment.
    """
    tree: Tree = {}
    for d in dirs:
        parts = _relative_parts(root, d)
        if parts is not None:
            _descend(tree, parts)
    for f in files:
        parts = _relative_parts(root, f)
        if not parts:
            continue
        parent = _descend(tree, parts[:-1])
        parent[parts[-1]] = FileNode(path=f)
    return tree


def render_tree(tree: Tree, lines: List[str], prefix: str = "") -> None:
    """
    Append the drawing of ``tree`` to ``lines``.

    Directories and files are listed together in name order, using ├── and
    └── connectors.

    Args:
        tree: Tree to draw.
        lines: Accumulator for output lines.
        prefix: Indentation carried from the parent level.
    """
    entries = sorted(tree.keys())
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        node = tree[entry]

        if isinstance(node, dict):
            lines.append(f"{prefix}{connector}{entry}/")
            render_tree(node, lines, prefix + ("    " if is_last else "│   "))
        else:
            lines.append(f"{prefix}{connector}{entry}")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _relative_parts(root: str, path: str) -> Optional[List[str]]:
    rel = os.path.relpath(path, root)
    if rel == ".":
        return []
    if rel == os.pardir or rel.startswith(os.pardir + os.sep):
        return None
    return rel.split(os.sep)


def _descend(tree: Tree, parts: List[str]) -> Tree:
    node = tree
    for p in parts:
        child = node.get(p)
        if not isinstance(child, dict):
            child = {}
            node[p] = child
        node = child
    return node
