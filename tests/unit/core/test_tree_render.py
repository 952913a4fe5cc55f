from __future__ import annotations

"""
Unit tests for the Tree Renderer.
"""

import os

from mlcookie.core.render import build_tree, render_tree
from mlcookie.domain.tree_models import FileNode


def test_build_tree_nests_paths() -> None:
    root = os.path.join(os.sep, "p")
    tree = build_tree(
        root,
        dirs=[root, os.path.join(root, "a"), os.path.join(root, "a", "b")],
        files=[os.path.join(root, "a", "x.txt"), os.path.join(root, "top.md")],
    )

    assert set(tree) == {"a", "top.md"}
    assert isinstance(tree["top.md"], FileNode)
    assert set(tree["a"]) == {"b", "x.txt"}
    assert tree["a"]["b"] == {}


def test_build_tree_ignores_paths_outside_root() -> None:
    root = os.path.join(os.sep, "p")
    tree = build_tree(root, dirs=[os.path.join(os.sep, "elsewhere")], files=[])
    assert tree == {}


def test_render_connectors() -> None:
    tree = {"b": {"c.txt": FileNode("c.txt")}, "a.txt": FileNode("a.txt")}
    lines = []

    render_tree(tree, lines)

    assert lines == [
        "├── a.txt",
        "└── b/",
        "    └── c.txt",
    ]
