from __future__ import annotations

"""
Rendered Tree Models.

Nested dictionary describing the generated project for display purposes:
directories map to sub-trees, files map to FileNode leaves.
"""

from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class FileNode:
    """
    A file entry of the generated project.

    Attributes:
        path: Absolute filesystem path to the file.
    """
    path: str


Tree = Dict[str, Union["Tree", FileNode]]
