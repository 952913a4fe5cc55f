from __future__ import annotations

"""
Layout Tree Data Models.

A parsed layout document is a closed union of three node kinds: Scalar
(a file), Sequence (siblings sharing a directory) and Mapping (named
subdirectories and reserved keys). YAML values of any other kind (null,
numbers, booleans) have no structural meaning and are
represented as None.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Scalar:
    """
    A leaf entry: one file to create.

    Attributes:
        name: File name relative to the current directory.
    """
    name: str


@dataclass(frozen=True)
class Sequence:
    """
    An ordered group of siblings built into the same directory.

    Attributes:
        items: Child nodes in document order.
    """
    items: Tuple[Optional["ConfigNode"], ...] = ()


@dataclass(frozen=True)
class Mapping:
    """
    Ordered key/value pairs.

    Keys are kept as parsed: YAML allows integer, boolean or null keys and
    the builder decides what to do with them.

    Attributes:
        entries: (key, value) pairs in document order.
    """
    entries: Tuple[Tuple[Any, Optional["ConfigNode"]], ...] = ()


ConfigNode = Union[Scalar, Sequence, Mapping]


# -----------------------------------------------------------------------------
# CONVERSION
# -----------------------------------------------------------------------------

def from_yaml(value: Any) -> Optional[ConfigNode]:
    """
    Convert the output of ``yaml.safe_load`` into a layout tree.

    Strings become Scalars, lists become Sequences and dicts become Mappings
    (insertion order is the document order). Null, numbers and booleans carry
    no structure and convert to None.

    Args:
        value: A plain Python value produced by the YAML parser.

    Returns:
        Optional[ConfigNode]: The converted node, or None for valueless input.
    """
    if isinstance(value, str):
        return Scalar(value)
    if isinstance(value, (list, tuple)):
        return Sequence(tuple(from_yaml(item) for item in value))
    if isinstance(value, dict):
        return Mapping(tuple((k, from_yaml(v)) for k, v in value.items()))
    return None
