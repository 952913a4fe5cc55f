from __future__ import annotations

"""
Unit tests for the layout tree models.

Verifies conversion of parsed YAML values into Scalar/Sequence/Mapping
nodes, including the values that carry no structure.
"""

import pytest

from mlcookie.domain.nodes import Mapping, Scalar, Sequence, from_yaml


def test_string_becomes_scalar() -> None:
    assert from_yaml("main.py") == Scalar("main.py")


def test_list_becomes_sequence_in_order() -> None:
    node = from_yaml(["b.txt", "a.txt"])
    assert node == Sequence((Scalar("b.txt"), Scalar("a.txt")))


def test_dict_becomes_mapping_preserving_order_and_raw_keys() -> None:
    node = from_yaml({"src": ["x.py"], 1: "ignored", "docs": None})

    assert isinstance(node, Mapping)
    assert [k for k, _ in node.entries] == ["src", 1, "docs"]
    assert node.entries[0][1] == Sequence((Scalar("x.py"),))
    assert node.entries[2][1] is None


@pytest.mark.parametrize("value", [None, 3, 2.5, True, False])
def test_valueless_inputs_convert_to_none(value) -> None:
    assert from_yaml(value) is None


def test_nested_structure() -> None:
    node = from_yaml([{"data": [{"raw": None}, {"processed": None}]}])

    assert node == Sequence((
        Mapping((
            ("data", Sequence((
                Mapping((("raw", None),)),
                Mapping((("processed", None),)),
            ))),
        )),
    ))


def test_nodes_are_immutable() -> None:
    node = Scalar("a")
    with pytest.raises(AttributeError):
        node.name = "b"  # type: ignore[misc]
