from __future__ import annotations

import pytest

from core.errors import UnknownVariableError, VariableMismatchError
from core.variable_table import VariableTable


def test_defaults_to_zero() -> None:
    table = VariableTable(["x", "y"])
    assert table.as_dict() == {"x": 0.0, "y": 0.0}
    assert table.names == ("x", "y")
    assert len(table) == 2


def test_bind_keeps_slots() -> None:
    table = VariableTable(["x", "y"])
    table.bind("y", 3.5)
    table.bind("y", 4.5)
    assert table.index_of("x") == 0
    assert table.index_of("y") == 1
    assert table.get("y") == 4.5
    assert table.names == ("x", "y")


def test_unknown_name() -> None:
    table = VariableTable(["x"])
    with pytest.raises(UnknownVariableError) as excinfo:
        table.bind("z", 1.0)
    assert excinfo.value.name == "z"
    assert "z" not in table


def test_set_values_positional() -> None:
    table = VariableTable(["a", "b"])
    table.set_values([1, 2])
    assert table.as_dict() == {"a": 1.0, "b": 2.0}


def test_set_values_count_mismatch() -> None:
    table = VariableTable(["a", "b"])
    with pytest.raises(VariableMismatchError) as excinfo:
        table.set_values([1.0])
    assert (excinfo.value.expected, excinfo.value.got) == (2, 1)


def test_copy_is_independent() -> None:
    table = VariableTable(["a"])
    other = table.copy()
    other.bind("a", 9.0)
    assert table.get("a") == 0.0
    assert other.get("a") == 9.0


def test_duplicate_names_rejected() -> None:
    with pytest.raises(ValueError):
        VariableTable(["a", "a"])
