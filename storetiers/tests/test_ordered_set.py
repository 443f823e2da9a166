import pytest

from storetiers.app.subscriptions import OrderedSet, group_key


def test_first_occurrence_wins() -> None:
    values = OrderedSet(["b", "a", "b", "c", "a"])

    assert list(values) == ["b", "a", "c"]
    assert values.index("c") == 2
    assert values[0] == "b"
    assert len(values) == 3


def test_key_function_controls_duplicates() -> None:
    groups = OrderedSet(key=group_key)

    assert groups.add("Vip") is True
    assert groups.add("VIP") is False
    assert "vip" in groups
    assert groups.index("vIp") == 0
    assert groups == ["Vip"]


def test_missing_values() -> None:
    groups = OrderedSet(["vip"], key=group_key)

    assert 42 not in groups
    with pytest.raises(ValueError):
        groups.index("std")
    assert not OrderedSet()
