import pytest

from minishell.environment import Environment, split_assignment


def test_from_strings_splits_at_first_equals():
    env = Environment.from_strings(["A=1", "B=x=y"])
    assert env.get("B") == "x=y"
    assert env.items() == [("A", "1"), ("B", "x=y")]


def test_from_strings_rejects_entry_without_equals():
    with pytest.raises(ValueError):
        Environment.from_strings(["BAD"])


def test_get_missing_is_none():
    env = Environment.from_strings(["A=1"])
    assert env.get("Z") is None
    assert "Z" not in env
    assert "A" in env


def test_assign_updates_in_place():
    env = Environment.from_strings(["A=1", "B=2"])
    env.assign("A=9")
    assert env.items() == [("A", "9"), ("B", "2")]


def test_assign_appends_new_key():
    env = Environment.from_strings(["A=1"])
    env.assign("C=3")
    assert list(env) == ["A", "C"]
    assert len(env) == 2


def test_assign_without_equals_raises():
    env = Environment()
    with pytest.raises(ValueError):
        env.assign("NOPE")
    assert len(env) == 0


def test_remove():
    env = Environment.from_strings(["A=1", "B=2"])
    assert env.remove("A") is True
    assert list(env) == ["B"]
    assert env.remove("A") is False
    assert len(env) == 1


def test_sort_orders_keys():
    env = Environment.from_strings(["PATH=/bin", "HOME=/root", "A=1", "Z=2"])
    env.sort()
    keys = list(env)
    assert keys == sorted(keys)
    assert env.get("HOME") == "/root"


def test_split_assignment_empty_value():
    assert split_assignment("K=") == ("K", "")


def test_split_assignment_without_equals():
    with pytest.raises(ValueError):
        split_assignment("K")