from __future__ import annotations

import pytest

from remotedict.exceptions import InvalidIdentifierError, RemoteDictError
from remotedict.identifier import Id, sort_key, to_key


def test_ids_with_equal_keys_are_equal_and_hash_alike() -> None:
    assert Id("a") == Id("a")
    assert hash(Id(3)) == hash(Id(3))
    assert Id("a") != Id("b")
    assert Id(1) != Id("1")


def test_type_parameters_do_not_affect_equality() -> None:
    assert Id[str, int]("a") == Id("a")


def test_to_key() -> None:
    assert to_key(Id("user-1")) == "user-1"
    assert to_key(Id(7)) == 7


@pytest.mark.parametrize("key", [None, 1.5, ("a",), True, b"a"])
def test_unsupported_key_types_are_rejected(key: object) -> None:
    with pytest.raises(InvalidIdentifierError) as excinfo:
        Id(key)  # type: ignore[arg-type]
    assert isinstance(excinfo.value, TypeError)
    assert isinstance(excinfo.value, RemoteDictError)
    assert excinfo.value.key == key


def test_repr() -> None:
    assert repr(Id("a")) == "Id('a')"


def test_sort_key_orders_ints_before_strings() -> None:
    keys = ["b", 10, "a", 2]
    assert sorted(keys, key=sort_key) == [2, 10, "a", "b"]


def test_explicitly_parameterised_ids_construct() -> None:
    ident = Id[str, dict]("u-42")
    assert ident.key == "u-42"
    assert {ident: 1}[Id("u-42")] == 1
