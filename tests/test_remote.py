from __future__ import annotations

from typing import get_args

from remotedict.remote import (
    Failure,
    Loading,
    NotAsked,
    RemoteData,
    Success,
    failure,
    is_failure,
    is_loading,
    is_not_asked,
    is_remote_data,
    is_success,
    loading,
    map_failure,
    map_success,
    not_asked,
    success,
    with_default,
)


def test_constructors_build_variants() -> None:
    assert not_asked() == NotAsked()
    assert loading() == Loading()
    assert success(1) == Success(1)
    assert failure("e") == Failure("e")


def test_variants_compare_by_value() -> None:
    assert Success([1, 2]) == Success([1, 2])
    assert Success(1) != Failure(1)
    assert Loading() != NotAsked()


def test_predicates() -> None:
    assert is_not_asked(NotAsked())
    assert is_loading(Loading())
    assert is_success(Success(0))
    assert is_failure(Failure(None))
    assert not is_success(Loading())
    assert is_remote_data(Failure("x"))
    assert not is_remote_data("x")


def test_map_success_and_failure() -> None:
    assert map_success(Success(2), lambda x: x + 1) == Success(3)
    assert map_success(Failure("e"), lambda x: x + 1) == Failure("e")
    assert map_failure(Failure("e"), str.upper) == Failure("E")
    assert map_failure(Loading(), str.upper) == Loading()


def test_with_default() -> None:
    assert with_default(Success(5), 0) == 5
    assert with_default(NotAsked(), 0) == 0
    assert with_default(Failure("e"), 0) == 0


def test_structural_matching() -> None:
    def describe(state: object) -> str:
        match state:
            case Success(value=v):
                return f"ok {v}"
            case Failure(error=e):
                return f"err {e}"
            case Loading():
                return "loading"
            case _:
                return "idle"

    assert describe(Success(1)) == "ok 1"
    assert describe(Failure("x")) == "err x"
    assert describe(Loading()) == "loading"
    assert describe(NotAsked()) == "idle"


def test_explicitly_parameterised_variants_construct() -> None:
    assert Success[int](1) == Success(1)
    assert Failure[str]("e") == Failure("e")
    assert map_success(Success[int](2), str) == Success("2")


def test_remote_data_alias_is_parameterised_error_first() -> None:
    assert get_args(RemoteData[str, int]) == (NotAsked, Loading, Failure[str], Success[int])
