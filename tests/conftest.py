from __future__ import annotations

import typing

import pytest
from kungfu import Error, Ok

from cpswriter import Layer, Log, Monoid, Sum


@pytest.fixture
def log_layer() -> Layer[Log[str]]:
    return Layer.identity(Log.monoid())


@pytest.fixture
def list_layer() -> Layer[list[str]]:
    return Layer.identity(Monoid.of_list())


@pytest.fixture
def sum_layer() -> Layer[Sum]:
    return Layer.identity(Sum.monoid())


@pytest.fixture
def result_layer() -> Layer[Log[str]]:
    return Layer.result(Log.monoid())


@pytest.fixture
def lazy_layer() -> Layer[Log[str]]:
    return Layer.lazy(Log.monoid())


@pytest.fixture
def many_layer() -> Layer[Log[str]]:
    return Layer.many(Log.monoid())


@pytest.fixture
def error_of() -> typing.Callable[[typing.Any], typing.Any]:
    """Extract the error of a kungfu Error, failing the test on Ok."""

    def extract(result: typing.Any) -> typing.Any:
        match result:
            case Error(err):
                return err
            case Ok(value):
                pytest.fail(f"expected Error, got Ok({value!r})")
            case _:
                pytest.fail(f"expected Result, got {result!r}")

    return extract
