from __future__ import annotations

import pytest

from kungfu import Error, Ok, Result

from cpswriter import Log, UnsupportedCapabilityError, ensure, fallback, fallback_chain, lift as L, reject


def test_fallback_chain_first_success_wins(result_layer):
    w = result_layer
    prog = fallback_chain(
        w.emit(Log.of("a")).then(lambda _: w.fail("a down")),
        w.writer("b", Log.of("b")),
        w.writer("c", Log.of("c")),
    )
    assert prog.run().unwrap() == ("b", ["b"])


def test_fallback_chain_returns_last_failure(result_layer, error_of):
    w = result_layer
    prog = fallback_chain(w.fail("first"), w.fail("second"))
    assert error_of(prog.run()) == "second"


def test_fallback_chain_needs_a_writer():
    with pytest.raises(ValueError, match="at least one"):
        fallback_chain()


def test_ensure_and_reject(result_layer, error_of):
    w = result_layer
    age = w.writer(17, Log.of("parsed age"))

    adult = ensure(age, predicate=lambda n: n >= 18, error=lambda n: f"{n} is too young")
    assert error_of(adult.run()) == "17 is too young"

    not_negative = reject(age, predicate=lambda n: n < 0, error=lambda n: f"{n} < 0")
    assert not_negative.run().unwrap() == (17, ["parsed age"])


def test_guards_need_failure(log_layer):
    with pytest.raises(UnsupportedCapabilityError):
        ensure(log_layer.pure(1), predicate=bool, error=str)


def test_fallback_skips_secondary_while_primary_succeeds(result_layer):
    w = result_layer
    calls: list[str] = []

    def get_cached(key: int) -> Result[str, str]:
        calls.append("cache")
        return Ok(f"cached:{key}")

    def call_api(key: int) -> Result[str, str]:
        calls.append("api")
        return Ok(f"fresh:{key}")

    prog = fallback(L.call(w, get_cached, 1), L.call(w, call_api, 1))
    assert prog.run().unwrap() == ("cached:1", [])
    assert calls == ["cache"]


def test_fallback_runs_secondary_after_failure(result_layer):
    w = result_layer
    calls: list[str] = []

    def get_cached(key: int) -> Result[str, str]:
        calls.append("cache")
        return Error("miss")

    def call_api() -> str:
        calls.append("api")
        return "fresh:1"

    prog = fallback(L.call(w, get_cached, 1), w.embed(call_api))
    assert prog.run().unwrap() == ("fresh:1", [])
    assert calls == ["cache", "api"]


def test_fallback_chain_stops_at_first_success(result_layer):
    w = result_layer
    calls: list[str] = []

    def source(name: str, ok: bool):
        def fetch() -> Result[str, str]:
            calls.append(name)
            return Ok(name) if ok else Error(name)

        return L.call(w, fetch)

    prog = fallback_chain(source("a", False), source("b", True), source("c", True))
    assert prog.run().unwrap() == ("b", [])
    assert calls == ["a", "b"]
