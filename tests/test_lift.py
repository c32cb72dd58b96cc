from __future__ import annotations

import json

import pytest
from kungfu import Error, Ok

from cpswriter import Log, lift as L


def test_from_result(result_layer, error_of):
    w = result_layer
    assert L.up.from_result(w, Ok(42)).run().unwrap() == (42, [])
    assert error_of(L.up.from_result(w, Error("bad")).run()) == "bad"


def test_optional(result_layer, error_of):
    w = result_layer
    built: list[str] = []

    def missing() -> str:
        built.append("error")
        return "not found"

    assert L.up.optional(w, "row", error=missing).run().unwrap() == ("row", [])
    assert built == []
    assert error_of(L.up.optional(w, None, error=missing).run()) == "not found"


def test_catching_runs_thunk_per_run(result_layer, error_of):
    w = result_layer
    raw = {"value": '{"id": 1}'}
    parsed = L.up.catching(w, lambda: json.loads(raw["value"]), on_error=lambda exc: type(exc).__name__)
    assert parsed.run().unwrap() == ({"id": 1}, [])
    raw["value"] = "{broken"
    assert error_of(parsed.run()) == "JSONDecodeError"


def test_call_is_deferred_until_run(result_layer):
    w = result_layer
    calls: list[int] = []

    def fetch_user(user_id: int):
        calls.append(user_id)
        return Ok(f"user:{user_id}")

    prog = w.emit(Log.of("start")).then(lambda _: L.call(w, fetch_user, 42))
    assert calls == []
    assert prog.run().unwrap() == ("user:42", ["start"])
    assert calls == [42]


def test_call_writer_folds_reported_output(result_layer):
    w = result_layer

    def fetch_with_log(user_id: int):
        return Ok((user_id * 10, Log.of(f"fetched {user_id}")))

    prog = w.emit(Log.of("pre")).then(lambda _: L.call_writer(w, fetch_with_log, 4))
    assert prog.run().unwrap() == (40, ["pre", "fetched 4"])


def test_lifted_decorator(result_layer):
    w = result_layer

    @L.lifted(w)
    def double(n: int):
        return Ok(n * 2)

    assert double.__name__ == "double"
    assert double(21).run().unwrap() == (42, [])


def test_down_helpers(result_layer, log_layer):
    w = result_layer
    good = w.writer(1, Log.of("ok"))
    bad = w.emit(Log.of("lost")).then(lambda _: w.fail("nope"))

    assert L.down.unsafe(good) == (1, ["ok"])
    assert L.down.to_result(good).unwrap() == (1, ["ok"])
    assert L.down.or_else(bad, default=0) == (0, [])
    with pytest.raises(Exception):
        L.down.unsafe(bad)
    with pytest.raises(ValueError, match="RESULT"):
        L.down.unsafe(log_layer.pure(1))
