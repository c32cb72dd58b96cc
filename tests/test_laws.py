"""Writer laws and the list-of-strings scenarios, over the pure (IDENTITY) layer."""

from __future__ import annotations

import pytest

from cpswriter import (
    Layer,
    Log,
    Monoid,
    Sum,
    extract_output,
    from_pair,
    observe,
    restrict,
    rewrite,
    run,
)


def test_from_pair_with_neutral_output_is_identity(list_layer):
    for value in (0, "a", None, (1, 2)):
        assert run(from_pair(list_layer, value, [])) == (value, [])


def test_emits_combine_in_order(log_layer):
    w1, w2 = Log.of("x", "y"), Log.of("z")
    prog = log_layer.emit(w1).then(lambda _: log_layer.emit(w2))
    assert run(prog) == (None, w1.combine(w2))


@pytest.mark.parametrize(
    "build",
    [
        lambda w: w.emit(["a"]),
        lambda w: w.pure(5),
        lambda w: w.writer("v", ["a", "b"]).then(lambda v: w.writer(v * 2, ["c"])),
        lambda w: w.emit(["a"]).observe(),
    ],
)
def test_extract_output_is_second_of_run(list_layer, build):
    prog = build(list_layer)
    assert extract_output(prog) == run(prog)[1]


def test_observe_pairs_output_into_result(log_layer):
    prog = log_layer.writer(7, Log.of("seven")).then(lambda n: log_layer.writer(n + 1, Log.of("eight")))
    value, output = run(prog)
    assert run(observe(prog)) == ((value, output), output)


def test_rewrite_applies_to_output_only(log_layer):
    prog = log_layer.writer(3, Log.of("a", "b"))

    def shout(log: Log[str]) -> Log[str]:
        return Log(entry.upper() for entry in log)

    value, output = run(prog)
    assert run(rewrite(shout, prog)) == (value, shout(output))


def test_sequencing_is_associative(list_layer):
    w = list_layer
    m = w.writer(1, ["m"])

    def f(x: int):
        return w.writer(x + 1, [f"f{x}"])

    def g(x: int):
        return w.writer(x * 10, [f"g{x}"])

    left = m.then(f).then(g)
    right = m.then(lambda x: f(x).then(g))
    assert run(left) == run(right) == (20, ["m", "f1", "g2"])


def test_left_and_right_identity(sum_layer):
    w = sum_layer

    def f(x: int):
        return w.writer(x * 2, Sum(x))

    assert run(w.pure(4).then(f)) == run(f(4))
    m = w.writer("m", Sum(3))
    assert run(m.then(w.pure)) == run(m)


def test_three_emits_accumulate_list_of_strings(list_layer):
    w = list_layer
    prog = w.emit(["a"]).then(lambda _: w.emit(["b"])).then(lambda _: w.emit(["c"]))
    assert run(prog) == (None, ["a", "b", "c"])


def test_observe_emit_scenario(list_layer):
    assert run(observe(list_layer.emit(["x"]))) == ((None, ["x"]), ["x"])


def test_restrict_discarding_own_output(list_layer):
    w = list_layer
    inner = w.emit(["hidden"]).then(lambda _: w.emit(["also hidden"]))
    prog = restrict(inner.map(lambda _: (None, lambda _out: [])))
    assert run(prog) == (None, [])


def test_restrict_keeps_enclosing_output(list_layer):
    w = list_layer
    inner = w.emit(["hidden"]).map(lambda _: ("kept", lambda _out: []))
    prog = w.emit(["before"]).then(lambda _: restrict(inner)).then(
        lambda v: w.writer(v, ["after"])
    )
    assert run(prog) == ("kept", ["before", "after"])


def test_run_twice_is_equivalent(list_layer):
    prog = list_layer.emit(["a"]).then(lambda _: list_layer.writer(1, ["b"]))
    assert run(prog) == run(prog)


def test_operands_can_be_shared():
    w = Layer.identity(Monoid.of_str())
    shared = w.writer(1, "s")
    left = shared.then(lambda n: w.writer(n + 1, "L"))
    right = w.emit("R").then(lambda _: shared)
    assert run(left) == (2, "sL")
    assert run(right) == (1, "Rs")
    assert run(shared) == (1, "s")
