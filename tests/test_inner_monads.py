from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest
from kungfu import Error, Ok

from cpswriter import (
    IDENTITY,
    Done,
    FixpointError,
    Later,
    Layer,
    Log,
    Loop,
    Monad,
    Sum,
    UnsupportedCapabilityError,
    fallback,
)


@dataclass
class Node:
    label: str
    following: Callable[[], Node] = field(repr=False)


# Result


def test_result_failure_drops_accumulated_output(result_layer, error_of):
    w = result_layer
    prog = w.emit(Log.of("a")).then(lambda _: w.fail("boom")).then(lambda _: w.emit(Log.of("never")))
    assert error_of(prog.run()) == "boom"
    assert error_of(prog.exec()) == "boom"


def test_result_success_carries_output(result_layer):
    w = result_layer
    prog = w.writer(1, Log.of("a")).then(lambda n: w.writer(n + 1, Log.of("b")))
    assert prog.run().unwrap() == (2, ["a", "b"])
    assert prog.exec().unwrap() == ["a", "b"]


def test_result_choice_starts_both_branches_from_same_accumulator(result_layer):
    w = result_layer
    primary = w.emit(Log.of("primary")).then(lambda _: w.fail("down"))
    secondary = w.writer(2, Log.of("secondary"))
    prog = w.emit(Log.of("start")).then(lambda _: fallback(primary, secondary))
    assert prog.run().unwrap() == (2, ["start", "secondary"])


def test_result_lift_pairs_with_unchanged_accumulator(result_layer, error_of):
    w = result_layer
    prog = w.emit(Log.of("a")).then(lambda _: w.lift(Ok(10)))
    assert prog.run().unwrap() == (10, ["a"])
    assert error_of(w.lift(Error("nope")).run()) == "nope"


def test_result_has_no_empty_choice(result_layer):
    with pytest.raises(UnsupportedCapabilityError) as exc_info:
        result_layer.empty()
    assert exc_info.value.capability == "zero"
    assert exc_info.value.monad == "result"


# Identity


def test_identity_cannot_fail(log_layer):
    with pytest.raises(UnsupportedCapabilityError, match="fail"):
        log_layer.fail("boom")


def test_identity_embed_runs_on_every_run(log_layer):
    calls: list[int] = []
    prog = log_layer.embed(lambda: calls.append(1) or len(calls))
    assert calls == []
    assert prog.run() == (1, [])
    assert prog.run() == (2, [])


# Many (nondeterminism)


def test_many_explores_every_branch(many_layer):
    w = many_layer
    coin = w.writer("H", Log.of("h")).or_else(w.writer("T", Log.of("t")))
    results = coin.zip(coin).run()
    assert results == [
        (("H", "H"), ["h", "h"]),
        (("H", "T"), ["h", "t"]),
        (("T", "H"), ["t", "h"]),
        (("T", "T"), ["t", "t"]),
    ]


def test_many_failure_and_empty_prune(many_layer):
    w = many_layer
    pick = w.writer(1, Log.of("one")).or_else(w.writer(2, Log.of("two")))
    odd_only = pick.then(lambda n: w.pure(n) if n % 2 else w.empty())
    assert odd_only.run() == [(1, ["one"])]
    assert w.fail("ignored").run() == []


def test_many_has_no_fixpoint(many_layer):
    with pytest.raises(UnsupportedCapabilityError, match="fix"):
        many_layer.fix(lambda me: many_layer.pure(me))


# Fixpoint


def test_identity_fix_ties_the_knot(log_layer):
    w = log_layer
    prog = w.fix(lambda me: w.writer(Node("loop", lambda: me.force()), Log.of("built")))
    node, output = prog.run()
    assert node.following() is node
    assert output == ["built"]


def test_fix_only_exposes_result_not_output(log_layer):
    w = log_layer
    seen: list[Later[Node]] = []

    def body(me: Later[Node]):
        seen.append(me)
        return w.writer(Node("n", me.force), Log.of("x"))

    node, _ = w.fix(body).run()
    assert seen[0].force() is node


def test_forcing_fix_result_early_raises(log_layer):
    w = log_layer
    prog = w.fix(lambda me: w.pure(me.force()))
    with pytest.raises(FixpointError):
        prog.run()


def test_result_fix_resolves_on_ok(result_layer):
    w = result_layer
    prog = w.emit(Log.of("pre")).then(
        lambda _: w.fix(lambda me: w.writer(Node("r", me.force), Log.of("node")))
    )
    node, output = prog.run().unwrap()
    assert node.following() is node
    assert output == ["pre", "node"]


def test_later_handle():
    later: Later[int] = Later()
    doubled = later.map(lambda n: n * 2)
    assert not later.ready
    assert not doubled.ready
    with pytest.raises(FixpointError):
        doubled.force()
    later.resolve(21)
    assert doubled.force() == 42
    assert later.ready
    with pytest.raises(RuntimeError):
        later.resolve(0)


def test_later_ready_does_not_run_mapped_functions():
    calls: list[int] = []
    later: Later[int] = Later()

    def succ(n: int) -> int:
        calls.append(n)
        return n + 1

    derived = later.map(succ)
    assert not derived.ready
    later.resolve(1)
    assert derived.ready
    assert calls == []
    assert derived.force() == 2
    assert derived.force() == 2
    assert calls == [1]
    with pytest.raises(RuntimeError, match="derived"):
        later.map(str).resolve("x")


# Custom monad without optional capabilities


def test_minimal_custom_monad_uses_default_map_and_loop():
    boxed = Monad(
        name="box",
        pure=lambda value: ("box", value),
        bind=lambda m, f: f(m[1]),
    )
    w = Layer(monoid=Sum.monoid(), monad=boxed)
    prog = w.writer(2, Sum(2)).map(lambda n: n + 1)
    assert prog.run() == ("box", (3, Sum(2)))

    counted = w.tail_rec(
        lambda n: w.writer(Done(n) if n == 3 else Loop(n + 1), Sum(1)),
        0,
    )
    assert counted.run() == ("box", (3, Sum(4)))
    assert not boxed.supports("plus")
    assert IDENTITY.supports("fix")
