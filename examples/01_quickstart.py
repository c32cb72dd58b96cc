from __future__ import annotations

from _infra import banner

from cpswriter import Layer, Log, observe, restrict, rewrite, run


def main() -> None:
    banner("01_quickstart: emit, observe, rewrite, restrict")

    w = Layer.identity(Log.monoid())

    def step(name: str):
        return w.writer(len(name), Log.of(f"step {name}"))

    program = (
        step("parse")
        .then(lambda n: step("validate").map(lambda m: n + m))
        .then(lambda total: w.emit(Log.of(f"total={total}")).map(lambda _: total))
    )

    value, log = run(program)
    print(f"value: {value}")
    print(f"log:   {list(log)!r}")

    (value, inner_log), log = run(observe(program))
    print(f"observed inner log: {list(inner_log)!r}")

    shouted = rewrite(lambda entries: Log(e.upper() for e in entries), program)
    print(f"rewritten: {list(run(shouted)[1])!r}")

    silent = restrict(program.map(lambda v: (v, lambda _log: Log[str]())))
    print(f"restricted: {run(silent)!r}")


if __name__ == "__main__":
    main()
