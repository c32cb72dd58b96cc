from __future__ import annotations

import time
import tracemalloc

from _infra import banner

from cpswriter import Layer, Sum, replicate_, run


def main() -> None:
    banner("03_strict_accumulation: a million emits, flat stack, flat memory")

    w = Layer.identity(Sum.monoid())
    program = replicate_(w.emit(Sum(1)), n=1_000_000)

    tracemalloc.start()
    started = time.perf_counter()
    _, total = run(program)
    elapsed = time.perf_counter() - started
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    print(f"total: {total.value}")
    print(f"elapsed: {elapsed:.2f}s, peak traced memory: {peak / 1024:.1f} KiB")


if __name__ == "__main__":
    main()
