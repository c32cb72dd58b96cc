from __future__ import annotations

from _infra import Failure, FakeBackend, FakeCache, User, banner, run

from cpswriter import Layer, Log, fallback_chain, lift as L
from kungfu import Error, LazyCoroResult, Ok


async def main() -> None:
    banner("02_cache_fallback: async writer, fallback across sources")

    user_id = 42
    cache = FakeCache(users={user_id: User(id=user_id, name="user:42@cache")})
    replicas = [
        FakeBackend(name="replica-a", delay_seconds=0.01, available=False),
        FakeBackend(name="replica-b", delay_seconds=0.01, available=False),
    ]

    w = Layer.lazy(Log.monoid())

    def attempt(source: str, fetch):
        def lookup() -> LazyCoroResult[User, Failure]:
            return LazyCoroResult(lambda: fetch(user_id))

        return w.emit(Log.of(f"try {source}")).then(lambda _: L.call(w, lookup))

    sources = [attempt(r.name, r.fetch_user) for r in replicas]
    sources.append(attempt("cache", cache.get_user))

    pipeline = (
        w.emit(Log.of("lookup started"))
        .then(lambda _: fallback_chain(*sources))
        .then(lambda user: w.writer(user.name, Log.of(f"found {user.id}")))
    )

    result = await L.down.to_result_async(pipeline)
    match result:
        case Ok((name, log)):
            print(f"ok: {name}")
            print(f"log: {list(log)!r}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
