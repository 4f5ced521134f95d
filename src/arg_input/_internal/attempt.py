from collections.abc import Callable, Sequence

from returns.result import Failure, Result, Success


def attempt_map[T, U, E](
    items: Sequence[T],
    mapper: Callable[[T], Result[U, E]],
    *,
    discard: Callable[[U], object] | None = None,
) -> Result[list[U], list[E]]:
    """Map a fallible function over every item, keeping all failures.

    Unlike a fail-fast collect, the mapper runs exactly once for each item,
    in order, even after a failure. If every call succeeds the successes are
    returned in order. Otherwise every failure is returned in order and the
    successes are dropped; ``discard`` is called on each dropped success so
    the caller can release whatever it owns.
    """
    successes: list[U] = []
    failures: list[E] = []

    for item in items:
        result = mapper(item)
        if isinstance(result, Success):
            successes.append(result.unwrap())
        else:
            failures.append(result.failure())

    if not failures:
        return Success(successes)

    if discard is not None:
        for success in successes:
            discard(success)
    return Failure(failures)


__all__ = ["attempt_map"]
