"""Deferred values returned by every resource client call.

A :class:`Promise` wraps a :class:`concurrent.futures.Future` produced by the
transport's worker pool and lets callers chain continuations or block for the
value. Continuations run on whichever thread completes the source future,
usually a transport worker, never necessarily the caller's thread.
"""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable, Generator, Iterable
from concurrent.futures import Future
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def _chain(source: Future[Any], target: Future[Any], fn: Callable[[Future[Any]], Any]) -> None:
    def _done(src: Future[Any]) -> None:
        # the caller may have cancelled the chained promise already
        if target.done():
            return
        if src.cancelled():
            target.cancel()
            return
        try:
            value = fn(src)
        except Exception as exc:
            target.set_exception(exc)
        else:
            target.set_result(value)

    source.add_done_callback(_done)


class Promise(Generic[T]):
    def __init__(self, future: Future[T]):
        self._future = future

    @classmethod
    def resolved(cls, value: T) -> Promise[T]:
        fut: Future[T] = Future()
        fut.set_result(value)
        return cls(fut)

    @classmethod
    def rejected(cls, exc: BaseException) -> Promise[Any]:
        fut: Future[Any] = Future()
        fut.set_exception(exc)
        return cls(fut)

    @classmethod
    def all(cls, promises: Iterable[Promise[Any]]) -> Promise[list[Any]]:
        """Resolve to the list of values, in order, or fail with the first failure."""
        pending = list(promises)
        out: Future[list[Any]] = Future()
        if not pending:
            out.set_result([])
            return cls(out)
        results: list[Any] = [None] * len(pending)
        remaining = [len(pending)]
        lock = threading.Lock()

        def _on_done(index: int, src: Future[Any]) -> None:
            with lock:
                if out.done():
                    return
                if src.cancelled():
                    out.cancel()
                    return
                exc = src.exception()
                if exc is not None:
                    out.set_exception(exc)
                    return
                results[index] = src.result()
                remaining[0] -= 1
                if remaining[0] == 0:
                    out.set_result(results)

        for index, promise in enumerate(pending):
            promise._future.add_done_callback(lambda f, i=index: _on_done(i, f))
        return cls(out)

    def then(self, fn: Callable[[T], R]) -> Promise[R]:
        """Transform the value once available; failures pass through untouched."""
        target: Future[R] = Future()
        _chain(self._future, target, lambda src: fn(src.result()))
        return Promise(target)

    def flat_map(self, fn: Callable[[T], Promise[R]]) -> Promise[R]:
        """Chain a call that itself returns a promise, without blocking a worker."""
        target: Future[R] = Future()

        def _copy(inner: Future[R]) -> None:
            if target.done():
                return
            if inner.cancelled():
                target.cancel()
                return
            exc = inner.exception()
            if exc is not None:
                target.set_exception(exc)
            else:
                target.set_result(inner.result())

        def _done(src: Future[T]) -> None:
            if target.done():
                return
            if src.cancelled():
                target.cancel()
                return
            exc = src.exception()
            if exc is not None:
                target.set_exception(exc)
                return
            try:
                inner = fn(src.result())
            except Exception as err:
                target.set_exception(err)
                return
            inner._future.add_done_callback(_copy)

        self._future.add_done_callback(_done)
        return Promise(target)

    def recover(self, fn: Callable[[BaseException], T]) -> Promise[T]:
        """Turn a failure into a value; successful values pass through."""
        target: Future[T] = Future()

        def _apply(src: Future[T]) -> T:
            exc = src.exception()
            if exc is None:
                return src.result()
            return fn(exc)

        _chain(self._future, target, _apply)
        return Promise(target)

    def claim(self, timeout: float | None = None) -> T:
        """Block until the value is available, re-raising any failure."""
        return self._future.result(timeout)

    result = claim

    def exception(self, timeout: float | None = None) -> BaseException | None:
        return self._future.exception(timeout)

    def done(self) -> bool:
        return self._future.done()

    def cancel(self) -> bool:
        # best effort: requests already on the wire keep running
        return self._future.cancel()

    def cancelled(self) -> bool:
        return self._future.cancelled()

    def add_done_callback(self, fn: Callable[[Promise[T]], Any]) -> None:
        self._future.add_done_callback(lambda _f: fn(self))

    def __await__(self) -> Generator[Any, None, T]:
        return asyncio.wrap_future(self._future).__await__()

    def __repr__(self) -> str:
        state = "done" if self._future.done() else "pending"
        return f"<Promise {state}>"


__all__ = ["Promise"]
