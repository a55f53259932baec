"""Typed Result container for decode paths that should not raise.

The codec and fixture harness raise :class:`~wikiterms.core.errors.DocumentDecodeError`
on malformed input. Callers that process many documents (dump slices, CLI
batch runs) often prefer to collect failures instead, so every raising entry
point has a ``try_*`` twin returning ``Result[T, E]``:

- ``Ok(value)`` / ``Err(error)`` variants,
- combinators: ``map``, ``map_err``, ``flat_map``,
- helpers: ``unwrap``, ``expect``, ``unwrap_err``, ``get_or``,
- :func:`capture` to turn a raising call into a ``Result``.

Example
-------
>>> from wikiterms.core.result import ok, err, Result
>>> def parse_lang(x: str) -> Result[str, str]:
...     return ok(x) if x.isalpha() else err("not a language code")
>>> ok("en").flat_map(parse_lang).unwrap()
'en'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast, overload

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
X = TypeVar("X", bound=BaseException)


class Result(Generic[T, E]):
    """Either a decoded value (`Ok[T]`) or the error that prevented it (`Err[E]`)."""

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    @overload
    def unwrap(self) -> T: ...
    @overload
    def unwrap(self, default: T) -> T: ...

    def unwrap(self, default: T | None = None) -> T:
        """Return the inner value if ``Ok``, else raise or return ``default``.

        When the error payload is an exception it is re-raised as the cause
        of the :class:`RuntimeError`, so tracebacks still point at the field
        that failed to decode.
        """
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        if default is not None:
            return default
        error = cast(Err[T, E], self).error
        if isinstance(error, BaseException):
            raise RuntimeError(f"Attempted to unwrap Err: {error}") from error
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def expect(self, msg: str) -> T:
        """Return the inner value if ``Ok``, else raise ``RuntimeError(msg)``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(msg)

    def unwrap_err(self) -> E:
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the success value; propagate error unchanged."""
        if isinstance(self, Ok):
            return Ok(fn(cast(Ok[T, E], self).value))
        return cast(Result[U, E], self)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to the error value; propagate success unchanged."""
        if isinstance(self, Err):
            return Err(fn(cast(Err[T, E], self).error))
        return cast(Result[T, F], self)

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain computations that already return a :class:`Result`."""
        if isinstance(self, Ok):
            return fn(cast(Ok[T, E], self).value)
        return cast(Result[U, E], self)

    def get_or(self, default: T) -> T:
        return self.unwrap(default)

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        if isinstance(self, Ok):
            return f"Ok({cast(Ok[T, E], self).value!r})"
        if isinstance(self, Err):
            return f"Err({cast(Err[T, E], self).error!r})"
        return "Result(?)"


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Successful result wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    """Failed result wrapping an error payload of type ``E``."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)


def capture(fn: Callable[[], T], *catch: type[X]) -> Result[T, X]:
    """Run ``fn`` and wrap its return value, or one of the ``catch`` errors.

    Exceptions not listed in ``catch`` propagate unchanged.
    """
    try:
        return Ok(fn())
    except catch as exc:
        return Err(exc)
