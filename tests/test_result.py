"""Unit tests for the Result utilities used by the ``try_*`` decode helpers."""

from __future__ import annotations

import pytest

from wikiterms.core.errors import DocumentDecodeError
from wikiterms.core.result import Err, Ok, Result, capture, err, ok


def test_ok_map_and_flat_map() -> None:
    """`Ok` should map/flat_map and keep values typed."""
    r: Result[str, str] = ok("en")
    r2 = r.map(str.upper).flat_map(lambda x: ok(f"{x}-GB"))
    assert r2.is_ok() and r2.unwrap() == "EN-GB"


def test_err_propagation_and_map_err() -> None:
    """`Err` should propagate through map/flat_map and allow mapping the error."""
    r: Result[int, str] = err("boom")
    assert r.is_err()
    assert r.map(lambda x: x + 1).is_err()
    r2 = r.map_err(lambda e: f"{e}!")
    assert isinstance(r2, Err) and r2.unwrap_err() == "boom!"


def test_unwrap_variants_and_defaults() -> None:
    """Unwrap returns defaults on Err and raises without one."""
    assert ok("x").unwrap() == "x"
    assert err("e").unwrap(default="fallback") == "fallback"
    assert err("e").get_or("fallback") == "fallback"
    with pytest.raises(RuntimeError, match="no document"):
        err("e").expect("no document")


def test_unwrap_chains_exception_payload() -> None:
    """Unwrapping an exception payload keeps it as the cause."""
    failure = DocumentDecodeError("labels", "Input should be a valid dictionary")
    with pytest.raises(RuntimeError) as info:
        err(failure).unwrap()
    assert info.value.__cause__ is failure


def test_capture_wraps_listed_exceptions_only() -> None:
    """`capture` turns listed exceptions into Err and lets others propagate."""

    def bad() -> int:
        raise DocumentDecodeError("id", "Input should be a valid string")

    assert capture(lambda: 3, DocumentDecodeError) == Ok(3)

    failed = capture(bad, DocumentDecodeError)
    assert failed.is_err()
    assert failed.unwrap_err().path == "id"

    with pytest.raises(DocumentDecodeError):
        capture(bad, KeyError)
