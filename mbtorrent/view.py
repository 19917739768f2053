"""Helpers for comparing, searching and printing raw byte views."""

from __future__ import annotations

from typing import TextIO, Union

ByteView = Union[bytes, bytearray, memoryview, str]


def _as_bytes(view: ByteView) -> bytes:
    if isinstance(view, str):
        return view.encode("utf-8")
    return bytes(view)


def cview_cmp(lhs: ByteView, rhs: ByteView) -> int:
    """Compare two views byte by byte; return -1, 0 or 1.

    A view that is a strict prefix of the other compares lower.
    """
    left = _as_bytes(lhs)
    right = _as_bytes(rhs)
    return (left > right) - (left < right)


def cview_contains(view: ByteView, c: Union[int, bytes, str]) -> bool:
    """Return True if the single byte ``c`` occurs in ``view``."""
    if isinstance(c, int):
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte value out of range: {c}")
        needle = c
    else:
        raw = _as_bytes(c)
        if len(raw) != 1:
            raise ValueError("expected a single byte")
        needle = raw[0]
    return needle in _as_bytes(view)


def cview_format(view: ByteView) -> str:
    """Render a view as text, escaping non-printable bytes as ``U+00XX``."""
    return "".join(
        chr(byte) if 0x20 <= byte < 0x7F else f"U+00{byte:02X}"
        for byte in _as_bytes(view)
    )


def cview_fprint(view: ByteView, stream: TextIO) -> None:
    """Write the rendering of ``view`` to ``stream``."""
    stream.write(cview_format(view))