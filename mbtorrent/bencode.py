"""Bencode decoding and encoding.

Integers map to ``int``, byte strings to ``bytes``, lists to ``list`` and
dictionaries to ``dict`` with ``bytes`` keys in the order they appear.
"""

from __future__ import annotations

from typing import Any, Tuple, Union

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)
_UINT64_MAX = 2**64 - 1

_DIGITS = frozenset(b"0123456789")

Bencodable = Union[int, bytes, bytearray, str, list, tuple, dict]


class BencodeError(ValueError):
    """Raised when data is not valid bencode or cannot be encoded."""


class _Decoder:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def _peek(self) -> int:
        if self.pos >= len(self.data):
            raise BencodeError("unexpected end of data")
        return self.data[self.pos]

    def _consume(self, expected: int) -> bool:
        if self.pos < len(self.data) and self.data[self.pos] == expected:
            self.pos += 1
            return True
        return False

    def _unsigned(self, end: int) -> int:
        data = self.data
        start = self.pos
        if start >= len(data) or data[start] == end:
            raise BencodeError(f"missing number at offset {start}")
        if data[start] == ord("0") and (
            start + 1 >= len(data) or data[start + 1] != end
        ):
            raise BencodeError(f"leading zero in number at offset {start}")
        value = 0
        while not self._consume(end):
            byte = self._peek()
            if byte not in _DIGITS:
                raise BencodeError(f"invalid digit at offset {self.pos}")
            value = value * 10 + (byte - ord("0"))
            if value > _UINT64_MAX:
                raise BencodeError(f"number too large at offset {start}")
            self.pos += 1
        return value

    def _integer(self) -> int:
        negative = self._consume(ord("-"))
        value = self._unsigned(ord("e"))
        if negative and value == 0:
            raise BencodeError("negative zero is not allowed")
        limit = INT64_MAX + (1 if negative else 0)
        if value > limit:
            raise BencodeError("integer does not fit in 64 bits")
        return -value if negative else value

    def _string(self) -> bytes:
        length = self._unsigned(ord(":"))
        end = self.pos + length
        if end > len(self.data):
            raise BencodeError("string runs past end of data")
        value = self.data[self.pos:end]
        self.pos = end
        return value

    def value(self) -> Any:
        head = self._peek()
        if head == ord("i"):
            self.pos += 1
            return self._integer()
        if head == ord("l"):
            self.pos += 1
            items = []
            while not self._consume(ord("e")):
                items.append(self.value())
            return items
        if head == ord("d"):
            self.pos += 1
            mapping = {}
            while not self._consume(ord("e")):
                key = self._string()
                mapping[key] = self.value()
            return mapping
        return self._string()


def _to_bytes(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def decode_prefix(data: Union[bytes, bytearray, memoryview, str]) -> Tuple[Any, int]:
    """Decode one value from the start of ``data``.

    Returns the value and the number of bytes it took.
    """
    decoder = _Decoder(_to_bytes(data))
    value = decoder.value()
    return value, decoder.pos


def decode(data: Union[bytes, bytearray, memoryview, str]) -> Any:
    """Decode the value at the start of ``data``; trailing bytes are ignored."""
    value, _ = decode_prefix(data)
    return value


def _encode_string(raw: bytes, out: bytearray) -> None:
    out += str(len(raw)).encode("ascii")
    out += b":"
    out += raw


def _encode_into(value: Any, out: bytearray) -> None:
    if isinstance(value, bool):
        raise BencodeError("booleans cannot be bencoded")
    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise BencodeError("integer does not fit in 64 bits")
        out += b"i%de" % value
    elif isinstance(value, (bytes, bytearray, memoryview)):
        _encode_string(bytes(value), out)
    elif isinstance(value, str):
        _encode_string(value.encode("utf-8"), out)
    elif isinstance(value, (list, tuple)):
        out += b"l"
        for item in value:
            _encode_into(item, out)
        out += b"e"
    elif isinstance(value, dict):
        out += b"d"
        for key, item in value.items():
            if isinstance(key, str):
                key = key.encode("utf-8")
            elif isinstance(key, (bytes, bytearray, memoryview)):
                key = bytes(key)
            else:
                raise BencodeError(f"dictionary key must be a string, not {type(key).__name__}")
            _encode_string(key, out)
            _encode_into(item, out)
        out += b"e"
    else:
        raise BencodeError(f"cannot bencode {type(value).__name__}")


def encode(value: Bencodable) -> bytes:
    """Encode ``value``; dictionary keys keep their insertion order."""
    out = bytearray()
    _encode_into(value, out)
    return bytes(out)