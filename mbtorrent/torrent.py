"""Reading the metadata of a ``.torrent`` file into a :class:`Torrent`."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .bencode import BencodeError, decode


class TorrentError(ValueError):
    """Raised when torrent metadata is missing, malformed or of the wrong type."""


@dataclass(frozen=True)
class TorrentFile:
    """One file of a torrent: its length and, in a directory torrent, its path."""

    length: int
    path: Optional[Tuple[bytes, ...]] = None

    @property
    def path_size(self) -> int:
        """Number of components in the path (0 for a single-file torrent)."""
        return len(self.path) if self.path is not None else 0

    def path_get(self, idx: int) -> Optional[bytes]:
        """Return path component ``idx``, or None when it does not exist."""
        if self.path is None or not 0 <= idx < len(self.path):
            return None
        return self.path[idx]


def _expect(value: Any, kind: type, what: str) -> Any:
    if kind is int and isinstance(value, bool):
        raise TorrentError(f"{what} must be an integer")
    if not isinstance(value, kind):
        raise TorrentError(f"{what} must be {'an integer' if kind is int else 'a ' + kind.__name__}")
    return value


def _file_entry(entry: Any) -> TorrentFile:
    entry = _expect(entry, dict, "file entry")
    if b"length" not in entry or b"path" not in entry:
        raise TorrentError("file entry needs 'length' and 'path'")
    length = _expect(entry[b"length"], int, "file length")
    components = _expect(entry[b"path"], list, "file path")
    path = tuple(_expect(part, bytes, "path component") for part in components)
    return TorrentFile(length=length, path=path)


@dataclass
class Torrent:
    """Metadata of a torrent, as found in its bencoded dictionary."""

    announce: Optional[bytes] = None
    created_by: Optional[bytes] = None
    creation_date: int = 0
    name: Optional[bytes] = None
    piece_length: int = 0
    pieces: Optional[bytes] = None
    files: Tuple[TorrentFile, ...] = ()
    node: Optional[Dict[bytes, Any]] = field(default=None, repr=False)

    @classmethod
    def from_node(cls, node: Any) -> "Torrent":
        """Build a torrent from an already decoded top-level dictionary."""
        node = _expect(node, dict, "torrent")
        torrent = cls(node=node)
        if b"announce" in node:
            torrent.announce = _expect(node[b"announce"], bytes, "announce")
        if b"created by" in node:
            torrent.created_by = _expect(node[b"created by"], bytes, "created by")
        if b"creation date" in node:
            torrent.creation_date = _expect(node[b"creation date"], int, "creation date")
        if b"info" in node:
            torrent._fill_info(_expect(node[b"info"], dict, "info"))
        return torrent

    def _fill_info(self, info: Dict[bytes, Any]) -> None:
        if b"piece length" in info:
            self.piece_length = _expect(info[b"piece length"], int, "piece length")
        if b"name" in info:
            self.name = _expect(info[b"name"], bytes, "name")
        if b"pieces" in info:
            self.pieces = _expect(info[b"pieces"], bytes, "pieces")
        if b"files" in info:
            entries = _expect(info[b"files"], list, "files")
            self.files = tuple(_file_entry(entry) for entry in entries)
        else:
            length = _expect(info.get(b"length", 0), int, "length")
            self.files = (TorrentFile(length=length),)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "Torrent":
        """Decode bencoded torrent metadata."""
        try:
            node = decode(data)
        except BencodeError as exc:
            raise TorrentError(f"invalid torrent data: {exc}") from exc
        return cls.from_node(node)

    @property
    def size(self) -> int:
        """Length in bytes of the concatenated piece hashes."""
        return len(self.pieces) if self.pieces is not None else 0

    @property
    def is_dir(self) -> bool:
        """True if the torrent describes a directory of files."""
        return bool(self.files) and self.files[0].path is not None

    @property
    def length(self) -> int:
        """Total length of the content in bytes."""
        if not self.is_dir:
            return self.files[0].length if self.files else 0
        return sum(f.length for f in self.files)

    def file_at(self, idx: int) -> Optional[TorrentFile]:
        """Return file ``idx``, or None when it is out of range."""
        if not 0 <= idx < len(self.files):
            return None
        return self.files[idx]


def parse_torrent_file(path: Union[str, os.PathLike]) -> Torrent:
    """Read and parse the ``.torrent`` file at ``path``."""
    with open(path, "rb") as handle:
        data = handle.read()
    return Torrent.from_bytes(data)