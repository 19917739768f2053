"""Tracking the files and pieces of a torrent being downloaded."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from .torrent import Torrent

BLOCK_SIZE = 1 << 14
_HASH_SIZE = 20


class PieceStatus(enum.Enum):
    """State of a piece."""

    VALID = 0
    DOWNLOADING = 1
    INVALID = 2


@dataclass
class Piece:
    """One piece: its expected hash, which blocks arrived and its data."""

    hash: bytes
    received: List[bool] = field(default_factory=list)
    status: PieceStatus = PieceStatus.INVALID
    data: Optional[bytes] = None

    @property
    def nb_blocks(self) -> int:
        """Number of blocks the piece is made of."""
        return len(self.received)

    def clear(self) -> None:
        """Drop the block table, hash and data of the piece."""
        self.received = []
        self.hash = b""
        self.data = None


@dataclass(frozen=True)
class HandledFile:
    """A file of the torrent: its name and length."""

    name: bytes
    length: int


@dataclass
class FileHandler:
    """Files and pieces of one torrent."""

    name: bytes
    pieces_hash: bytes
    is_dir: bool
    files: List[HandledFile]
    pieces: List[Piece]

    @property
    def nb_pieces(self) -> int:
        return len(self.pieces)

    @property
    def nb_files(self) -> int:
        return len(self.files)

    @property
    def total_size(self) -> int:
        """Sum of the lengths of all files."""
        return sum(f.length for f in self.files)

    @classmethod
    def from_torrent(cls, torrent: Torrent) -> "FileHandler":
        """Set up the handler for ``torrent``; it must carry piece hashes and a name."""
        if torrent.pieces is None:
            raise ValueError("torrent has no piece hashes")
        if torrent.name is None:
            raise ValueError("torrent has no name")
        return cls(
            name=torrent.name,
            pieces_hash=torrent.pieces,
            is_dir=torrent.is_dir,
            files=_files_of(torrent),
            pieces=_pieces_of(torrent),
        )


def _files_of(torrent: Torrent) -> List[HandledFile]:
    if len(torrent.files) == 1 and not torrent.is_dir:
        return [HandledFile(name=torrent.name or b"", length=torrent.files[0].length)]
    handled = []
    for entry in torrent.files:
        if not entry.path:
            raise ValueError("file entry has an empty path")
        handled.append(HandledFile(name=entry.path[-1], length=entry.length))
    return handled


def _pieces_of(torrent: Torrent) -> List[Piece]:
    hashes = torrent.pieces or b""
    blocks = -(-torrent.piece_length // BLOCK_SIZE) if torrent.piece_length > 0 else 0
    count = len(hashes) // _HASH_SIZE
    return [
        Piece(
            hash=hashes[i * _HASH_SIZE:(i + 1) * _HASH_SIZE],
            received=[False] * blocks,
        )
        for i in range(count)
    ]