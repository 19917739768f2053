"""Creating ``.torrent`` metadata for a file or a directory tree."""

from __future__ import annotations

import hashlib
import os
import stat
import time
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .bencode import encode

PIECE_LENGTH = 262144
ANNOUNCE = b"http://localhost:6969/announce"
CREATED_BY = b"mbtorrent"

PathLike = Union[str, os.PathLike]


def hash_pieces(
    chunks: Iterable[Union[bytes, bytearray, memoryview]],
    piece_length: int = PIECE_LENGTH,
) -> bytes:
    """Split the concatenated ``chunks`` into pieces and join their SHA-1 digests.

    The last piece may be shorter than ``piece_length``; no data gives no digest.
    """
    if piece_length <= 0:
        raise ValueError("piece length must be positive")
    digests = bytearray()
    buffer = bytearray()
    for chunk in chunks:
        buffer += chunk
        while len(buffer) >= piece_length:
            digests += hashlib.sha1(buffer[:piece_length]).digest()
            del buffer[:piece_length]
    if buffer:
        digests += hashlib.sha1(buffer).digest()
    return bytes(digests)


def _read_chunks(path: PathLike) -> Iterator[bytes]:
    with open(path, "rb") as handle:
        while True:
            chunk = handle.read(PIECE_LENGTH)
            if not chunk:
                return
            yield chunk


def _walk(root: str, prefix: Tuple[str, ...]) -> Iterator[Tuple[str, Tuple[str, ...]]]:
    """Yield every non-directory under ``root`` with its path components."""
    with os.scandir(root) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        parts = prefix + (entry.name,)
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path, parts)
        else:
            yield entry.path, parts


def _base_name(path: PathLike) -> str:
    text = os.fsdecode(os.fspath(path))
    if text.endswith(os.sep):
        text = text[:-1]
    return os.path.basename(text)


def _single_file_info(path: str, name: str) -> Dict[bytes, Any]:
    length = 0

    def stream() -> Iterator[bytes]:
        nonlocal length
        for chunk in _read_chunks(path):
            length += len(chunk)
            yield chunk

    pieces = hash_pieces(stream())
    return {
        b"length": length,
        b"name": os.fsencode(name),
        b"piece length": PIECE_LENGTH,
        b"pieces": pieces,
    }


def _directory_info(path: str, name: str) -> Dict[bytes, Any]:
    files: List[Dict[bytes, Any]] = []

    def stream() -> Iterator[bytes]:
        for full, parts in _walk(path, ()):
            size = 0
            for chunk in _read_chunks(full):
                size += len(chunk)
                yield chunk
            files.append(
                {b"length": size, b"path": [os.fsencode(part) for part in parts]}
            )

    pieces = hash_pieces(stream())
    return {
        b"files": files,
        b"name": os.fsencode(name),
        b"piece length": PIECE_LENGTH,
        b"pieces": pieces,
    }


def build_torrent(path: PathLike, creation_date: Optional[int] = None) -> Dict[bytes, Any]:
    """Build the metadata dictionary describing the file or directory at ``path``."""
    location = os.fsdecode(os.fspath(path))
    mode = os.lstat(location).st_mode
    name = _base_name(location)
    if creation_date is None:
        creation_date = int(time.time())
    if stat.S_ISDIR(mode):
        info = _directory_info(location, name)
    else:
        info = _single_file_info(location, name)
    return {
        b"announce": ANNOUNCE,
        b"created by": CREATED_BY,
        b"creation date": creation_date,
        b"info": info,
    }


def make_torrent_file(path: PathLike, output_dir: Optional[PathLike] = None) -> Path:
    """Write ``<name>.torrent`` for ``path`` into ``output_dir`` (default: cwd).

    Returns the path of the written file.
    """
    node = build_torrent(path)
    target = Path(output_dir if output_dir is not None else ".") / (
        _base_name(path) + ".torrent"
    )
    target.write_bytes(encode(node))
    return target