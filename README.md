# mbtorrent

A small BitTorrent toolkit in pure Python, with no third-party dependencies:

- **Bencode** (`mbtorrent.bencode`): a strict decoder and an encoder for the
  format used by `.torrent` files.
- **Torrent metainfo** (`mbtorrent.torrent`, `mbtorrent.maketorrent`): read
  `.torrent` files (single-file or multi-file) into a `Torrent` object, and
  create new ones for a file or a directory, with SHA-1 piece hashes over
  256 KiB pieces.
- **Piece bookkeeping** (`mbtorrent.file_handler`): a `FileHandler` that lays
  out the files and pieces described by a torrent, with one slot per 16 KiB
  block of each piece.
- **Byte-view helpers** (`mbtorrent.view`): comparison, searching and
  printable rendering of raw byte strings.

## Bencode

```python
from mbtorrent.bencode import BencodeError, decode, decode_prefix, encode

data = encode({b"announce": b"http://localhost:6969/announce", b"size": 42})
value = decode(data)  # {b"announce": b"http://...", b"size": 42}

# decode_prefix returns the value and the number of bytes it took.
value, used = decode_prefix(data + b"trailing")

try:
    decode(b"i03e")  # leading zeros are rejected
except BencodeError as exc:
    print("invalid:", exc)
```

Integers decode to `int`, strings to `bytes`, lists to `list` and
dictionaries to `dict` with `bytes` keys in the order they appear. `decode`
ignores bytes after the first complete value. The decoder is strict:
integers must fit in a signed 64-bit range, `-0` and leading zeros are
refused, and truncated input raises `BencodeError` (a `ValueError`).

`encode` accepts `int`, `bytes`/`bytearray`/`memoryview`, `str` (written as
UTF-8), `list`/`tuple` and `dict` with `str` or `bytes` keys. Dictionary keys
are written in insertion order, not sorted. Booleans, integers outside the
64-bit range and other types raise `BencodeError`.

## Reading a torrent

```python
from mbtorrent.torrent import Torrent, TorrentError, parse_torrent_file

torrent = parse_torrent_file("example.torrent")
print(torrent.name, torrent.piece_length, torrent.length, torrent.is_dir)

first = torrent.file_at(0)          # None if out of range
if torrent.is_dir:
    print(first.path_size, first.path_get(0))

with open("example.torrent", "rb") as fh:
    same = Torrent.from_bytes(fh.read())
```

`Torrent` exposes `announce`, `created_by`, `creation_date`, `name`,
`piece_length`, `pieces` (the concatenated SHA-1 digests), `files`, the
decoded top-level dictionary as `node`, and the derived `size`, `is_dir` and
`length`. A single-file torrent has one `TorrentFile` whose `path` is `None`.

Data that is not valid bencode, or whose fields have the wrong type, raises
`TorrentError` (a `ValueError`). `parse_torrent_file` lets errors from
opening the file (`OSError`) through unchanged.

## Creating a torrent

```python
from mbtorrent.maketorrent import build_torrent, hash_pieces, make_torrent_file

# Writes "<name>.torrent" into output_dir (the current directory by default)
# and returns its path.
target = make_torrent_file("my_directory", output_dir=".")

# Or build the bencode-ready dictionary yourself, with a fixed date.
meta = build_torrent("my_file.bin", creation_date=0)
```

The metadata uses the announce URL `http://localhost:6969/announce`,
`created by` set to `mbtorrent`, and a piece length of 262144 bytes. For a
directory, every non-directory entry below it is listed, in name order, and
pieces are hashed over the files' contents concatenated in that order.

`hash_pieces(chunks, piece_length)` splits a stream of byte chunks into
pieces and returns their 20-byte SHA-1 digests joined together; the last
piece may be shorter, and empty input gives empty output.

## Piece bookkeeping

```python
from mbtorrent.file_handler import FileHandler, PieceStatus
from mbtorrent.torrent import parse_torrent_file

handler = FileHandler.from_torrent(parse_torrent_file("example.torrent"))
print(handler.nb_files, handler.nb_pieces, handler.total_size)
piece = handler.pieces[0]
print(piece.status is PieceStatus.INVALID, piece.nb_blocks, piece.hash.hex())
```

`from_torrent` raises `ValueError` if the torrent has no piece hashes or no
name. Each file becomes a `HandledFile` named after the last component of its
path (or after the torrent, for a single-file torrent). Every `Piece` starts
as `PieceStatus.INVALID` with all its blocks marked not received;
`Piece.clear()` drops its block table, hash and data.

## Byte views

```python
import sys
from mbtorrent.view import cview_cmp, cview_contains, cview_format, cview_fprint

cview_cmp(b"abc", b"abd")        # -1; a strict prefix sorts first
cview_contains(b"abc", b"b")     # True
cview_format(b"ab\x01")          # "abU+0001"
cview_fprint(b"ab\x01", sys.stdout)
```

## What it does not do

mbtorrent handles metadata and bookkeeping only. It does not contact
trackers, talk to peers, download or verify pieces, or write downloaded data
to disk, and it provides no command-line program.