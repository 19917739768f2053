import pytest

from mbtorrent.bencode import decode, encode
from mbtorrent.maketorrent import (
    ANNOUNCE,
    PIECE_LENGTH,
    build_torrent,
    hash_pieces,
    make_torrent_file,
)
from mbtorrent.torrent import Torrent, parse_torrent_file


def test_hash_pieces_known_digest():
    assert hash_pieces([b"abc"], 4) == bytes.fromhex(
        "a9993e364706816aba3e25717850c26c9cd0d89d"
    )


def test_hash_pieces_empty_input():
    assert hash_pieces([], 4) == b""


def test_hash_pieces_independent_of_chunking():
    data = bytes(range(256)) * 5
    whole = hash_pieces([data], 100)
    split = hash_pieces([data[:7], data[7:333], data[333:]], 100)
    assert whole == split
    assert len(whole) == 20 * ((len(data) + 99) // 100)


def test_hash_pieces_last_piece_matches_single_piece_hash():
    digests = hash_pieces([b"abcdef"], 4)
    assert digests[20:] == hash_pieces([b"ef"], 4)
    assert digests[:20] == hash_pieces([b"abcd"], 4)


def test_hash_pieces_rejects_bad_length():
    with pytest.raises(ValueError):
        hash_pieces([b"x"], 0)


def test_build_single_file(tmp_path):
    target = tmp_path / "data.bin"
    content = b"hello torrent" * 10
    target.write_bytes(content)
    node = build_torrent(target, creation_date=1234)
    assert list(node) == [b"announce", b"created by", b"creation date", b"info"]
    assert node[b"announce"] == ANNOUNCE
    assert node[b"creation date"] == 1234
    info = node[b"info"]
    assert list(info) == [b"length", b"name", b"piece length", b"pieces"]
    assert info[b"length"] == len(content)
    assert info[b"name"] == b"data.bin"
    assert info[b"piece length"] == PIECE_LENGTH
    assert info[b"pieces"] == hash_pieces([content])


def test_build_single_file_spanning_pieces(tmp_path):
    target = tmp_path / "big.bin"
    content = b"x" * (PIECE_LENGTH + 10)
    target.write_bytes(content)
    info = build_torrent(target, creation_date=0)[b"info"]
    assert len(info[b"pieces"]) == 40
    assert info[b"length"] == len(content)


def test_build_empty_file(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")
    info = build_torrent(target, creation_date=0)[b"info"]
    assert info[b"pieces"] == b""
    assert info[b"length"] == 0


def test_build_directory(tmp_path):
    root = tmp_path / "tree"
    (root / "a").mkdir(parents=True)
    (root / "a" / "b.txt").write_bytes(b"bbbb")
    (root / "c.txt").write_bytes(b"cc")
    node = build_torrent(str(root) + "/", creation_date=5)
    info = node[b"info"]
    assert list(info) == [b"files", b"name", b"piece length", b"pieces"]
    assert info[b"name"] == b"tree"
    paths = {tuple(entry[b"path"]): entry[b"length"] for entry in info[b"files"]}
    assert paths == {(b"a", b"b.txt"): 4, (b"c.txt",): 2}
    contents = [
        (root.joinpath(*(p.decode() for p in entry[b"path"]))).read_bytes()
        for entry in info[b"files"]
    ]
    assert info[b"pieces"] == hash_pieces(contents)


def test_directory_round_trips_through_torrent(tmp_path):
    root = tmp_path / "pack"
    root.mkdir()
    (root / "one").write_bytes(b"1" * 10)
    (root / "two").write_bytes(b"2" * 20)
    torrent = Torrent.from_bytes(encode(build_torrent(root, creation_date=9)))
    assert torrent.is_dir
    assert torrent.length == 30
    assert torrent.name == b"pack"
    assert torrent.creation_date == 9
    assert sorted(f.path for f in torrent.files) == [(b"one",), (b"two",)]


def test_make_torrent_file_writes_parsable_output(tmp_path):
    source = tmp_path / "movie.dat"
    source.write_bytes(b"frames" * 100)
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    written = make_torrent_file(source, out_dir)
    assert written == out_dir / "movie.dat.torrent"
    torrent = parse_torrent_file(written)
    assert torrent.name == b"movie.dat"
    assert torrent.length == 600
    assert torrent.announce == ANNOUNCE
    assert decode(written.read_bytes())[b"info"][b"pieces"] == torrent.pieces


def test_make_torrent_file_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        make_torrent_file(tmp_path / "nope", tmp_path)