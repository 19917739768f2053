import pytest

from mbtorrent.bencode import encode
from mbtorrent.torrent import Torrent, TorrentError, TorrentFile, parse_torrent_file

PIECES = b"\x01" * 20 + b"\x02" * 20


def single_node():
    return {
        b"announce": b"http://localhost:6969/announce",
        b"created by": b"someone",
        b"creation date": 1700000000,
        b"info": {
            b"length": 1234,
            b"name": b"file.txt",
            b"piece length": 262144,
            b"pieces": PIECES,
        },
    }


def dir_node():
    return {
        b"announce": b"http://localhost:6969/announce",
        b"created by": b"someone",
        b"creation date": 42,
        b"info": {
            b"files": [
                {b"length": 10, b"path": [b"a", b"b.txt"]},
                {b"length": 32, b"path": [b"c.txt"]},
            ],
            b"name": b"folder",
            b"piece length": 262144,
            b"pieces": PIECES,
        },
    }


def test_single_file_fields():
    t = Torrent.from_bytes(encode(single_node()))
    assert t.announce == b"http://localhost:6969/announce"
    assert t.created_by == b"someone"
    assert t.creation_date == 1700000000
    assert t.name == b"file.txt"
    assert t.piece_length == 262144
    assert t.pieces == PIECES
    assert t.size == len(PIECES)
    assert not t.is_dir
    assert t.length == 1234
    assert len(t.files) == 1
    assert t.files[0].path is None


def test_directory_fields():
    t = Torrent.from_bytes(encode(dir_node()))
    assert t.is_dir
    assert t.name == b"folder"
    assert len(t.files) == 2
    assert t.length == 10 + 32
    first = t.file_at(0)
    assert first == TorrentFile(length=10, path=(b"a", b"b.txt"))
    assert first.path_size == 2
    assert first.path_get(1) == b"b.txt"
    assert first.path_get(2) is None


def test_file_at_out_of_range():
    t = Torrent.from_bytes(encode(dir_node()))
    assert t.file_at(2) is None
    assert t.file_at(-1) is None


def test_single_file_path_queries():
    f = TorrentFile(length=5)
    assert f.path_size == 0
    assert f.path_get(0) is None


def test_node_is_kept():
    node = dir_node()
    t = Torrent.from_node(node)
    assert t.node == node
    assert encode(t.node) == encode(dir_node())


def test_parse_torrent_file(tmp_path):
    target = tmp_path / "x.torrent"
    target.write_bytes(encode(single_node()))
    t = parse_torrent_file(target)
    assert t.name == b"file.txt"
    assert t.length == 1234


def test_parse_missing_file(tmp_path):
    with pytest.raises(OSError):
        parse_torrent_file(tmp_path / "missing.torrent")


def test_invalid_bencode():
    with pytest.raises(TorrentError):
        Torrent.from_bytes(b"d8:announce")


def test_top_level_must_be_dict():
    with pytest.raises(TorrentError):
        Torrent.from_bytes(encode([1, 2]))


def test_wrong_field_type():
    node = single_node()
    node[b"creation date"] = b"yesterday"
    with pytest.raises(TorrentError):
        Torrent.from_node(node)


def test_file_entry_without_path():
    node = dir_node()
    node[b"info"][b"files"] = [{b"length": 3}]
    with pytest.raises(TorrentError):
        Torrent.from_node(node)


def test_missing_info_gives_empty_torrent():
    t = Torrent.from_node({b"announce": b"http://localhost:6969/announce"})
    assert t.files == ()
    assert t.length == 0
    assert not t.is_dir
    assert t.size == 0
    assert t.pieces is None