"""Bencode codec, torrent metainfo reading and writing, and piece bookkeeping."""

__version__ = "1.1.0"
__all__ = ["bencode", "file_handler", "maketorrent", "torrent", "view"]