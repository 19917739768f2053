[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mbtorrent"
version = "1.1.0"
description = "Bencode codec, .torrent metainfo reader and writer, and piece bookkeeping for BitTorrent"
requires-python = ">=3.10"
dependencies = []
keywords = ["bittorrent", "bencode", "torrent", "metainfo", "p2p"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: File Sharing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mbtorrent"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
