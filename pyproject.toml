[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkpress"
version = "0.1.0"
description = "Chunked zlib and run-length compression tools, a text-file demo and a small snake game"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["compression", "zlib", "run-length encoding", "chunks", "threads", "snake"]
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
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chunkpress-textfile = "chunkpress.textfile:main"
chunkpress-rle = "chunkpress.rle:main"
chunkpress-zchunks = "chunkpress.zchunks:main"
chunkpress-snake = "chunkpress.snake:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkpress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
