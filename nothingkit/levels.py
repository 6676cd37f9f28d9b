"""Level metadata and the folder of available levels."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .line_stream import LineStream, trim_endline

LEVEL_FOLDER_MAX_LENGTH = 512
_METADATA_BUFFER = 256


@dataclass(frozen=True)
class LevelMetadata:
    """Descriptive data about a level; the title loses a trailing newline."""

    title: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", trim_endline(self.title))


def level_metadata_from_line_stream(line_stream: LineStream) -> LevelMetadata:
    """Metadata from the next line of the stream."""
    line = line_stream.next_line()
    if line is None:
        raise ValueError("level file has no title line")
    return LevelMetadata(line)


def read_level_metadata(filename: str) -> LevelMetadata:
    """Metadata read from the first line of a level file."""
    with LineStream(filename, "r", _METADATA_BUFFER) as stream:
        return level_metadata_from_line_stream(stream)


class LevelFolder:
    """The level files of a directory and their titles, in directory order.

    Entries whose names start with a dot are skipped.
    """

    def __init__(self, dirpath: str) -> None:
        filenames: list[str] = []
        titles: list[str] = []
        for name in os.listdir(dirpath):
            if name.startswith("."):
                continue
            path = f"{dirpath}/{name}"[:LEVEL_FOLDER_MAX_LENGTH - 1]
            path = trim_endline(path)
            titles.append(read_level_metadata(path).title)
            filenames.append(path)
        self.filenames: tuple[str, ...] = tuple(filenames)
        self.titles: tuple[str, ...] = tuple(titles)

    def __len__(self) -> int:
        return len(self.filenames)