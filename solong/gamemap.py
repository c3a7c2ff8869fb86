"""Reading and checking so_long map files.

A map is a rectangle of characters: ``1`` wall, ``0`` floor, ``P`` the
player, ``C`` a collectible and ``E`` an exit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Tuple, Union
import os

from solong.linereader import LineReader

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"


class MapError(Exception):
    """A map file cannot be read or does not describe a playable map."""


@dataclass(frozen=True)
class GameMap:
    """The rows of a map, top to bottom."""

    rows: Tuple[str, ...]

    def __init__(self, rows: Iterable[str]) -> None:
        object.__setattr__(self, "rows", tuple(rows))

    @property
    def width(self) -> int:
        """Length of the first row, or 0 for an empty map."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)


class ElementCounts(NamedTuple):
    player: int
    exit: int
    collectible: int


def read_map(path: Union[str, "os.PathLike[str]"]) -> GameMap:
    """Read a map file, one row per line, newlines dropped."""
    try:
        with open(path, encoding="utf-8") as stream:
            rows = [line[:-1] if line.endswith("\n") else line for line in LineReader(stream)]
    except OSError as exc:
        raise MapError(f"cannot open map file {os.fspath(path)!r}: {exc.strerror or exc}") from exc
    if not rows:
        raise MapError(f"map file {os.fspath(path)!r} is empty")
    return GameMap(rows)


def count_elements(game_map: GameMap) -> ElementCounts:
    """Count the players, exits and collectibles on the map."""
    text = "".join(game_map.rows)
    return ElementCounts(text.count(PLAYER), text.count(EXIT), text.count(COLLECTIBLE))


def validate_elements(game_map: GameMap) -> GameMap:
    """Check for one player, at least one exit and one collectible."""
    counts = count_elements(game_map)
    if counts.player != 1:
        raise MapError("the map must have exactly 1 player ('P')")
    if counts.exit < 1:
        raise MapError("the map must have at least 1 exit ('E')")
    if counts.collectible < 1:
        raise MapError("the map must have at least 1 collectible ('C')")
    return game_map


def validate_map(game_map: GameMap) -> GameMap:
    """Check size, shape, surrounding walls and then the elements."""
    width, height = game_map.width, game_map.height
    if height < 3 or width < 3:
        raise MapError("the map is too small or empty")
    for y, row in enumerate(game_map.rows):
        if len(row) != width:
            raise MapError(
                f"the map is not rectangular: row {y} has length {len(row)} (expected {width})"
            )
        on_edge_row = y in (0, height - 1)
        for x, tile in enumerate(row):
            if (on_edge_row or x in (0, width - 1)) and tile != WALL:
                raise MapError(f"the map is not surrounded by walls at row {y}, column {x}")
    return validate_elements(game_map)