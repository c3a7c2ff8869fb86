"""The so_long window: textures, drawing and the command entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union
import os

import pygame

from solong.gamemap import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    GameMap,
    MapError,
    read_map,
    validate_elements,
)

TILE_SIZE = 32
TITLE = "so_long"
SPRITE_DIR = "sprites"
_FRAME_RATE = 30


@dataclass
class Textures:
    """One image per kind of tile."""

    wall: pygame.Surface
    floor: pygame.Surface
    player: pygame.Surface
    collectible: pygame.Surface
    exit: pygame.Surface

    def for_tile(self, tile: str) -> Optional[pygame.Surface]:
        """The image for a map character, or ``None`` if it has none."""
        return {
            WALL: self.wall,
            FLOOR: self.floor,
            PLAYER: self.player,
            COLLECTIBLE: self.collectible,
            EXIT: self.exit,
        }.get(tile)


def load_textures(sprite_dir: Union[str, "os.PathLike[str]"] = SPRITE_DIR) -> Textures:
    """Load the five tile images from ``sprite_dir``."""
    base = Path(sprite_dir)
    names = ("wall", "floor", "player", "collectible", "exit")
    try:
        images = {name: pygame.image.load(str(base / f"{name}.xpm")) for name in names}
    except (pygame.error, OSError) as exc:
        raise RuntimeError(f"could not load textures: {exc}") from exc
    return Textures(**images)


def draw_map(surface: pygame.Surface, game_map: GameMap, textures: Textures) -> None:
    """Draw every known tile of the map onto ``surface``."""
    for y, row in enumerate(game_map.rows):
        for x, tile in enumerate(row):
            image = textures.for_tile(tile)
            if image is not None:
                surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))


def init_window(game_map: GameMap) -> pygame.Surface:
    """Open a window sized to the map and return its surface."""
    try:
        pygame.init()
        surface = pygame.display.set_mode(
            (game_map.width * TILE_SIZE, game_map.height * TILE_SIZE)
        )
    except pygame.error as exc:
        raise RuntimeError(f"could not create the window: {exc}") from exc
    pygame.display.set_caption(TITLE)
    return surface


def _run() -> None:
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
        pygame.display.flip()
        clock.tick(_FRAME_RATE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the map given on the command line until the window is closed."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: so_long <map_file>")
        return 1
    try:
        game_map = validate_elements(read_map(args[0]))
    except MapError as exc:
        print(f"Error: {exc}")
        return 1
    try:
        surface = init_window(game_map)
        textures = load_textures()
        draw_map(surface, game_map, textures)
        pygame.display.flip()
        _run()
    except RuntimeError as exc:
        print(f"Error: {exc}")
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())