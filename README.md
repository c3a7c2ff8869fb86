# solong

Reads a so_long tile map, checks it, and shows it in a window with one
32-pixel sprite per tile.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Showing a map

```
solong path/to/level.ber
```

`python -m solong.game path/to/level.ber` does the same.

The command takes exactly one argument, the map file. With any other number
of arguments it prints `Usage: so_long <map_file>` and exits with status 1.
It prints an `Error: ...` line and exits with status 1 when:

- the map file cannot be opened or is empty;
- the map does not have exactly one `P`, at least one `E` and at least one
  `C`;
- the window cannot be created or the sprites cannot be loaded.

Otherwise it opens a window titled `so_long`, sized to the map (32 pixels
per tile), draws the map and keeps it on screen until the window is closed,
then exits with status 0.

Sprites are loaded from a `sprites/` directory under the current working
directory: `wall.xpm`, `floor.xpm`, `player.xpm`, `collectible.xpm` and
`exit.xpm`.

## Map format

A map is a plain text file, one row per line:

| Character | Meaning     |
|-----------|-------------|
| `1`       | wall        |
| `0`       | floor       |
| `P`       | player      |
| `C`       | collectible |
| `E`       | exit        |

For example:

```
1111111
1P0C0E1
1111111
```

Any other character is left undrawn.

## Using it as a library

```python
from solong.gamemap import read_map, validate_map, count_elements, MapError

game_map = read_map("level.ber")
print(game_map.width, game_map.height)
print(count_elements(game_map))   # ElementCounts(player=1, exit=1, collectible=1)
try:
    validate_map(game_map)
except MapError as err:
    print(err)
```

### `solong.gamemap`

- `GameMap(rows)` holds the rows top to bottom; `width` is the length of the
  first row, `height` the number of rows.
- `read_map(path)` reads a file into a `GameMap`, dropping newlines; it
  raises `MapError` if the file cannot be opened or is empty.
- `count_elements(game_map)` returns the numbers of players, exits and
  collectibles.
- `validate_elements(game_map)` raises `MapError` unless there is exactly one
  player, at least one exit and at least one collectible.
- `validate_map(game_map)` also requires the map to be at least 3 by 3,
  rectangular and surrounded by walls, then checks the elements.

### `solong.game`

- `load_textures(sprite_dir="sprites")` loads the five sprites into a
  `Textures`; `Textures.for_tile(tile)` gives the image for a map character.
- `init_window(game_map)` opens a pygame window sized to the map.
- `draw_map(surface, game_map, textures)` blits each known tile.
- `main(argv=None)` is the `solong` command.

### Helpers

- `solong.linereader.LineReader(stream, buffer_size=42)` reads a text or
  binary stream line by line through a fixed-size buffer; `next_line()`
  returns a line with its newline, or `None` at the end, and the reader is
  iterable.
- `solong.text`: `strchr`, `strrchr`, `strnstr` (indices or `None`),
  `strncmp`, `strlcpy`, `strlcat` (text plus the length they tried to
  create), `strjoin`, `substr`, `strtrim`, `split` (empty pieces dropped),
  `strmapi`, `striteri`.
- `solong.chars`: ASCII-only `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`, taking a code or a one-character string.
- `solong.convert`: `atoi` (leading whitespace, optional sign, digits) and
  `itoa`.
- `solong.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset` over `bytearray` buffers, raising `ValueError` rather
  than reading past a buffer's end.
- `solong.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to a
  given stream or standard output.
- `solong.linked`: `LinkedList` of `Node`s with `push_front`, `push_back`,
  `last`, `clear`, `for_each`, `map`, `len()` and iteration.

## What it does not do

The `solong` command only displays a map. There is no player movement, no
collecting, no move counter and no winning by reaching the exit; keys do
nothing, and closing the window is the only way out. The command checks the
map's elements only: it does not require the map to be rectangular or walled
in. Call `validate_map` for the full check.