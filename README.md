# raycub

Pure-Python pieces for a small first-person raycaster that uses a grid map.
There are no runtime dependencies.

## Modules

- `raycub.colors`: `lookup_color(name)` turns an X11 colour name such as
  `"dark green"` or `"grey50"` into a `0xRRGGBB` integer. Case does not
  matter. `"none"` gives -1, and an unknown name raises `KeyError`.
- `raycub.pixelformat`: `channel_shifts(red_mask, green_mask, blue_mask)`
  finds where each channel sits in a pixel and how wide it is.
  `good_color(color, depth, shifts)` packs an RGB colour for a visual with
  fewer than 24 bits. At 24 bits or more it returns the colour unchanged.
- `raycub.wordtab`: `find`, `find_unquoted` and `split_words`, the small
  text helpers that the XPM reader uses.
- `raycub.image`: `Image(width, height, bpp=32, endian=0)`, an in-memory
  pixel buffer with `put_pixel`, `get_pixel` and `fill`. Four-byte pixels
  read back as signed values, so transparent pixels come back negative.
- `raycub.xpm`: `xpm_file_to_image(path)` and `xpm_to_image(lines)` read XPM
  pixmaps into `Image` objects. The lower-level helpers are `strip_comments`,
  `quoted_lines`, `text_rgb` and `parse_xpm`. Transparent (`None`) pixels
  are stored as `0xFF000000`. Bad input raises `XpmError`.
- `raycub.scene`: `read_scene(path)` and `parse_scene(lines)` build a
  `Scene` from a scene file:
  - `NO`/`SO`/`WE`/`EA`/`DO` lines give texture paths, which end up in
    `north`, `south`, `west`, `east` and `door`.
  - `F r,g,b` and `C r,g,b` lines give the `floor` and `ceiling` colours.
  - Every other non-blank line is a map row, kept in `map_lines`.

  A texture path must name a file that can be opened. A missing or
  repeated entry raises `SceneError`. Also available: `parse_texture_path`,
  `parse_rgb` and `count_map_lines`.
- `raycub.player`: `Player`, `Controls` and `Key`.
  - `Controls.key_on` and `Controls.key_off` record held keys. They also
    set `quit_requested` for Escape and `door_requested` for the space bar.
  - `move(player, grid, angle, speed)` moves along one axis at a time and
    stops at walls (`1`), doors (`D`) and the edge of the grid.
  - `step(...)` applies one frame of keys and mouse position.
- `raycub.raycast`:
  - `Orientation` lists the faces a ray can hit.
  - `texture_column` picks the texture column for a hit.
  - `wall_height` scales a wall by its distance.
  - `render_column` draws one column of the view: ceiling, textured wall,
    then floor.
- `raycub.overlay`:
  - `spiral_points` and `draw_spiral` draw a spinning spiral.
    `draw_spiral` returns the next frame's angle.
  - `draw_hand_row` copies one row of a sprite and skips transparent
    pixels.

## Example

```python
from raycub.scene import read_scene
from raycub.xpm import xpm_file_to_image
from raycub.image import Image
from raycub.raycast import Orientation, texture_column, render_column

scene = read_scene("maps/level.cub")
north = xpm_file_to_image(scene.north)

frame = Image(640, 480)
column = texture_column(Orientation.NORTH, 3.25, 7.0, north.width)
render_column(frame, 0, 2.5, north, column,
              scene.ceiling, scene.floor, 240, 160, 120)
```

## What it does not do

The package only draws into `Image` buffers in memory. It does not:

- open a window or run a game loop;
- read the keyboard or mouse itself;
- check that a map is closed or that it has a starting position;
- trace rays through the grid to find wall distances.

The caller supplies distances, hit points and key events, and puts the
finished image on screen.

## Running the tests

```
pip install -e ".[test]"
pytest
```