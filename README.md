# spritesteps

Six small pygame demos that put sprites on screen one step at a time, plus
the two pieces they share: a `Texture` class (`spritesteps.texture`) and a
`Display` window helper (`spritesteps.display`).

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The demos

Each demo opens a 640x480 window and runs until the window is closed. All of
them accept `--frames N` to stop after N frames.

| Command                | What it shows | Options |
|------------------------|---------------|---------|
| `spritesteps-basics`   | A bitmap scaled to fill a white window. | `--image` (default `../assets/01hello-world.bmp`) |
| `spritesteps-textures` | An image drawn in the middle of a white window. | `--image` (default `../assets/02img.png`) |
| `spritesteps-events`   | Starts with `03img.png`; the arrow keys switch to `03up.png`, `03down.png`, `03left.png` or `03right.png`. Other keys change nothing. | `--asset-dir` (default `../assets`) |
| `spritesteps-colorkey` | A background (`04background0.png`) with a sprite (`04sprite.png`) centred on it. Once a key has been pressed, the background becomes `04background1.png` and the sprite's cyan pixels turn transparent. The images are loaded when the first event arrives. | `--asset-dir` (default `../assets`) |
| `spritesteps-clipping` | Four 100x100 pieces cut from a sheet, with white made transparent. Each is drawn in a screen corner at full size and again stretched to 50x100. | `--image` (default `../assets/05dots.png`), `--error-delay` |
| `spritesteps-rotation` | An arrow, with white made transparent. Left/Right turn it by 30 degrees, Up flips it vertically, Down flips it horizontally, and any other key resets it. | `--image` (default `../assets/06arrow.png`), `--error-delay` |

Exit status:

- `0` when everything worked.
- `1` when the window could not be opened.
- `2` when an image could not be loaded.

`spritesteps-basics`, `spritesteps-textures`, `spritesteps-events` and
`spritesteps-colorkey` keep the window open after a load failure.
`spritesteps-events` does not count a missing start image as a failure.
`spritesteps-clipping` and `spritesteps-rotation` stop as soon as their image
fails to load, after waiting `--error-delay` seconds (3 by default).

Messages go through the standard `logging` module. The demos configure no
handler, so set one up yourself if you want to see them.

## Using the pieces

```python
import pygame
from spritesteps.display import Display, centered_position
from spritesteps.texture import FlipMode, Texture

with Display("Demo", 640, 480) as display:
    arrow = Texture()
    arrow.load("assets/06arrow.png", color_key=(255, 255, 255))
    x, y = centered_position(display.size, (arrow.width, arrow.height))
    running = True
    while running:
        for event in display.events():
            if event.type == pygame.QUIT:
                running = False
        display.fill((255, 255, 255))
        arrow.render_rotated(display.surface, x, y, 30.0, FlipMode.HORIZONTAL)
        display.present()
```

`Texture`:

- `load(path, color_key=None)` reads an image and replaces any image loaded
  before. It raises `TextureError` if the image cannot be read. With
  `color_key`, pixels of that RGB colour become transparent.
- `width`, `height` and `is_loaded` describe the current image. The sizes are
  0 when nothing is loaded.
- `render(target, x, y, clip=None)` draws the image, or the `clip` rectangle
  of it, at its own size.
- `render_stretched(target, x, y, width, height, clip=None)` scales the image,
  or the clipped part of it, to the given size.
- `render_rotated(target, x, y, degrees=0.0, flip=FlipMode.NONE, clip=None)`
  mirrors the image first and then turns it clockwise about the centre of the
  texture placed at `(x, y)`.
- `clear()` drops the image.

All three render methods raise `TextureError` when nothing is loaded.

`Display(title, width, height)`:

- `open()` creates the window. It raises `DisplayError` on failure.
- `close()` shuts pygame down.
- `surface`, `size`, `is_open`, `fill(color)`, `present()` and `events()` are
  used while the window is open. Using the window after it is closed raises
  `DisplayError`.

`centered_position(screen_size, texture_size)` returns the top-left corner
that centres an item on the screen.

The demo modules also expose their drawing steps for reuse:

- `basics.load_image` and `basics.draw_frame`
- `textures.draw_frame`
- `events.texture_for_key` and `events.handle_key`
- `colorkey.media_paths`, `colorkey.load_media` and `colorkey.draw_frame`
- `clipping.sprite_layout`, `clipping.draw_layout` and `clipping.SpriteDraw`
- `rotation.RotationState` and `rotation.draw_frame`

## What is not included

The package ships no image files. Point the demos at a directory holding
images with the names listed above, using `--image` or `--asset-dir`.