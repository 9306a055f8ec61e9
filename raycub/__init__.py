"""Building blocks for a small textured grid raycaster: colours, images, XPM textures, scene files, movement and drawing."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "pixelformat",
    "wordtab",
    "image",
    "xpm",
    "scene",
    "player",
    "raycast",
    "overlay",
]