"""A small side-scrolling castle game on pygame: sprites, tile maps, object grids, camera and scenes."""

__version__ = "0.1.0"