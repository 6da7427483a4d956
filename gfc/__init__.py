"""Games fundamental classes: canvas drawing, text output, sound and collisions on pygame."""

__version__ = "2.70.0"

__all__ = ["canvas", "collide", "font", "graphics", "sound", "text"]