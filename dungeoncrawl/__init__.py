"""A text-mode dungeon crawler: explore rooms, collect keys and escape."""

__version__ = "0.1.0"
__all__ = ["__version__"]