"""Leap Up: a vertical platform-jumping arcade game with its windowless game rules."""

__version__ = "0.1.0"
__all__ = ["__version__"]