from scass.version import __version__

__all__ = ["__version__"]
