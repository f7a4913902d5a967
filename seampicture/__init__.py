"""Top-level package for the seam-carving picture abstraction.

Expose the `core` subpackage for convenience.
"""
from .core import *

__version__ = "0.1.0"

__all__ = [
	"Picture",
	"PixelGrid",
	"TransposedView",
	"PictureConfig",
	"PictureError",
	"InvalidArgumentError",
	"DecodeError",
	"EncodeError",
	"UnsupportedFormatError",
	"PixelOutOfRangeError",
]
