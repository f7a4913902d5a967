"""
Exception hierarchy for picture construction, pixel access and file I/O.
Each error also derives from the builtin it specializes, so callers may catch
either the picture-specific type or the familiar builtin.
"""


class PictureError(Exception):
	"""Base class for all picture errors."""


class InvalidArgumentError(PictureError, ValueError):
	"""Raised for non-positive dimensions or an unusable pixel array."""


class DecodeError(PictureError, OSError):
	"""Raised when an image file cannot be read or decoded."""


class UnsupportedFormatError(PictureError, ValueError):
	"""Raised when a save target's extension is not a writable format."""


class EncodeError(PictureError, OSError):
	"""Raised when encoding or writing an image file fails."""


class PixelOutOfRangeError(PictureError, IndexError):
	"""Raised when a pixel coordinate lies outside the picture."""

	def __init__(self, x: int, y: int, width: int, height: int):
		self.x = x
		self.y = y
		self.width = width
		self.height = height
		super().__init__(
			f"Pixel ({x}, {y}) out of range for {width}x{height} picture"
		)
