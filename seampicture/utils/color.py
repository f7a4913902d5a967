"""
Packed 24-bit RGB helpers.
A packed color stores red in bits 16-23, green in bits 8-15 and blue in bits
0-7. Pixel buffers keep OpenCV's BGR channel order, so conversions to and
from buffer entries reverse the channels.
"""

from typing import Tuple, Sequence
import numpy as np


RGB_MASK = 0xFFFFFF


def pack_rgb(r: int, g: int, b: int) -> int:
	"""
	Pack three channel intensities into a 24-bit integer.
	Args:
		r: Red intensity (0-255)
		g: Green intensity (0-255)
		b: Blue intensity (0-255)
	Returns:
		Packed RGB value
	Raises:
		ValueError: If any channel is outside 0-255
	"""
	for name, value in (("r", r), ("g", g), ("b", b)):
		if not 0 <= value <= 255:
			raise ValueError(f"Channel {name} must be in [0, 255], got {value}")
	return (int(r) << 16) | (int(g) << 8) | int(b)


def unpack_rgb(rgb: int) -> Tuple[int, int, int]:
	"""
	Split a packed color into (r, g, b). Bits above 24 are ignored.
	"""
	rgb = int(rgb) & RGB_MASK
	return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF


def bgr_pixel_to_rgb(pixel: Sequence[int]) -> int:
	"""Pack one BGR buffer entry."""
	b, g, r = pixel
	return (int(r) << 16) | (int(g) << 8) | int(b)


def rgb_to_bgr_pixel(rgb: int) -> np.ndarray:
	"""Convert a packed color into a BGR buffer entry."""
	r, g, b = unpack_rgb(rgb)
	return np.array([b, g, r], dtype=np.uint8)
