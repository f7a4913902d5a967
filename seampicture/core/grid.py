"""
Pixel grid backed by an OpenCV-compatible buffer.
The buffer is a uint8 array of shape (height, width, 3) in BGR order, so
files decode straight into it and encode straight out of it.
"""

from pathlib import Path
from typing import Optional, Union
import logging

import cv2
import numpy as np

from .base import Picture
from .config import PictureConfig
from .exceptions import InvalidArgumentError
from .transposed import TransposedView
from ..codecs.io import decode_file
from ..utils.color import bgr_pixel_to_rgb, rgb_to_bgr_pixel


logger = logging.getLogger(__name__)


def _is_integer(value) -> bool:
	return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class PixelGrid(Picture):
	"""
	A picture that owns its pixel storage.
	Example:
		>>> grid = PixelGrid(3, 2)
		>>> grid.set(2, 0, 0xFF0000)
		>>> grid.transposed().get(0, 2) == 0xFF0000
		True
	"""

	def __init__(self, width: int, height: int, config: Optional[PictureConfig] = None):
		"""
		Allocate a grid filled with the configured default color (black).
		Args:
			width: Horizontal dimension, must be positive
			height: Vertical dimension, must be positive
			config: Picture configuration
		Raises:
			InvalidArgumentError: If either dimension is not a positive integer
		"""
		if not (_is_integer(width) and _is_integer(height)) or width <= 0 or height <= 0:
			raise InvalidArgumentError(
				f"Dimensions must be positive integers, got {width}x{height}"
			)

		super().__init__(config)
		self._pixels = np.empty((int(height), int(width), 3), dtype=np.uint8)
		self._pixels[:] = rgb_to_bgr_pixel(self.config.default_color)
		logger.debug(f"Allocated {width}x{height} grid")

	@classmethod
	def from_dimensions(
		cls,
		width: int,
		height: int,
		config: Optional[PictureConfig] = None
	) -> "PixelGrid":
		"""Alias of the constructor."""
		return cls(width, height, config)

	@classmethod
	def from_file(cls, path: Union[str, Path], config: Optional[PictureConfig] = None) -> "PixelGrid":
		"""
		Decode an image file into a new grid.
		Args:
			path: Any image format OpenCV can read
			config: Picture configuration
		Raises:
			DecodeError: If the file is missing, unreadable or not an image
		"""
		return cls._wrap(decode_file(path), config)

	@classmethod
	def from_array(cls, pixels: np.ndarray, config: Optional[PictureConfig] = None) -> "PixelGrid":
		"""
		Wrap an already decoded image.
		A (H, W, 3) uint8 array is used as-is, without copying, so changes
		through the grid show up in the array and vice versa. Grayscale
		(H, W) and BGRA (H, W, 4) arrays are converted to BGR, which copies.
		Args:
			pixels: uint8 image array in BGR order
			config: Picture configuration
		Raises:
			InvalidArgumentError: If the array cannot back a picture
		"""
		if not isinstance(pixels, np.ndarray):
			raise InvalidArgumentError(f"Expected numpy array, got {type(pixels).__name__}")
		if pixels.dtype != np.uint8:
			raise InvalidArgumentError(f"Pixel array must be uint8, got {pixels.dtype}")
		if pixels.size == 0:
			raise InvalidArgumentError("Pixel array is empty")

		if pixels.ndim == 2:
			pixels = cv2.cvtColor(pixels, cv2.COLOR_GRAY2BGR)
		elif pixels.ndim == 3 and pixels.shape[2] == 4:
			pixels = cv2.cvtColor(pixels, cv2.COLOR_BGRA2BGR)
		elif pixels.ndim != 3 or pixels.shape[2] != 3:
			raise InvalidArgumentError(
				f"Pixel array must have shape (H, W), (H, W, 3) or (H, W, 4), got {pixels.shape}"
			)

		return cls._wrap(pixels, config)

	@classmethod
	def _wrap(cls, pixels: np.ndarray, config: Optional[PictureConfig]) -> "PixelGrid":
		grid = cls.__new__(cls)
		Picture.__init__(grid, config)
		grid._pixels = pixels
		logger.debug(f"Wrapped {pixels.shape[1]}x{pixels.shape[0]} buffer")
		return grid

	def get(self, x: int, y: int) -> int:
		self._check_bounds(x, y)
		return bgr_pixel_to_rgb(self._pixels[y, x])

	def set(self, x: int, y: int, rgb: int) -> None:
		self._check_bounds(x, y)
		self._pixels[y, x] = rgb_to_bgr_pixel(rgb)

	def width(self) -> int:
		return self._pixels.shape[1]

	def height(self) -> int:
		return self._pixels.shape[0]

	def transposed(self) -> Picture:
		return TransposedView(self)

	def to_array(self) -> np.ndarray:
		"""Return the backing buffer itself."""
		return self._pixels
