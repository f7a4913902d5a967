"""
Core picture interface.
This module defines the abstract base class shared by pixel grids and their
transposed views, so consumers such as a seam finder can treat both alike.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Tuple, Union
import numpy as np

from .config import PictureConfig, get_default_config
from .exceptions import PixelOutOfRangeError
from ..codecs.formats import ImageFormat
from ..codecs.io import encode_file
from ..utils.color import pack_rgb, unpack_rgb


class Picture(ABC):
	"""
	A digital picture of packed 24-bit RGB pixels addressed by (x, y).
	x indexes columns in [0, width) and y indexes rows in [0, height).
	Every coordinate is bounds-checked; out-of-range access raises
	PixelOutOfRangeError.
	"""

	def __init__(self, config: Optional[PictureConfig] = None):
		self.config = config or get_default_config()

	@abstractmethod
	def get(self, x: int, y: int) -> int:
		"""
		Return the packed RGB color of pixel (x, y).
		Raises:
			PixelOutOfRangeError: If (x, y) lies outside the picture
		"""
		pass

	@abstractmethod
	def set(self, x: int, y: int, rgb: int) -> None:
		"""
		Reassign the color of pixel (x, y). Bits above 24 are ignored.
		Raises:
			PixelOutOfRangeError: If (x, y) lies outside the picture
		"""
		pass

	@abstractmethod
	def width(self) -> int:
		pass

	@abstractmethod
	def height(self) -> int:
		pass

	@abstractmethod
	def transposed(self) -> "Picture":
		"""Return a live view of this picture with x and y exchanged."""
		pass

	@abstractmethod
	def to_array(self) -> np.ndarray:
		"""
		Return the pixels as a (height, width, 3) BGR uint8 array in this
		picture's orientation. The array may alias the picture's storage.
		"""
		pass

	@property
	def size(self) -> Tuple[int, int]:
		"""(width, height) of the picture."""
		return self.width(), self.height()

	def get_rgb(self, x: int, y: int) -> Tuple[int, int, int]:
		"""Return pixel (x, y) as separate (r, g, b) channels."""
		return unpack_rgb(self.get(x, y))

	def set_rgb(self, x: int, y: int, r: int, g: int, b: int) -> None:
		"""Assign pixel (x, y) from separate channels."""
		self.set(x, y, pack_rgb(r, g, b))

	def copy(self) -> "Picture":
		"""Return an independent grid with the same pixels and orientation."""
		from .grid import PixelGrid

		return PixelGrid.from_array(self.to_array().copy(), self.config)

	def save(self, path: Union[str, Path]) -> ImageFormat:
		"""
		Write the picture to `path`, overwriting any existing file.
		Args:
			path: Target path; must end in .jpg or .png (any case)
		Returns:
			The format written
		Raises:
			UnsupportedFormatError: If the extension is not jpg or png
			EncodeError: If encoding or writing fails
		"""
		return encode_file(self.to_array(), path, self.config)

	def _check_bounds(self, x: int, y: int) -> None:
		width, height = self.width(), self.height()
		if not (0 <= x < width and 0 <= y < height):
			raise PixelOutOfRangeError(x, y, width, height)

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(width={self.width()}, height={self.height()})"
