"""
Unit tests for PixelGrid construction and pixel access.
"""

import pytest
import numpy as np

from seampicture.core.grid import PixelGrid
from seampicture.core.config import PictureConfig
from seampicture.core.exceptions import (
	InvalidArgumentError,
	DecodeError,
	PixelOutOfRangeError,
)


class TestConstruction:
	"""Test suite for building grids."""

	@pytest.mark.parametrize("width,height", [(1, 1), (3, 2), (2, 7), (64, 48)])
	def test_dimensions(self, width, height):
		"""Test reported dimensions match the requested ones."""
		grid = PixelGrid(width, height)
		assert grid.width() == width
		assert grid.height() == height
		assert grid.size == (width, height)

	@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-1, 5), (5, -3), (0, 0)])
	def test_non_positive_dimensions(self, width, height):
		"""Test non-positive dimensions are rejected."""
		with pytest.raises(InvalidArgumentError):
			PixelGrid(width, height)

	def test_invalid_argument_is_value_error(self):
		"""Test callers can catch the builtin ValueError."""
		with pytest.raises(ValueError, match="positive"):
			PixelGrid(0, 3)

	def test_non_integer_dimensions(self):
		"""Test float and bool dimensions are rejected."""
		with pytest.raises(InvalidArgumentError):
			PixelGrid(2.5, 3)
		with pytest.raises(InvalidArgumentError):
			PixelGrid(True, 3)

	def test_from_dimensions(self):
		"""Test the named constructor."""
		grid = PixelGrid.from_dimensions(4, 6)
		assert grid.size == (4, 6)

	def test_default_black(self, small_grid):
		"""Test new grids are black."""
		for x in range(3):
			for y in range(2):
				assert small_grid.get(x, y) == 0x000000

	def test_configured_fill(self):
		"""Test the default color comes from config."""
		grid = PixelGrid(2, 2, PictureConfig(default_color=0x123456))
		assert grid.get(1, 1) == 0x123456


class TestFromArray:
	"""Test suite for wrapping decoded images."""

	def test_wraps_without_copy(self, gradient_array):
		"""Test the grid aliases the given array."""
		grid = PixelGrid.from_array(gradient_array)
		assert grid.to_array() is gradient_array

		grid.set(0, 0, 0xFFFFFF)
		assert list(gradient_array[0, 0]) == [255, 255, 255]

		gradient_array[1, 2] = [3, 2, 1]
		assert grid.get(2, 1) == 0x010203

	def test_shape(self, gradient_array):
		"""Test width is the column count and height the row count."""
		grid = PixelGrid.from_array(gradient_array)
		assert grid.width() == 5
		assert grid.height() == 4

	def test_grayscale(self):
		"""Test grayscale arrays become gray BGR pixels."""
		gray = np.full((2, 3), 128, dtype=np.uint8)
		grid = PixelGrid.from_array(gray)
		assert grid.size == (3, 2)
		assert grid.get(2, 1) == 0x808080

	def test_bgra(self):
		"""Test alpha is dropped."""
		bgra = np.zeros((2, 2, 4), dtype=np.uint8)
		bgra[..., 0] = 10
		bgra[..., 3] = 7
		grid = PixelGrid.from_array(bgra)
		assert grid.get(0, 0) == 0x00000A

	@pytest.mark.parametrize("pixels", [
		np.zeros((2, 2, 3), dtype=np.float32),
		np.zeros((0, 2, 3), dtype=np.uint8),
		np.zeros((2, 2, 2), dtype=np.uint8),
		np.zeros((2,), dtype=np.uint8),
	])
	def test_rejects_bad_arrays(self, pixels):
		"""Test unusable arrays raise InvalidArgumentError."""
		with pytest.raises(InvalidArgumentError):
			PixelGrid.from_array(pixels)

	def test_rejects_non_array(self):
		"""Test plain lists are rejected."""
		with pytest.raises(InvalidArgumentError):
			PixelGrid.from_array([[0, 0, 0]])


class TestFromFile:
	"""Test suite for decoding files."""

	def test_load_png(self, png_file, gradient_array):
		"""Test a PNG decodes to the written pixels."""
		grid = PixelGrid.from_file(png_file)
		assert grid.size == (5, 4)
		np.testing.assert_array_equal(grid.to_array(), gradient_array)

	def test_accepts_string_path(self, png_file):
		"""Test str paths work as well as Path."""
		assert PixelGrid.from_file(str(png_file)).width() == 5

	def test_missing_file(self, tmp_path):
		"""Test a missing file raises DecodeError."""
		with pytest.raises(DecodeError, match="not found"):
			PixelGrid.from_file(tmp_path / "nope.png")

	def test_not_an_image(self, tmp_path):
		"""Test garbage content raises DecodeError."""
		path = tmp_path / "fake.png"
		path.write_text("definitely not a png")
		with pytest.raises(DecodeError):
			PixelGrid.from_file(path)

	def test_decode_error_is_os_error(self, tmp_path):
		"""Test callers can catch the builtin OSError."""
		with pytest.raises(OSError):
			PixelGrid.from_file(tmp_path / "missing.jpg")


class TestPixelAccess:
	"""Test suite for get/set."""

	@pytest.mark.parametrize("rgb", [0x000000, 0xFFFFFF, 0xFF0000, 0x00FF00, 0x0000FF, 0x123456])
	def test_set_get(self, small_grid, rgb):
		"""Test a stored value reads back exactly."""
		small_grid.set(2, 1, rgb)
		assert small_grid.get(2, 1) == rgb

	def test_set_only_touches_target(self, small_grid):
		"""Test set mutates a single pixel."""
		small_grid.set(1, 0, 0xABCDEF)
		values = {(x, y): small_grid.get(x, y) for x in range(3) for y in range(2)}
		assert values.pop((1, 0)) == 0xABCDEF
		assert set(values.values()) == {0}

	def test_high_bits_ignored(self, small_grid):
		"""Test alpha bits in the input are dropped."""
		small_grid.set(0, 0, 0xFF336699)
		assert small_grid.get(0, 0) == 0x336699

	def test_channels(self, small_grid):
		"""Test channel-level helpers."""
		small_grid.set_rgb(1, 1, 1, 2, 3)
		assert small_grid.get(1, 1) == 0x010203
		assert small_grid.get_rgb(1, 1) == (1, 2, 3)

	def test_storage_is_bgr(self, small_grid):
		"""Test the buffer keeps OpenCV channel order."""
		small_grid.set(0, 0, 0xFF0000)
		assert list(small_grid.to_array()[0, 0]) == [0, 0, 255]

	@pytest.mark.parametrize("x,y", [(3, 0), (0, 2), (-1, 0), (0, -1), (100, 100)])
	def test_out_of_range(self, small_grid, x, y):
		"""Test out-of-range coordinates raise instead of wrapping."""
		with pytest.raises(PixelOutOfRangeError):
			small_grid.get(x, y)
		with pytest.raises(PixelOutOfRangeError):
			small_grid.set(x, y, 0xFFFFFF)

	def test_out_of_range_is_index_error(self, small_grid):
		"""Test the error carries the coordinates and is an IndexError."""
		with pytest.raises(IndexError) as exc_info:
			small_grid.get(5, 1)
		assert exc_info.value.x == 5
		assert exc_info.value.width == 3


class TestCopy:
	"""Test suite for copy."""

	def test_copy_is_independent(self, small_grid):
		"""Test copies do not share storage."""
		small_grid.set(0, 0, 0x111111)
		clone = small_grid.copy()
		clone.set(0, 0, 0x222222)

		assert isinstance(clone, PixelGrid)
		assert small_grid.get(0, 0) == 0x111111
		assert clone.get(0, 0) == 0x222222

	def test_repr(self, small_grid):
		"""Test repr shows dimensions."""
		assert repr(small_grid) == "PixelGrid(width=3, height=2)"
