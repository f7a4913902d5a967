import pytest
import numpy as np
import cv2

from seampicture.core.grid import PixelGrid


@pytest.fixture
def small_grid():
	"""A 3x2 black grid."""
	return PixelGrid(3, 2)


@pytest.fixture
def gradient_array():
	"""A 5x4 (W x H) BGR array where every pixel is distinct."""
	pixels = np.zeros((4, 5, 3), dtype=np.uint8)
	for y in range(4):
		for x in range(5):
			pixels[y, x] = [x * 50, y * 60, (x + y) * 20]
	return pixels


@pytest.fixture
def png_file(tmp_path, gradient_array):
	"""The gradient array written as a PNG."""
	path = tmp_path / "gradient.png"
	assert cv2.imwrite(str(path), gradient_array)
	return path
