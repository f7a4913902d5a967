"""Transposed view over a picture."""

import numpy as np

from .base import Picture


class TransposedView(Picture):
	"""
	A picture whose x and y accesses are reversed relative to its owner.
	The view owns no pixels: reads and writes go straight to the owner, so
	changes through either side are visible through the other. It is only
	valid while the owner is.
	"""

	def __init__(self, owner: Picture):
		super().__init__(owner.config)
		self._owner = owner

	def get(self, x: int, y: int) -> int:
		self._check_bounds(x, y)
		return self._owner.get(y, x)

	def set(self, x: int, y: int, rgb: int) -> None:
		self._check_bounds(x, y)
		self._owner.set(y, x, rgb)

	def width(self) -> int:
		return self._owner.height()

	def height(self) -> int:
		return self._owner.width()

	def transposed(self) -> Picture:
		"""Return the original picture for this transposed view."""
		return self._owner

	def to_array(self) -> np.ndarray:
		return np.transpose(self._owner.to_array(), (1, 0, 2))
