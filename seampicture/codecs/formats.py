"""
Writable image formats.
Output format is chosen strictly from the target file's extension; reading is
not restricted to these formats.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Union

from ..core.exceptions import UnsupportedFormatError


class ImageFormat(Enum):
	"""Enumeration of formats a picture can be saved as."""
	JPEG = "jpeg"
	PNG = "png"

	@property
	def extension(self) -> str:
		"""Canonical extension handed to the encoder."""
		return _CANONICAL_EXTENSIONS[self]

	@classmethod
	def from_extension(cls, extension: str) -> "ImageFormat":
		"""
		Map a file extension to its format.
		Args:
			extension: Extension with or without the leading dot, any case
		Returns:
			Matching ImageFormat
		Raises:
			UnsupportedFormatError: If the extension is not jpg or png
		"""
		key = extension.lower().lstrip(".")
		if key not in _EXTENSION_MAP:
			raise UnsupportedFormatError(
				f"Unsupported output format '{extension}'. "
				f"Supported: {supported_extensions()}"
			)
		return _EXTENSION_MAP[key]

	@classmethod
	def from_path(cls, path: Union[str, Path]) -> "ImageFormat":
		"""
		Map a file path to its format using the text after the last dot of
		its name, so a file named `.png` is a PNG.
		"""
		_, dot, extension = Path(path).name.rpartition(".")
		if not dot:
			raise UnsupportedFormatError(
				f"File must end in .jpg or .png: {path}"
			)
		return cls.from_extension(extension)


_EXTENSION_MAP: Dict[str, ImageFormat] = {
	"jpg": ImageFormat.JPEG,
	"png": ImageFormat.PNG,
}

_CANONICAL_EXTENSIONS: Dict[ImageFormat, str] = {
	ImageFormat.JPEG: ".jpg",
	ImageFormat.PNG: ".png",
}


def supported_extensions() -> List[str]:
	"""List the extensions accepted for saving."""
	return sorted(_EXTENSION_MAP)
