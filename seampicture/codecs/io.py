"""
OpenCV-backed image decoding and encoding.
Buffers are `uint8` arrays of shape (H, W, 3) in BGR order, which is what
`cv2.imread` produces and `cv2.imencode` expects.
"""

from pathlib import Path
from typing import List, Optional, Union
import logging

import cv2
import numpy as np

from ..core.config import PictureConfig, get_default_config
from ..core.exceptions import DecodeError, EncodeError
from .formats import ImageFormat


logger = logging.getLogger(__name__)


def decode_file(path: Union[str, Path]) -> np.ndarray:
	"""
	Decode an image file into a BGR buffer, ignoring any EXIF orientation tag.
	Args:
		path: Path to any image OpenCV can read
	Returns:
		uint8 array of shape (H, W, 3)
	Raises:
		DecodeError: If the file is missing, unreadable or not an image
	"""
	path = Path(path)
	if not path.is_file():
		raise DecodeError(f"Image file not found: {path}")

	try:
		pixels = cv2.imread(str(path), cv2.IMREAD_COLOR | cv2.IMREAD_IGNORE_ORIENTATION)
	except cv2.error as e:
		raise DecodeError(f"Failed to decode image {path}: {e}") from e

	if pixels is None:
		raise DecodeError(f"Image unreadable or unsupported format: {path}")

	logger.debug(f"Decoded {path} with shape {pixels.shape}")
	return pixels


def _encode_params(image_format: ImageFormat, config: PictureConfig) -> List[int]:
	if image_format is ImageFormat.JPEG:
		return [cv2.IMWRITE_JPEG_QUALITY, config.jpeg_quality]
	return [cv2.IMWRITE_PNG_COMPRESSION, config.png_compression]


def encode_file(
	pixels: np.ndarray,
	path: Union[str, Path],
	config: Optional[PictureConfig] = None
) -> ImageFormat:
	"""
	Encode a BGR buffer and write it to `path`, overwriting any existing file.
	The format is resolved from the extension before anything is written.
	Args:
		pixels: uint8 array of shape (H, W, 3)
		path: Target file path ending in .jpg or .png
		config: Encoder settings (defaults if omitted)
	Returns:
		The format written
	Raises:
		UnsupportedFormatError: If the extension is not jpg or png
		EncodeError: If encoding or writing fails
	"""
	path = Path(path)
	image_format = ImageFormat.from_path(path)
	config = config or get_default_config()

	try:
		ok, buffer = cv2.imencode(
			image_format.extension,
			np.ascontiguousarray(pixels),
			_encode_params(image_format, config)
		)
	except cv2.error as e:
		raise EncodeError(f"Failed to encode {path}: {e}") from e

	if not ok:
		raise EncodeError(f"Encoder rejected image for {path}")

	try:
		path.write_bytes(buffer.tobytes())
	except OSError as e:
		raise EncodeError(f"Failed to write {path}: {e}") from e

	logger.info(f"Saved {pixels.shape[1]}x{pixels.shape[0]} {image_format.name} image to {path}")
	return image_format
