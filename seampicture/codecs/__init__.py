"""Image format dispatch and OpenCV-backed decoding/encoding."""
from .formats import ImageFormat
from .io import decode_file, encode_file

__all__ = ["ImageFormat", "decode_file", "encode_file"]
