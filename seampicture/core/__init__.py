"""Core package for pictures, views and configuration."""
from .base import Picture
from .grid import PixelGrid
from .transposed import TransposedView
from .config import PictureConfig
from .exceptions import (
	PictureError,
	InvalidArgumentError,
	DecodeError,
	EncodeError,
	UnsupportedFormatError,
	PixelOutOfRangeError,
)

__all__ = [
	"Picture",
	"PixelGrid",
	"TransposedView",
	"PictureConfig",
	"PictureError",
	"InvalidArgumentError",
	"DecodeError",
	"EncodeError",
	"UnsupportedFormatError",
	"PixelOutOfRangeError",
]
