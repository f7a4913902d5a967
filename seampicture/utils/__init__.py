"""Utility helpers."""
from .color import pack_rgb, unpack_rgb, bgr_pixel_to_rgb, rgb_to_bgr_pixel
from .logger import get_logger

__all__ = ["pack_rgb", "unpack_rgb", "bgr_pixel_to_rgb", "rgb_to_bgr_pixel", "get_logger"]
