"""
Configuration management for pictures.
Handles loading, validation, and overriding of configuration files.
"""

from dataclasses import dataclass, asdict, fields
from typing import Dict, Any, Optional
from pathlib import Path
import yaml
import json

from .exceptions import InvalidArgumentError


def _is_integer(value) -> bool:
	return isinstance(value, int) and not isinstance(value, bool)


_SUFFIXES = (".yaml", ".yml", ".json")

# field name -> inclusive (min, max)
_RANGES = {
	"default_color": (0x000000, 0xFFFFFF),
	"jpeg_quality": (0, 100),
	"png_compression": (0, 9),
}


@dataclass
class PictureConfig:
	"""
	Settings shared by a picture and its views.
	Attributes:
		default_color: Packed RGB fill for newly allocated grids
		jpeg_quality: JPEG encoder quality (0-100)
		png_compression: PNG compression level (0-9)
	"""
	default_color: int = 0x000000
	jpeg_quality: int = 95
	png_compression: int = 3

	def __post_init__(self):
		"""Validate value types and ranges."""
		for name, (low, high) in _RANGES.items():
			value = getattr(self, name)
			if not _is_integer(value):
				raise InvalidArgumentError(
					f"{name} must be an integer, got {type(value).__name__} {value!r}"
				)
			if not low <= value <= high:
				raise InvalidArgumentError(f"{name} must be in [{low}, {high}], got {value}")

	def to_dict(self) -> Dict[str, Any]:
		return asdict(self)

	@classmethod
	def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> 'PictureConfig':
		"""Create PictureConfig from dictionary."""
		config_dict = dict(config_dict or {})

		known = {f.name for f in fields(cls)}
		unknown = sorted(set(config_dict) - known)
		if unknown:
			raise InvalidArgumentError(f"Unknown configuration keys: {unknown}")

		return cls(**config_dict)


class ConfigLoader:
	"""Read and write PictureConfig files (YAML or JSON, chosen by suffix)."""

	@staticmethod
	def read(path: Path) -> Dict[str, Any]:
		"""
		Read a configuration file into a dictionary.
		Args:
			path: .yaml, .yml or .json file
		Returns:
			Raw settings; empty for an empty YAML file
		Raises:
			InvalidArgumentError: If the suffix is unknown or the file is not a mapping
		"""
		path = Path(path)
		if path.suffix not in _SUFFIXES:
			raise InvalidArgumentError(f"Unsupported config format: {path.suffix}")

		with open(path, 'r') as f:
			if path.suffix == '.json':
				data = json.load(f)
			else:
				data = yaml.safe_load(f)

		if data is None:
			return {}
		if not isinstance(data, dict):
			raise InvalidArgumentError(f"Config file must hold a mapping: {path}")
		return data

	@staticmethod
	def save_config(config: PictureConfig, path: Path) -> None:
		"""
		Write a PictureConfig, creating parent directories.
		Args:
			config: Settings to write
			path: .yaml, .yml or .json target
		"""
		path = Path(path)
		if path.suffix not in _SUFFIXES:
			raise InvalidArgumentError(f"Unsupported config format: {path.suffix}")

		path.parent.mkdir(parents=True, exist_ok=True)
		with open(path, 'w') as f:
			if path.suffix == '.json':
				json.dump(config.to_dict(), f, indent=2)
			else:
				yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

	@classmethod
	def load_config(cls, path: Path, base: Optional[PictureConfig] = None) -> PictureConfig:
		"""
		Load PictureConfig from file.
		Keys missing from the file keep their value from `base` (defaults if
		omitted).
		Args:
			path: Path to config file (YAML or JSON)
			base: Settings the file overrides
		Returns:
			Validated PictureConfig
		"""
		return cls.merge_configs(base or get_default_config(), cls.read(path))

	@staticmethod
	def merge_configs(base: PictureConfig, override: Dict[str, Any]) -> PictureConfig:
		"""
		Apply an override dictionary on top of a config.
		Args:
			base: Starting settings, left unchanged
			override: Field values to replace
		Returns:
			New validated PictureConfig
		"""
		return PictureConfig.from_dict({**base.to_dict(), **override})


def get_default_config() -> PictureConfig:
	"""
	Get default picture configuration.
	Returns:
		Default PictureConfig
	"""
	return PictureConfig()


# Example default configuration as YAML string
DEFAULT_CONFIG_YAML = """
# Default picture configuration

# Fill color for new grids (packed 0xRRGGBB)
default_color: 0

# Encoder settings
jpeg_quality: 95      # 0-100
png_compression: 3    # 0-9
"""
