"""Thumbnail generation settings.

Use `ThumbnailConfig` to load, validate and pass runtime settings to
`generate_thumbnail`.
"""
import dataclasses
import logging
import os
from dataclasses import dataclass

import yaml

from .enums import ResampleKernel

logger = logging.getLogger(__name__)

_VALID_KERNELS = {k.value for k in ResampleKernel}


@dataclass
class ThumbnailConfig:
    """Store settings for thumbnail scaling, badge placement and input limits."""

    # Badge edge as a fraction of the larger canvas edge
    badge_fraction: float = 0.25
    # Gap between the badge and the canvas edge, in pixels
    badge_margin: int = 1
    upscale_kernel: str = "nearest"
    # Off by default: textures larger than the request are passed through
    downscale: bool = False
    downscale_kernel: str = "bilinear"
    max_payload_bytes: int = 256 * 1024 * 1024
    max_texture_pixels: int = 8192 * 8192
    max_edge: int = 4096

    @classmethod
    def from_dict(cls, data: dict) -> "ThumbnailConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        config = cls()
        _merge_dict_to_dataclass(config, data)
        config.validate()
        return config

    @classmethod
    def from_yaml(cls, path: str) -> "ThumbnailConfig":
        """Load thumbnail configuration from YAML or return defaults."""
        if not os.path.exists(path):
            logger.info("Config file '%s' not found. Using defaults.", path)
            config = cls()
            config.validate()
            return config
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(
                f"Failed to parse YAML config '{path}': {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise ValueError(
                f"Config file '{path}' must contain a YAML mapping, "
                f"got {type(data).__name__}"
            )
        try:
            return cls.from_dict(data)
        except ValueError as exc:
            raise ValueError(f"{path}: {exc}") from exc

    def to_yaml(self, path: str):
        """Write thumbnail configuration to a YAML file."""
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(dataclasses.asdict(self), f, default_flow_style=False, sort_keys=False)

    def validate(self):
        """Validate configuration values. Raises ValueError on invalid config."""
        errors = []

        if not 0.0 < self.badge_fraction <= 1.0:
            errors.append(f"badge_fraction must be in (0, 1], got {self.badge_fraction}")
        if self.badge_margin < 0:
            errors.append("badge_margin must be >= 0")
        for name in ("upscale_kernel", "downscale_kernel"):
            value = getattr(self, name)
            if value not in _VALID_KERNELS:
                errors.append(
                    f"{name} must be one of {sorted(_VALID_KERNELS)}, got '{value}'"
                )
        if self.max_payload_bytes < 1:
            errors.append("max_payload_bytes must be >= 1")
        if self.max_texture_pixels < 1:
            errors.append("max_texture_pixels must be >= 1")
        if self.max_edge < 1:
            errors.append("max_edge must be >= 1")

        if errors:
            raise ValueError("Invalid thumbnail config: " + "; ".join(errors))


def _merge_dict_to_dataclass(obj, data: dict):
    for key, value in data.items():
        if not hasattr(obj, key):
            logger.warning("Unknown config key ignored: '%s'", key)
            continue
        field_val = getattr(obj, key)
        if value is None:
            logger.warning(
                "Config key '%s' is null. Using default value %r.", key, field_val
            )
            continue
        expected_type = type(field_val)
        if (not isinstance(value, expected_type)
                and not (expected_type is float and isinstance(value, int))):
            logger.warning(
                "Config type mismatch for '%s': expected %s, got %s (%r). "
                "Using default value.",
                key, expected_type.__name__, type(value).__name__, value,
            )
            continue
        setattr(obj, key, value)
