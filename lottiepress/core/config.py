from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from lottiepress.utils.data_uri import SUPPORTED_FORMATS


# ============================================================================
# Configuration Classes
# ============================================================================


@dataclass
class OptimizerConfig:
    """Configuration for Lottie document optimization."""

    input_dir: Path = Path("inputs")
    output_dir: Path = Path("outputs")
    max_workers: int = 4
    precision: int = 3
    sequence_quality: int = 80
    large_payload_threshold: int = 1000000
    large_payload_quality: int = 75
    medium_payload_threshold: int = 500000
    medium_payload_quality: int = 80
    default_quality: int = 85
    webp_method: int = 6
    png_compress_level: int = 9
    recode_formats: Tuple[str, ...] = ("png", "jpeg", "gif", "tiff")

    def select_quality(self, payload_length: int) -> int:
        """
        Pick the WebP quality for an embedded image.

        Args:
            payload_length: Length of the image's base64 text

        Returns:
            Lower quality for larger payloads
        """
        if payload_length > self.large_payload_threshold:
            return self.large_payload_quality
        if payload_length > self.medium_payload_threshold:
            return self.medium_payload_quality
        return self.default_quality


# ============================================================================
# Parameter Validator
# ============================================================================


class ParameterValidator:
    """Validates optimizer parameters."""

    @staticmethod
    def validate(config: OptimizerConfig) -> None:
        """Validate all parameters in the configuration."""
        for name in (
            "sequence_quality",
            "large_payload_quality",
            "medium_payload_quality",
            "default_quality",
        ):
            ParameterValidator.validate_quality(name, getattr(config, name))
        ParameterValidator.validate_thresholds(config.medium_payload_threshold, config.large_payload_threshold)
        ParameterValidator.validate_max_workers(config.max_workers)
        ParameterValidator.validate_precision(config.precision)
        ParameterValidator.validate_webp_method(config.webp_method)
        ParameterValidator.validate_png_compress_level(config.png_compress_level)
        ParameterValidator.validate_recode_formats(config.recode_formats)
        ParameterValidator.validate_directories(config.input_dir, config.output_dir)

    @staticmethod
    def validate_quality(name: str, quality: int) -> None:
        """Validate an encoder quality value."""
        if not (1 <= quality <= 100):
            raise ValueError(f"{name} must be between 1 and 100, got {quality}")

    @staticmethod
    def validate_thresholds(medium_threshold: int, large_threshold: int) -> None:
        """Validate the payload size thresholds used for quality selection."""
        if medium_threshold < 0:
            raise ValueError(f"medium_payload_threshold must be non-negative, got {medium_threshold}")
        if large_threshold < 0:
            raise ValueError(f"large_payload_threshold must be non-negative, got {large_threshold}")
        if medium_threshold > large_threshold:
            raise ValueError(
                f"medium_payload_threshold ({medium_threshold}) cannot be greater than "
                f"large_payload_threshold ({large_threshold})"
            )

    @staticmethod
    def validate_max_workers(max_workers: int) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    @staticmethod
    def validate_precision(precision: int) -> None:
        if not (0 <= precision <= 10):
            raise ValueError(f"precision must be between 0 and 10, got {precision}")

    @staticmethod
    def validate_webp_method(webp_method: int) -> None:
        if not (0 <= webp_method <= 6):
            raise ValueError(f"webp_method must be between 0 and 6, got {webp_method}")

    @staticmethod
    def validate_png_compress_level(png_compress_level: int) -> None:
        if not (0 <= png_compress_level <= 9):
            raise ValueError(f"png_compress_level must be between 0 and 9, got {png_compress_level}")

    @staticmethod
    def validate_recode_formats(recode_formats: Tuple[str, ...]) -> None:
        """Validate that every recode format is a recognized data URI format."""
        unknown = [fmt for fmt in recode_formats if fmt not in SUPPORTED_FORMATS]
        if unknown:
            raise ValueError(f"recode_formats must be a subset of {list(SUPPORTED_FORMATS)}, got {unknown}")

    @staticmethod
    def validate_directories(input_dir: Path, output_dir: Path) -> None:
        """Validate that input and output directories differ."""
        if input_dir.resolve() == output_dir.resolve():
            raise ValueError("output_dir cannot be the same as input_dir")
