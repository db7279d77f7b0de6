"""
Lottiepress - size optimizer for Lottie JSON animations.
"""

__version__ = "0.1.0"

# Package-level exports for convenience
from lottiepress.cli import main
from lottiepress.core.batch_optimizer import BatchOptimizer
from lottiepress.core.config import OptimizerConfig, ParameterValidator
from lottiepress.core.file_pipeline import AssetOutcome, FilePipeline
from lottiepress.core.image_recoder import ImageRecoder
from lottiepress.core.numeric_normalizer import normalize
from lottiepress.core.sequence_optimizer import SequenceOptimizer
from lottiepress.core.tree_sanitizer import DEFAULT_FIELD_RULES, sanitize
from lottiepress.services.statistics import StatisticsTracker
from lottiepress.utils.file_processor import FileProcessor
from lottiepress.utils.format import format_size


__all__ = [
    "OptimizerConfig",
    "ParameterValidator",
    "BatchOptimizer",
    "FilePipeline",
    "AssetOutcome",
    "ImageRecoder",
    "SequenceOptimizer",
    "sanitize",
    "normalize",
    "DEFAULT_FIELD_RULES",
    "StatisticsTracker",
    "FileProcessor",
    "format_size",
    "main",
]
