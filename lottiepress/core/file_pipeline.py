import base64
import binascii
import json
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from lottiepress.core.config import OptimizerConfig
from lottiepress.core.image_recoder import ImageRecoder
from lottiepress.core.numeric_normalizer import normalize
from lottiepress.core.sequence_optimizer import SequenceOptimizer
from lottiepress.core.tree_sanitizer import sanitize
from lottiepress.utils.data_uri import build_data_uri, get_image_format, split_data_uri
from lottiepress.utils.file_processor import FileProcessor
from lottiepress.utils.format import format_kilobytes, format_size, reduction_percent
from lottiepress.utils.logger import get_logger


CONVERTED = "converted"
SEQUENCE_OPTIMIZED = "sequence_optimized"
SKIPPED = "skipped"


@dataclass
class AssetOutcome:
    """Result of optimizing the asset stored in one slot of the assets list."""

    index: int
    asset: Dict
    status: str
    image_format: str
    original_length: int
    new_length: int
    reason: Optional[str] = None


# ============================================================================
# File Pipeline
# ============================================================================


class FilePipeline:
    """Optimizes a single Lottie document: embedded images, then the JSON tree."""

    def __init__(self, config: OptimizerConfig):
        """
        Initialize file pipeline.

        Args:
            config: Optimizer configuration
        """
        self.config = config
        self.image_recoder = ImageRecoder(config)
        self.sequence_optimizer = SequenceOptimizer(config)
        self.file_processor = FileProcessor()
        self.logger = get_logger()

    def process(self, source_file: Path, output_file: Path) -> Dict:
        """
        Optimize one document and write the minified result.

        Errors never escape: a file that cannot be read, parsed or written is
        reported and produces no output file.

        Args:
            source_file: Path to the source JSON document
            output_file: Path to write the optimized document to

        Returns:
            File outcome dictionary
        """
        start_time = time.time()
        original_size = 0

        try:
            original_size = source_file.stat().st_size
            print(f"Processing {source_file.name}...")
            print(f"  Original size: {format_size(original_size)}")

            document = self.file_processor.read_document(source_file)
            counts = self.optimize_assets(document)

            print("  Applying JSON optimizations...")
            optimized = normalize(sanitize(document), self.config.precision)
            optimized_size = self.file_processor.write_minified(optimized, output_file)
        except json.JSONDecodeError as error:
            return self._handle_error(
                f"invalid JSON ({error})", error, source_file, output_file, original_size, start_time
            )
        except Exception as error:
            return self._handle_error(str(error), error, source_file, output_file, original_size, start_time)

        reduction = reduction_percent(original_size, optimized_size)
        print(f"  Final size: {format_size(optimized_size)}")
        print(f"  Size reduction: {reduction:.1f}%")
        print(f"{source_file.name} optimization complete. Output saved to {output_file}\n")

        return {
            "name": source_file.name,
            "status": "success",
            "original_size": original_size,
            "optimized_size": optimized_size,
            "space_saved": original_size - optimized_size,
            "reduction": reduction,
            "images_converted": counts[CONVERTED],
            "sequences_optimized": counts[SEQUENCE_OPTIMIZED],
            "assets_skipped": counts[SKIPPED],
            "processing_time": time.time() - start_time,
        }

    def optimize_assets(self, document: Any) -> Dict[str, int]:
        """
        Optimize every embedded image of a document in place.

        Each asset is handled by its own task; tasks only read their asset and
        the pipeline stores each result back into that asset's slot once all
        tasks have finished.

        Returns:
            Number of assets per outcome status
        """
        assets = self._get_assets(document)
        counts = {CONVERTED: 0, SEQUENCE_OPTIMIZED: 0, SKIPPED: 0}
        if not assets:
            print("  Images processed: 0, sequences optimized: 0, skipped: 0")
            return counts

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = [executor.submit(self._process_asset, index, asset) for index, asset in enumerate(assets)]
        outcomes = [future.result() for future in futures]

        for outcome in outcomes:
            if outcome is None:
                continue
            assets[outcome.index] = outcome.asset
            counts[outcome.status] += 1
            self._report_asset(outcome)

        print(
            f"  Images processed: {counts[CONVERTED]}, sequences optimized: {counts[SEQUENCE_OPTIMIZED]}, "
            f"skipped: {counts[SKIPPED]}"
        )
        return counts

    @staticmethod
    def _get_assets(document: Any) -> List:
        assets = document.get("assets") if isinstance(document, dict) else None
        return assets if isinstance(assets, list) else []

    def _process_asset(self, index: int, asset: Any) -> Optional[AssetOutcome]:
        """Optimize one asset. Returns None for assets without a recodable image."""
        if not isinstance(asset, dict):
            return None

        payload = asset.get("p")
        if not isinstance(payload, str) or not payload:
            return None

        image_format = get_image_format(payload)
        if image_format is None or image_format not in self.config.recode_formats:
            return None

        if asset.get("t") == self.sequence_optimizer.sequence_tag:
            return self._optimize_sequence(index, asset, image_format)
        return self._recode_image(index, asset, image_format)

    def _optimize_sequence(self, index: int, asset: Dict, image_format: str) -> AssetOutcome:
        _, data = split_data_uri(asset["p"])
        optimized = self.sequence_optimizer.optimize_sequence(asset)

        if optimized is asset:
            return AssetOutcome(index, asset, SKIPPED, image_format, len(data), len(data), "no optimization possible")

        _, new_data = split_data_uri(optimized["p"])
        return AssetOutcome(index, optimized, SEQUENCE_OPTIMIZED, image_format, len(data), len(new_data))

    def _recode_image(self, index: int, asset: Dict, image_format: str) -> AssetOutcome:
        _, data = split_data_uri(asset["p"])
        original_length = len(data)

        try:
            image_bytes = base64.b64decode(data)
        except binascii.Error as error:
            self.logger.warning(f"Failed to decode image {asset.get('id')}: {error}")
            return AssetOutcome(
                index, asset, SKIPPED, image_format, original_length, original_length, "invalid base64 data"
            )

        quality = self.config.select_quality(original_length)
        recoded = self.image_recoder.recode(image_bytes, quality, asset.get("id"))
        if recoded is None:
            return AssetOutcome(
                index, asset, SKIPPED, image_format, original_length, original_length, "conversion failed"
            )

        encoded = base64.b64encode(recoded).decode("ascii")
        if len(encoded) >= original_length:
            return AssetOutcome(
                index,
                asset,
                SKIPPED,
                image_format,
                original_length,
                len(encoded),
                "WebP would be larger than original",
            )

        new_asset = {**asset, "p": build_data_uri(self.image_recoder.target_format, encoded)}
        return AssetOutcome(index, new_asset, CONVERTED, image_format, original_length, len(encoded))

    def _report_asset(self, outcome: AssetOutcome) -> None:
        asset_id = outcome.asset.get("id")
        sizes = (
            f"{format_kilobytes(outcome.original_length)} -> {format_kilobytes(outcome.new_length)}, "
            f"{reduction_percent(outcome.original_length, outcome.new_length):.1f}% reduction"
        )

        if outcome.status == CONVERTED:
            print(f"  Converted {asset_id}: {outcome.image_format} -> webp ({sizes})")
        elif outcome.status == SEQUENCE_OPTIMIZED:
            print(f"  Optimized image sequence {asset_id}: PNG optimization ({sizes})")
        elif outcome.asset.get("t") == self.sequence_optimizer.sequence_tag:
            print(f"  Skipping image sequence {asset_id} ({outcome.reason})")
        else:
            print(f"  Skipped {asset_id}: {outcome.reason}")

    def _handle_error(
        self,
        message: str,
        error: Exception,
        source_file: Path,
        output_file: Path,
        original_size: int,
        start_time: float,
    ) -> Dict:
        self.logger.error(f"  ✗ Error processing {source_file.name}: {message}")
        self.logger.debug(f"Traceback for {source_file.name}", exc_info=error)
        self._cleanup_output(output_file)

        return {
            "name": source_file.name,
            "status": f"error: {message}",
            "original_size": original_size,
            "optimized_size": 0,
            "space_saved": 0,
            "reduction": 0.0,
            "images_converted": 0,
            "sequences_optimized": 0,
            "assets_skipped": 0,
            "processing_time": time.time() - start_time,
        }

    @staticmethod
    def _cleanup_output(out_path: Path) -> None:
        if out_path.exists():
            out_path.unlink()
