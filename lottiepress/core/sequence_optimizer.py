import base64
from io import BytesIO
from typing import Dict

from PIL import Image

from lottiepress.core.config import OptimizerConfig
from lottiepress.utils.data_uri import build_data_uri, split_data_uri
from lottiepress.utils.logger import get_logger


# ============================================================================
# Sequence Optimizer
# ============================================================================


class SequenceOptimizer:
    """
    Recompresses image-sequence frames without changing their codec.

    Sequence frames are played back as a series, so they stay PNG instead of
    being converted to WebP.
    """

    sequence_tag = "seq"
    png_prefix = "data:image/png;base64,"

    def __init__(self, config: OptimizerConfig):
        """
        Initialize sequence optimizer.

        Args:
            config: Optimizer configuration
        """
        self.config = config
        self.logger = get_logger()

    def applies_to(self, asset: Dict) -> bool:
        """Check whether an asset is an embedded PNG sequence frame."""
        payload = asset.get("p")
        return (
            asset.get("t") == self.sequence_tag
            and isinstance(payload, str)
            and payload.startswith(self.png_prefix)
        )

    def optimize_sequence(self, asset: Dict) -> Dict:
        """
        Recompress a sequence frame.

        Args:
            asset: Asset mapping

        Returns:
            A new asset with the smaller payload, or the same asset object when
            it does not apply or no smaller encoding was found
        """
        if not self.applies_to(asset):
            return asset

        _, data = split_data_uri(asset["p"])
        try:
            optimized = base64.b64encode(self._recompress(base64.b64decode(data))).decode("ascii")
        except Exception as error:
            self.logger.warning(f"Failed to optimize image sequence {asset.get('id')}: {error}")
            return asset

        if len(optimized) >= len(data):
            self.logger.debug(
                f"Sequence {asset.get('id')}: PNG recompression not smaller ({len(optimized)} >= {len(data)})"
            )
            return asset

        return {**asset, "p": build_data_uri("png", optimized)}

    def _recompress(self, data: bytes) -> bytes:
        with Image.open(BytesIO(data)) as image:
            image.load()
            frame = self._to_palette(image) if self.config.sequence_quality < 100 else image
            buffer = BytesIO()
            frame.save(
                buffer,
                format="PNG",
                optimize=True,
                compress_level=self.config.png_compress_level,
            )
        return buffer.getvalue()

    @staticmethod
    def _to_palette(image: Image.Image) -> Image.Image:
        """Quantize a truecolor frame to an adaptive 256-colour palette."""
        if image.mode in ("P", "L", "1"):
            return image
        if image.mode not in ("RGB", "RGBA"):
            image = image.convert("RGBA")
        method = Image.Quantize.FASTOCTREE if image.mode == "RGBA" else Image.Quantize.MEDIANCUT
        return image.quantize(colors=256, method=method)
