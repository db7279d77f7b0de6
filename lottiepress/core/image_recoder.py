from io import BytesIO
from typing import Optional

from PIL import Image, ImageFile

from lottiepress.core.config import OptimizerConfig
from lottiepress.utils.logger import get_logger


# Decode truncated images instead of rejecting them
ImageFile.LOAD_TRUNCATED_IMAGES = True


# ============================================================================
# Image Recoder
# ============================================================================


class ImageRecoder:
    """
    Re-encodes embedded raster images to WebP using Pillow.

    Importing this module sets ImageFile.LOAD_TRUNCATED_IMAGES for the whole
    process, so truncated images decode as far as their data goes here and in
    any other Pillow code running alongside.
    """

    target_format = "webp"

    def __init__(self, config: OptimizerConfig):
        """
        Initialize image recoder.

        Args:
            config: Optimizer configuration
        """
        self.config = config
        self.logger = get_logger()

    def recode(self, data: bytes, quality: int, asset_id: Optional[str] = None) -> Optional[bytes]:
        """
        Re-encode raw image bytes to WebP.

        Args:
            data: Decoded image bytes in any format Pillow can read
            quality: WebP quality (1-100)
            asset_id: Asset identifier, used only in log messages

        Returns:
            Encoded WebP bytes, or None if the image could not be converted
        """
        try:
            with Image.open(BytesIO(data)) as image:
                image.load()
                buffer = BytesIO()
                self._prepare(image).save(
                    buffer,
                    format="WEBP",
                    quality=quality,
                    method=self.config.webp_method,
                )
        except Exception as error:
            self.logger.warning(f"Failed to convert image {asset_id or ''} to WebP: {error}")
            return None

        self.logger.debug(f"Recoded {asset_id}: {len(data)} -> {buffer.tell()} bytes at quality {quality}")
        return buffer.getvalue()

    @staticmethod
    def _prepare(image: Image.Image) -> Image.Image:
        """Convert the image to a mode the WebP encoder accepts."""
        if image.mode == "RGBA" or (image.mode == "RGB" and "transparency" not in image.info):
            return image
        if image.mode in ("LA", "PA") or "transparency" in image.info:
            return image.convert("RGBA")
        return image.convert("RGB")
