"""
Tiny synthetic images.

Each image is a 1x1 PNG. The signature, header chunk, pixel data and end
chunk are identical for every image; only the number of repeated text
chunks in the middle varies, which changes the byte length but never the
pixel dimensions.
"""

import logging
import random
from io import BytesIO
from typing import List, Optional

from PIL import Image
from PIL.PngImagePlugin import PngInfo

from .options import ImageOptions

logger = logging.getLogger(__name__)

PIXEL_COLOR = (255, 255, 255)
PAYLOAD_KEY = "Comment"
PAYLOAD_TEXT = "mock-populate"


def _encode(pixel: Image.Image, repeats: int) -> bytes:
    info = PngInfo()
    for _ in range(repeats):
        info.add_text(PAYLOAD_KEY, PAYLOAD_TEXT)
    buffer = BytesIO()
    pixel.save(buffer, format="PNG", pnginfo=info)
    return buffer.getvalue()


def imager(options=None, rng: Optional[random.Random] = None, **overrides) -> List[bytes]:
    """Return ``n + 1`` PNG byte strings carrying 0 to ``size - 1`` payload chunks each."""
    opts = ImageOptions.parse(options, **overrides)
    rng = opts.make_rng(rng)

    pixel = Image.new("RGB", (1, 1), PIXEL_COLOR)
    logger.debug("Generating %d images with up to %d payload chunks", opts.n + 1, opts.size - 1)

    return [_encode(pixel, rng.randrange(opts.size)) for _ in range(opts.n + 1)]
