"""Sizing and scaling decoded images for previews and thumbnails."""

from typing import Tuple

from PIL import Image

PREVIEW_MAX_SIZE = (1200, 900)
PREVIEW_MIN_SIDE = 200


def _round(v: float) -> int:
    return int(v + 0.5)


def fit_thumbnail(width: int, height: int, max_width: int, max_height: int) -> Tuple[int, int]:
    """Largest size with the image's aspect ratio that fits the box, never upscaled."""
    aspect = width / height
    if aspect >= 1.0:
        w = min(max_width, width)
        h = w / aspect
        if h > max_height:
            h = max_height
            w = h * aspect
    else:
        h = min(max_height, height)
        w = h * aspect
        if w > max_width:
            w = max_width
            h = w / aspect
    return max(1, _round(w)), max(1, _round(h))


def fit_preview(width: int, height: int, max_width: int = PREVIEW_MAX_SIZE[0],
                max_height: int = PREVIEW_MAX_SIZE[1], min_side: int = PREVIEW_MIN_SIDE) -> Tuple[int, int]:
    """Display size for a preview panel; small images are blown up to ``min_side``."""
    aspect = width / height
    w = min(width, max_width)
    h = w / aspect
    if h > max_height:
        h = max_height
        w = h * aspect
    return _round(max(w, min_side)), _round(max(h, min_side))


def make_thumbnail(decoded, max_size: Tuple[int, int]) -> Image.Image:
    im = decoded.to_image()
    size = fit_thumbnail(decoded.width, decoded.height, *max_size)
    if size == im.size:
        return im
    return im.resize(size, Image.NEAREST)


def make_preview(decoded) -> Image.Image:
    im = decoded.to_image()
    size = fit_preview(decoded.width, decoded.height)
    if size == im.size:
        return im
    return im.resize(size, Image.NEAREST)
