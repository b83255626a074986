"""
Image Checks Module
Reads captured screenshots back with Pillow.
"""

from pathlib import Path
from typing import Tuple

from PIL import Image, UnidentifiedImageError


def png_dimensions(image_path: str | Path) -> Tuple[int, int]:
    """Return (width, height) of a PNG file, raising ValueError for anything else."""
    try:
        with Image.open(image_path) as image:
            if image.format != 'PNG':
                raise ValueError(f"{image_path} is {image.format}, not PNG")
            return image.size
    except UnidentifiedImageError as e:
        raise ValueError(f"{image_path} is not a readable image") from e

def is_valid_png(image_path: str | Path) -> bool:
    path = Path(image_path)
    if not path.is_file() or path.stat().st_size == 0:
        return False
    try:
        png_dimensions(path)
    except ValueError:
        return False
    return True
