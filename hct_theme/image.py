"""
Image loading: decode a file into a flat array of ARGB pixels.
"""

from pathlib import Path

import numpy as np
from PIL import Image


# =============================================================================
# Constants
# =============================================================================

# Image size limits (security: prevent decompression bombs)
MAX_IMAGE_PIXELS = 50_000_000  # 50 megapixels
MAX_IMAGE_DIMENSION = 10_000  # 10k pixels per side

# Quantization does not need full resolution
MAX_QUANTIZE_DIMENSION = 128  # Longest side after downsampling


def validate_image_size(width: int, height: int):
    """
    Raises:
        ValueError: If the image exceeds the dimension or pixel limits
    """
    if width > MAX_IMAGE_DIMENSION or height > MAX_IMAGE_DIMENSION:
        raise ValueError(
            f"Image dimensions {width}x{height} exceed maximum "
            f"{MAX_IMAGE_DIMENSION}x{MAX_IMAGE_DIMENSION}"
        )
    if width * height > MAX_IMAGE_PIXELS:
        raise ValueError(
            f"Image has {width * height:,} pixels, exceeding maximum {MAX_IMAGE_PIXELS:,}"
        )


def pixels_from_image(img: Image.Image, max_dimension: int = MAX_QUANTIZE_DIMENSION) -> np.ndarray:
    """
    Flatten a Pillow image into ARGB integers, row by row.

    Args:
        img: Any Pillow image; converted to RGBA
        max_dimension: Downsample so neither side exceeds this; 0 keeps full size

    Returns:
        1D int64 array of ARGB values
    """
    if max_dimension and max(img.size) > max_dimension:
        img = img.copy()
        img.thumbnail((max_dimension, max_dimension))

    rgba = np.asarray(img.convert('RGBA'), dtype=np.int64).reshape(-1, 4)
    return (rgba[:, 3] << 24) | (rgba[:, 0] << 16) | (rgba[:, 1] << 8) | rgba[:, 2]


def load_pixels(image_path, max_dimension: int = MAX_QUANTIZE_DIMENSION) -> np.ndarray:
    """
    Load an image file as ARGB pixels.

    Args:
        image_path: Path to the image file
        max_dimension: Downsample so neither side exceeds this; 0 keeps full size

    Returns:
        1D int64 array of ARGB values

    Raises:
        FileNotFoundError: If image file doesn't exist
        ValueError: If file is not a valid image or exceeds size limits
    """
    path = Path(image_path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {image_path}")

    # Load image with validation
    try:
        img = Image.open(path)
    except FileNotFoundError:
        raise FileNotFoundError(f"Image not found: {image_path}")
    except Exception as e:
        raise ValueError(f"Could not open image: {e}")

    with img:
        # Header only so far; check size before decoding
        validate_image_size(*img.size)
        try:
            img.load()
        except Exception as e:
            raise ValueError(f"Could not decode image: {e}")
        return pixels_from_image(img, max_dimension)
