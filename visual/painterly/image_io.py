"""Image loading and PNG export."""

import io
from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image, ImageOps, UnidentifiedImageError

from .errors import LoadError


def load_image(source: Union[str, Path, BinaryIO]) -> Image.Image:
    """
    Decode an image from a path or binary file object.

    Args:
        source: File path or readable binary stream

    Returns:
        RGBA PIL Image with EXIF orientation applied

    Raises:
        LoadError: If the file is missing or is not a readable image
    """
    try:
        img = Image.open(source)
        img.load()
        img = ImageOps.exif_transpose(img)
    except (FileNotFoundError, UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise LoadError(f"Could not load image: {e}") from e

    return img.convert("RGBA")


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as a PNG byte stream."""
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def save_png(image: Image.Image, path: Union[str, Path]) -> Path:
    """Write an image to disk as PNG, returning the path written."""
    output_path = Path(path)
    output_path.write_bytes(encode_png(image))
    return output_path
