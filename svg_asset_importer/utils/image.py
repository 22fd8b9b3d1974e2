"""
Image codec utilities for the importer.
"""

from typing import Union
from PIL import Image
import numpy as np
import io

from ..errors import CodecError


class ImageUtils:
    """Utility class for raster image encoding and pixel conversion."""

    @staticmethod
    def load_image(data: Union[bytes, str, Image.Image]) -> Image.Image:
        """
        Load image from various sources.

        Args:
            data: Image data as bytes, file path, or PIL Image

        Returns:
            PIL Image object with its pixel data loaded

        Raises:
            CodecError: If data cannot be decoded as an image
            OSError: If a file path cannot be read
        """
        if isinstance(data, Image.Image):
            return data
        elif isinstance(data, bytes):
            try:
                image = Image.open(io.BytesIO(data))
                image.load()
                return image
            except (Image.UnidentifiedImageError, SyntaxError, ValueError, OSError) as e:
                raise CodecError(f"Cannot load image from bytes: {e}") from e
        elif isinstance(data, str):
            try:
                image = Image.open(data)
                image.load()
                return image
            except (Image.UnidentifiedImageError, SyntaxError, ValueError) as e:
                raise CodecError(f"Cannot load image from path '{data}': {e}", data) from e
        else:
            raise CodecError(f"Unsupported image data type: {type(data)}")

    @staticmethod
    def save_image(image: Image.Image, path: str, format: str = 'PNG', **kwargs) -> None:
        """
        Save image to file with quality preservation.

        The format is passed explicitly so the file extension never decides
        the codec.

        Args:
            image: Image to save
            path: Output file path
            format: Image format (PNG, BMP, etc.)
            **kwargs: Additional save parameters

        Raises:
            CodecError: If the image cannot be encoded in the requested format
            OSError: If the file cannot be written
        """
        save_kwargs = {}
        compress_level = kwargs.pop('compress_level', 6)

        if format.upper() == 'PNG':
            save_kwargs.update({
                'optimize': True,
                'compress_level': compress_level,
            })
        elif format.upper() == 'WEBP':
            save_kwargs.update({
                'lossless': kwargs.pop('lossless', True),
            })

        save_kwargs.update(kwargs)

        # Encode in memory first so codec failures never leave a file behind
        buffer = io.BytesIO()
        try:
            image.save(buffer, format=format, **save_kwargs)
        except (KeyError, ValueError, OSError) as e:
            raise CodecError(f"Cannot encode image as {format}: {e}", path) from e

        with open(path, 'wb') as f:
            f.write(buffer.getvalue())

    @staticmethod
    def ensure_rgba(image: Image.Image) -> Image.Image:
        """Convert image to RGBA mode if not already."""
        if image.mode != 'RGBA':
            return image.convert('RGBA')
        return image

    @staticmethod
    def image_to_array(image: Image.Image) -> np.ndarray:
        """
        Copy the pixels of an image into a (height, width, 4) uint8 array.

        Args:
            image: Source image in any mode

        Returns:
            RGBA pixel array owned by the caller
        """
        rgba = ImageUtils.ensure_rgba(image)
        return np.array(rgba, dtype=np.uint8).reshape(rgba.height, rgba.width, 4)

    @staticmethod
    def array_to_image(data: np.ndarray) -> Image.Image:
        """
        Build an RGBA image from a (height, width, 4) uint8 array.

        Raises:
            CodecError: If the array does not hold RGBA pixels
        """
        if data.ndim != 3 or data.shape[2] != 4 or data.dtype != np.uint8:
            raise CodecError(f"Expected RGBA uint8 pixel array, got shape {data.shape} ({data.dtype})")

        height, width = data.shape[:2]
        return Image.frombytes('RGBA', (width, height), np.ascontiguousarray(data).tobytes())
