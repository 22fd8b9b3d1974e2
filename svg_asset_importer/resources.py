"""
Resource model shared with the host editor.
The host owns every resource; importers borrow them for a single call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Any, Tuple
from PIL import Image
import numpy as np

from .utils.image import ImageUtils


class ResourceKind(Enum):
    """Resource kinds known to the host's content registry."""
    PIXMAP = "pixmap"
    TEXTURE = "texture"
    FONT = "font"
    AUDIO_DATA = "audio_data"


@dataclass(eq=False)
class PixelBuffer:
    """A 2D grid of RGBA pixels stored as a (height, width, 4) uint8 array."""
    width: int
    height: int
    data: np.ndarray

    def __post_init__(self):
        """Validate buffer dimensions after initialization."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"dimensions cannot be negative, got {(self.width, self.height)}")

        expected_shape = (self.height, self.width, 4)
        if self.data.shape != expected_shape:
            raise ValueError(f"pixel data must have shape {expected_shape}, got {self.data.shape}")

        if self.data.dtype != np.uint8:
            raise ValueError(f"pixel data must be uint8, got {self.data.dtype}")

    @classmethod
    def blank(cls, width: int, height: int,
              color: Tuple[int, int, int, int] = (0, 0, 0, 0)) -> "PixelBuffer":
        """Create a buffer filled with a single color."""
        data = np.empty((height, width, 4), dtype=np.uint8)
        data[:, :] = color
        return cls(width=width, height=height, data=data)

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        """Copy pixels out of a PIL image."""
        data = ImageUtils.image_to_array(image)
        height, width = data.shape[:2]
        return cls(width=width, height=height, data=data)

    def to_image(self) -> Image.Image:
        """Build a new RGBA PIL image holding a copy of these pixels."""
        return ImageUtils.array_to_image(self.data)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(width=self.width, height=self.height, data=self.data.copy())

    @property
    def size(self) -> Tuple[int, int]:
        """Get buffer size as (width, height)."""
        return (self.width, self.height)

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Get the RGBA value at column x, row y."""
        r, g, b, a = self.data[y, x]
        return (int(r), int(g), int(b), int(a))


@dataclass
class Resource:
    """A named resource owned by the host."""
    name: str
    kind: ResourceKind
    source_path: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RasterResource(Resource):
    """Pixmap resource holding one main layer of pixel data."""
    kind: ResourceKind = ResourceKind.PIXMAP
    main_layer: Optional[PixelBuffer] = None

    def __post_init__(self):
        if self.kind is not ResourceKind.PIXMAP:
            raise ValueError(f"RasterResource kind must be {ResourceKind.PIXMAP}, got {self.kind}")

    @property
    def size(self) -> Tuple[int, int]:
        """Get main layer size, (0, 0) when there is no pixel data."""
        if self.main_layer is None:
            return (0, 0)
        return self.main_layer.size
