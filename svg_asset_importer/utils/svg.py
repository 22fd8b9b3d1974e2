"""
SVG decoding and rasterization.

Parsing uses ElementTree so malformed markup is reported before any
rendering work; rendering is delegated to CairoSVG, which draws the document
at its natural size (declared width/height, falling back to the viewBox).
"""

from dataclasses import dataclass
from typing import Optional
import xml.etree.ElementTree as ET
import logging

import cairosvg
from PIL import Image

from ..errors import ParseError, RenderError, CodecError
from .image import ImageUtils

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

logger = logging.getLogger(__name__)


def parse_xml(data: bytes, path: Optional[str] = None) -> ET.Element:
    """
    Parse raw bytes as an XML document.

    Args:
        data: Complete file content
        path: Source path, used only for error reporting

    Returns:
        Root element of the document

    Raises:
        ParseError: If the bytes are empty or not well-formed XML
    """
    if not data:
        raise ParseError("document is empty", path)

    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise ParseError(f"malformed XML: {e}", path) from e


def _local_name(tag: str) -> str:
    """Strip an ElementTree '{namespace}' prefix from a tag."""
    if tag.startswith('{'):
        return tag.rsplit('}', 1)[1]
    return tag


@dataclass
class SvgDocument:
    """An XML document whose root element is <svg>."""
    root: ET.Element
    data: bytes
    path: Optional[str] = None

    @classmethod
    def open(cls, root: ET.Element, data: bytes, path: Optional[str] = None) -> "SvgDocument":
        """
        Interpret a parsed XML document as SVG.

        Raises:
            ParseError: If the root element is not <svg>
        """
        namespace = root.tag[1:].split('}', 1)[0] if root.tag.startswith('{') else None
        if _local_name(root.tag) != 'svg' or namespace not in (None, SVG_NAMESPACE):
            raise ParseError(f"root element is <{root.tag}>, expected <svg>", path)

        return cls(root=root, data=data, path=path)

    @property
    def width(self) -> Optional[str]:
        return self.root.get('width')

    @property
    def height(self) -> Optional[str]:
        return self.root.get('height')

    @property
    def view_box(self) -> Optional[str]:
        return self.root.get('viewBox')

    def draw(self) -> Image.Image:
        """
        Render the document into a bitmap at its natural size.

        Returns:
            RGBA PIL image

        Raises:
            RenderError: If the rasterizer fails on the document
            CodecError: If the rendered bitmap cannot be decoded
        """
        try:
            png_bytes = cairosvg.svg2png(bytestring=self.data, write_to=None)
        except Exception as e:
            logger.error(f"Rasterizing {self.path or 'SVG document'} failed: {e}")
            raise RenderError(str(e), self.path) from e

        if not png_bytes:
            raise RenderError("rasterizer produced no output", self.path)

        try:
            image = ImageUtils.load_image(png_bytes)
        except CodecError as e:
            raise CodecError(f"cannot decode rendered bitmap: {e}", self.path) from e

        return ImageUtils.ensure_rgba(image)


def load_svg(data: bytes, path: Optional[str] = None) -> SvgDocument:
    """Parse bytes into an SvgDocument."""
    return SvgDocument.open(parse_xml(data, path), data, path)


def rasterize_svg(data: bytes, path: Optional[str] = None) -> Image.Image:
    """Parse and render SVG bytes in one step."""
    return load_svg(data, path).draw()
