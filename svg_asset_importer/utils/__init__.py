"""
Utility modules for raster image encoding and SVG rasterization.
"""

from .image import ImageUtils
from .svg import SvgDocument, parse_xml, load_svg, rasterize_svg

__all__ = [
    "ImageUtils",
    "SvgDocument",
    "parse_xml",
    "load_svg",
    "rasterize_svg",
]
