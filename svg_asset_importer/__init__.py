"""
SVG Asset Importer

Asset pipeline plugin that imports SVG vector files as pixmap resources and
exports pixmaps back out under an .svg file name.
"""

__version__ = "0.1.0"

from .config import ImporterConfig
from .errors import (
    AssetError, ParseError, RenderError, CodecError,
    ResourceUnavailableError, ImportBatchError
)
from .resources import ResourceKind, PixelBuffer, Resource, RasterResource
from .importers.base import (
    AssetImporter, ImportCandidate, OutputDeclaration,
    ImportEnvironment, ExportEnvironment, ImporterRegistry
)
from .importers import SVGAssetImporter, importer_registry
from .environment import MemoryImportEnvironment, MemoryExportEnvironment, discover_candidates

__all__ = [
    "ImporterConfig",
    "AssetError",
    "ParseError",
    "RenderError",
    "CodecError",
    "ResourceUnavailableError",
    "ImportBatchError",
    "ResourceKind",
    "PixelBuffer",
    "Resource",
    "RasterResource",
    "AssetImporter",
    "ImportCandidate",
    "OutputDeclaration",
    "ImportEnvironment",
    "ExportEnvironment",
    "ImporterRegistry",
    "importer_registry",
    "SVGAssetImporter",
    "MemoryImportEnvironment",
    "MemoryExportEnvironment",
    "discover_candidates",
]
