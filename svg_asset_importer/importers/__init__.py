"""
Asset importers for the editor's asset pipeline.
"""

from .base import (
    AssetImporter, ImportCandidate, OutputDeclaration,
    ImportEnvironment, ExportEnvironment,
    ImporterRegistry, importer_registry
)
from .svg import SVGAssetImporter

# Register the built-in importer with the global registry
importer_registry.register(SVGAssetImporter())

__all__ = [
    # Base classes and registry
    "AssetImporter",
    "ImportCandidate",
    "OutputDeclaration",
    "ImportEnvironment",
    "ExportEnvironment",
    "ImporterRegistry",
    "importer_registry",

    # Concrete importers
    "SVGAssetImporter",
]
