"""
SVG importer: turns SVG source files into pixmap resources and writes pixmaps
back out under an .svg file name.

The export side does not produce vector data. It stores the pixmap's main
layer as a raster image (PNG by default) named <resource>.svg.
"""

from typing import List, Optional, Set, Tuple

from ..config import (
    ImporterConfig, IMPORTER_ID, IMPORTER_NAME, IMPORTER_PRIORITY
)
from ..errors import CodecError, ImportBatchError, ResourceUnavailableError
from ..resources import PixelBuffer, RasterResource, ResourceKind
from ..utils.image import ImageUtils
from ..utils.svg import load_svg
from .base import AssetImporter, ImportEnvironment, ExportEnvironment, file_extension


class SVGAssetImporter(AssetImporter):
    """Importer for SVG vector images."""

    id = IMPORTER_ID
    name = IMPORTER_NAME
    priority = IMPORTER_PRIORITY

    def __init__(self, config: Optional[ImporterConfig] = None):
        """Initialize SVG importer."""
        super().__init__(config)
        self._accepted_extensions = frozenset(ext.casefold() for ext in self.config.accepted_extensions)

    def accepts(self, path: str) -> bool:
        """Check whether a path carries one of the accepted extensions."""
        if not isinstance(path, str):
            return False

        ext = file_extension(path)
        return bool(ext) and ext.casefold() in self._accepted_extensions

    def prepare_import(self, env: ImportEnvironment) -> None:
        """
        Declare one pixmap output per accepted input.

        When several inputs map to the same asset name only the first one
        is declared.
        """
        declared: Set[str] = set()
        for candidate in env.handle_all_input(self.accepts):
            if candidate.asset_name in declared:
                self.logger.warning(
                    f"Ignoring {candidate.path}: output '{candidate.asset_name}' is already declared"
                )
                continue

            declared.add(candidate.asset_name)
            env.declare_output(candidate.asset_name, candidate.path)
            self.logger.debug(f"Declared output '{candidate.asset_name}' for {candidate.path}")

    def import_assets(self, env: ImportEnvironment) -> None:
        """
        Rasterize every claimed input into its target pixmap.

        Inputs whose target the host cannot supply are skipped. With
        continue_on_error disabled the first failure propagates; otherwise
        failures are collected and raised together as ImportBatchError once
        every input has been processed.

        Raises:
            OSError: If a source file cannot be read
            ParseError: If a source file is not a well-formed SVG document
            RenderError: If rasterization fails
            CodecError: If the rendered bitmap cannot be decoded
            ImportBatchError: If continue_on_error is set and any input failed
        """
        failures: List[Tuple[str, Exception]] = []
        seen: Set[str] = set()

        for candidate in env.input:
            if candidate.asset_name in seen:
                self.logger.warning(
                    f"Skipping {candidate.path}: output '{candidate.asset_name}' was handled by an earlier input"
                )
                continue
            seen.add(candidate.asset_name)

            try:
                target = env.resolve_output(candidate.asset_name)
            except ResourceUnavailableError as e:
                self.logger.debug(f"Skipping {candidate.path}: {e}")
                continue

            if target is None:
                self.logger.debug(f"Skipping {candidate.path}: output '{candidate.asset_name}' unavailable")
                continue

            try:
                pixel_data = self.load_pixel_data(candidate.path)
            except Exception as e:
                if not self.config.continue_on_error:
                    raise
                self.logger.error(f"Failed to import {candidate.path}: {e}")
                failures.append((candidate.path, e))
                continue

            target.main_layer = pixel_data
            env.mark_produced(target, candidate.path)
            self.logger.info(
                f"Imported {candidate.path} -> '{target.name}' ({pixel_data.width}x{pixel_data.height})"
            )

        if failures:
            raise ImportBatchError(failures)

    def prepare_export(self, env: ExportEnvironment) -> Optional[str]:
        """Declare <name><ext> for pixmap inputs; other resource kinds are not exported."""
        resource = self._export_source(env)
        if resource is None:
            return None

        return env.add_output_path(self.export_path(resource))

    def export_assets(self, env: ExportEnvironment) -> Optional[str]:
        """
        Save the pixmap's main layer as a raster image under its .svg name.

        Returns:
            The written path, or None for resource kinds this importer does not export

        Raises:
            CodecError: If the pixmap has no pixel data or encoding fails
            OSError: If the file cannot be written
        """
        resource = self._export_source(env)
        if resource is None:
            self.logger.debug(f"Not exporting '{env.input.name}': unsupported kind {env.input.kind.value}")
            return None

        output_path = env.add_output_path(self.export_path(resource))
        self.save_pixel_data(resource, output_path)
        self.logger.info(f"Exported '{resource.name}' -> {output_path}")
        return output_path

    def _export_source(self, env: ExportEnvironment) -> Optional[RasterResource]:
        """The pixmap to export, or None when the input is not a pixmap."""
        resource = env.input
        if resource.kind is not ResourceKind.PIXMAP or not isinstance(resource, RasterResource):
            return None
        return resource

    def export_path(self, resource: RasterResource) -> str:
        """Relative output path for an exported resource."""
        return resource.name + self.config.export_extension

    def load_pixel_data(self, file_path: str) -> PixelBuffer:
        """Read, parse and rasterize an SVG file at its natural size."""
        with open(file_path, 'rb') as f:
            svg_bytes = f.read()

        document = load_svg(svg_bytes, file_path)
        image = document.draw()
        return PixelBuffer.from_image(image)

    def save_pixel_data(self, resource: RasterResource, file_path: str) -> None:
        """Encode a pixmap's main layer to file_path."""
        if resource.main_layer is None:
            raise CodecError(f"Resource '{resource.name}' has no pixel data", file_path)

        ImageUtils.save_image(
            resource.main_layer.to_image(),
            file_path,
            format=self.config.export_format.upper(),
            compress_level=self.config.compression_level,
        )
