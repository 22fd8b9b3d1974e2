"""
Tests for exporting pixmaps through the SVG importer.
"""

import os
import shutil
import tempfile
import unittest

import numpy as np
from PIL import Image

from svg_asset_importer.config import ImporterConfig
from svg_asset_importer.environment import MemoryExportEnvironment
from svg_asset_importer.errors import CodecError
from svg_asset_importer.importers.svg import SVGAssetImporter
from svg_asset_importer.resources import PixelBuffer, RasterResource, Resource, ResourceKind


def create_test_pixmap(name: str, size: tuple[int, int]) -> RasterResource:
    """Create a pixmap with a simple non-uniform pattern."""
    width, height = size
    buffer = PixelBuffer.blank(width, height, (0, 0, 0, 0))
    buffer.data[: height // 2, :] = (255, 0, 0, 255)
    buffer.data[:, : width // 4] = (0, 128, 255, 200)
    return RasterResource(name=name, main_layer=buffer)


class TestExportPlanning(unittest.TestCase):
    """Test export planning."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.importer = SVGAssetImporter()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_declares_name_with_svg_extension(self):
        """Test planner declares <name>.svg for pixmaps."""
        env = MemoryExportEnvironment(create_test_pixmap("icon", (32, 32)), self.temp_dir)

        declared = self.importer.prepare_export(env)

        self.assertEqual(declared, os.path.join(self.temp_dir, "icon.svg"))
        self.assertEqual(env.output_paths, [declared])
        self.assertFalse(os.path.exists(declared))

    def test_path_ignores_original_source_format(self):
        """Test the exported name does not depend on where the pixmap came from."""
        pixmap = create_test_pixmap("hero", (4, 4))
        pixmap.source_path = "art/hero.png"
        env = MemoryExportEnvironment(pixmap, self.temp_dir)

        self.assertEqual(self.importer.prepare_export(env), os.path.join(self.temp_dir, "hero.svg"))

    def test_non_pixmap_declares_nothing(self):
        """Test other resource kinds are not exported."""
        for kind in (ResourceKind.TEXTURE, ResourceKind.FONT, ResourceKind.AUDIO_DATA):
            env = MemoryExportEnvironment(Resource(name="thing", kind=kind), self.temp_dir)

            self.assertIsNone(self.importer.prepare_export(env))
            self.assertEqual(env.output_paths, [])


class TestExportExecution(unittest.TestCase):
    """Test export execution."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.importer = SVGAssetImporter()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_export_icon(self):
        """Test exporting a 32x32 pixmap writes a 32x32 raster image at icon.svg."""
        pixmap = create_test_pixmap("icon", (32, 32))
        env = MemoryExportEnvironment(pixmap, self.temp_dir)

        declared = self.importer.prepare_export(env)
        written = self.importer.export_assets(env)

        self.assertEqual(written, declared)
        self.assertEqual(env.output_paths, [declared])
        self.assertTrue(os.path.isfile(written))

        with Image.open(written) as image:
            self.assertEqual(image.format, "PNG")
            self.assertEqual(image.size, (32, 32))
            np.testing.assert_array_equal(np.array(image.convert('RGBA')), pixmap.main_layer.data)

    def test_export_does_not_modify_resource(self):
        """Test the exported pixmap is left untouched."""
        pixmap = create_test_pixmap("icon", (8, 8))
        before = pixmap.main_layer.data.copy()
        env = MemoryExportEnvironment(pixmap, self.temp_dir)

        self.importer.export_assets(env)

        np.testing.assert_array_equal(pixmap.main_layer.data, before)

    def test_export_with_configured_format(self):
        """Test the raster codec follows configuration."""
        importer = SVGAssetImporter(ImporterConfig(export_format="bmp"))
        env = MemoryExportEnvironment(create_test_pixmap("icon", (6, 3)), self.temp_dir)

        written = importer.export_assets(env)

        self.assertTrue(written.endswith("icon.svg"))
        with Image.open(written) as image:
            self.assertEqual(image.format, "BMP")
            self.assertEqual(image.size, (6, 3))

    def test_export_non_pixmap_is_noop(self):
        """Test export of other resource kinds writes nothing."""
        env = MemoryExportEnvironment(Resource(name="font", kind=ResourceKind.FONT), self.temp_dir)

        self.assertIsNone(self.importer.export_assets(env))
        self.assertEqual(os.listdir(self.temp_dir), [])

    def test_pixmap_kind_without_pixel_layer_is_not_exported(self):
        """Test a plain resource tagged as pixmap is neither declared nor written."""
        env = MemoryExportEnvironment(Resource(name="x", kind=ResourceKind.PIXMAP), self.temp_dir)

        self.assertIsNone(self.importer.prepare_export(env))
        self.assertIsNone(self.importer.export_assets(env))
        self.assertEqual(env.output_paths, [])
        self.assertEqual(os.listdir(self.temp_dir), [])

    def test_missing_directory_raises_os_error(self):
        """Test file system errors propagate unchanged."""
        env = MemoryExportEnvironment(create_test_pixmap("missing/icon", (4, 4)), self.temp_dir)

        with self.assertRaises(FileNotFoundError):
            self.importer.export_assets(env)

    def test_pixmap_without_pixels_raises_codec_error(self):
        """Test exporting an empty pixmap fails without writing."""
        env = MemoryExportEnvironment(RasterResource(name="empty"), self.temp_dir)

        with self.assertRaises(CodecError):
            self.importer.export_assets(env)

        self.assertEqual(os.listdir(self.temp_dir), [])

    def test_unknown_format_raises_codec_error(self):
        """Test encoder failures surface as CodecError and leave no file."""
        importer = SVGAssetImporter(ImporterConfig(export_format="NOT_A_FORMAT"))
        env = MemoryExportEnvironment(create_test_pixmap("icon", (4, 4)), self.temp_dir)

        with self.assertRaises(CodecError):
            importer.export_assets(env)

        self.assertEqual(os.listdir(self.temp_dir), [])


if __name__ == '__main__':
    unittest.main()
