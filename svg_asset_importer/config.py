"""
Configuration for the SVG asset importer.
Supports TOML and JSON configuration files with validation.
"""

import json
import logging
import tomllib
from dataclasses import dataclass, field
from typing import Dict, List, Any, Union, FrozenSet
from pathlib import Path


# Registration identity exposed to the host pipeline
IMPORTER_ID = "SVGAssetImporter"
IMPORTER_NAME = "SVG Importer"
IMPORTER_PRIORITY = 0

SOURCE_FILE_EXT_PRIMARY = ".svg"

# Raster formats the export step can write through Pillow
SUPPORTED_EXPORT_FORMATS = ['PNG', 'BMP', 'TIFF', 'WEBP']

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class ImporterConfig:
    """Main configuration class for the SVG asset importer."""

    # Import settings
    accepted_extensions: FrozenSet[str] = field(
        default_factory=lambda: frozenset({SOURCE_FILE_EXT_PRIMARY})
    )
    continue_on_error: bool = False

    # Export settings
    export_extension: str = SOURCE_FILE_EXT_PRIMARY
    export_format: str = "PNG"
    compression_level: int = 6

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ImporterConfig":
        """Load configuration from TOML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix.lower() == '.toml':
            return cls._from_toml(config_path)
        elif config_path.suffix.lower() == '.json':
            return cls._from_json(config_path)
        else:
            raise ValueError(f"Unsupported configuration format: {config_path.suffix}")

    @classmethod
    def _from_toml(cls, config_path: Path) -> "ImporterConfig":
        """Load configuration from TOML file."""
        with open(config_path, 'rb') as f:
            data = tomllib.load(f)
        return cls._from_dict(data)

    @classmethod
    def _from_json(cls, config_path: Path) -> "ImporterConfig":
        """Load configuration from JSON file."""
        with open(config_path, 'r') as f:
            data = json.load(f)
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "ImporterConfig":
        """Create configuration from dictionary."""
        config_data = {}

        if 'import' in data:
            import_section = data['import']
            if 'accepted_extensions' in import_section:
                extensions = import_section['accepted_extensions']
                if isinstance(extensions, str):
                    extensions = [extensions]
                config_data['accepted_extensions'] = frozenset(extensions)
            config_data['continue_on_error'] = import_section.get('continue_on_error', False)

        if 'export' in data:
            export = data['export']
            config_data['export_extension'] = export.get('extension', SOURCE_FILE_EXT_PRIMARY)
            config_data['export_format'] = export.get('format', 'PNG')
            config_data['compression_level'] = export.get('compression_level', 6)

        if 'logging' in data:
            config_data['log_level'] = data['logging'].get('level', 'INFO')

        return cls(**config_data)

    @classmethod
    def default(cls) -> "ImporterConfig":
        """Create default configuration."""
        return cls()

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.accepted_extensions:
            errors.append("accepted_extensions must not be empty")

        for ext in sorted(self.accepted_extensions):
            if not isinstance(ext, str) or not ext.startswith('.') or len(ext) < 2:
                errors.append(f"accepted extension '{ext}' must start with '.'")

        if not self.export_extension.startswith('.') or len(self.export_extension) < 2:
            errors.append("export_extension must start with '.'")

        if self.export_format.upper() not in SUPPORTED_EXPORT_FORMATS:
            errors.append(f"export_format must be one of {', '.join(SUPPORTED_EXPORT_FORMATS)}")

        if not 0 <= self.compression_level <= 9:
            errors.append("compression_level must be between 0 and 9")

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}")

        return errors

    @property
    def logging_level(self) -> int:
        """Numeric logging level for the configured log_level name."""
        return getattr(logging, self.log_level.upper(), logging.INFO)
