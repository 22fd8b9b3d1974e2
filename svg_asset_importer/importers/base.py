"""
Abstract base classes for asset importers and the host environments they run in.
Defines the interface between the editor's asset pipeline and an importer.
"""

import os
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from ..config import ImporterConfig
from ..resources import RasterResource, Resource


def file_extension(path: str) -> str:
    """
    Get the extension of the last path component, including its dot.

    Everything from the last '.' of the file name counts, so a dotfile such
    as '.svg' has the extension '.svg'. Both '/' and '\\' separate components.
    """
    file_name = path[max(path.rfind('/'), path.rfind('\\')) + 1:]
    dot = file_name.rfind('.')
    if dot < 0:
        return ""
    return file_name[dot:]


@dataclass(frozen=True)
class ImportCandidate:
    """A source file discovered by the host, paired with its logical asset name."""
    path: str
    asset_name: str

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike],
                  source_root: Optional[Union[str, os.PathLike]] = None) -> "ImportCandidate":
        """
        Derive the logical asset name for a source path.

        The name is the path without its extension, relative to source_root
        when one is given, with '/' as separator on every platform.
        """
        path = os.fspath(path)
        relative = os.path.relpath(path, os.fspath(source_root)) if source_root is not None else path
        stem, _ = os.path.splitext(relative)
        asset_name = stem.replace(os.sep, '/').replace('\\', '/')
        return cls(path=path, asset_name=asset_name)


@dataclass(frozen=True)
class OutputDeclaration:
    """An output the importer intends to produce, declared during planning."""
    name: str
    source_path: str


class ImportEnvironment(ABC):
    """Host-side view of one import batch."""

    @property
    @abstractmethod
    def input(self) -> List[ImportCandidate]:
        """Candidates claimed by the importer during planning."""
        pass

    @abstractmethod
    def handle_all_input(self, predicate: Callable[[str], bool]) -> List[ImportCandidate]:
        """
        Claim every candidate whose path satisfies the predicate.

        Args:
            predicate: Pure classifier called with each candidate path

        Returns:
            Claimed candidates
        """
        pass

    @abstractmethod
    def declare_output(self, name: str, source_path: str) -> OutputDeclaration:
        """Register the intent to produce a raster resource named name."""
        pass

    @abstractmethod
    def resolve_output(self, name: str) -> Optional[RasterResource]:
        """
        Get the target resource for a declared output.

        Returns:
            The resource, or None if the host cannot supply it

        Raises:
            ResourceUnavailableError: Alternative way for a host to refuse
        """
        pass

    @abstractmethod
    def mark_produced(self, resource: RasterResource, source_path: str) -> None:
        """Acknowledge that resource was produced from source_path."""
        pass


class ExportEnvironment(ABC):
    """Host-side view of one export call."""

    @property
    @abstractmethod
    def input(self) -> Resource:
        """The resource being exported."""
        pass

    @abstractmethod
    def add_output_path(self, relative_path: str) -> str:
        """
        Declare an output file.

        Declaring the same relative path twice must return the same result.

        Returns:
            Absolute path the exporter writes to
        """
        pass


class AssetImporter(ABC):
    """Abstract base class for importers plugged into the host pipeline."""

    id: str = ""
    name: str = ""
    priority: int = 0

    def __init__(self, config: Optional[ImporterConfig] = None):
        """Initialize importer with configuration."""
        self.config = config or ImporterConfig.default()
        self.logger = self._setup_logging()

    def _setup_logging(self) -> logging.Logger:
        """
        Set up logging for the importer.

        The level is applied only by the call that installs the handler, so
        importers created later do not change it for everyone else.
        """
        logger = logging.getLogger("svg_asset_importer")

        if not logger.handlers:
            logger.setLevel(self.config.logging_level)
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    @abstractmethod
    def accepts(self, path: str) -> bool:
        """
        Decide whether this importer claims a source file.

        Must be pure and must not raise for any string.
        """
        pass

    @abstractmethod
    def prepare_import(self, env: ImportEnvironment) -> None:
        """Claim inputs and declare the outputs they will produce."""
        pass

    @abstractmethod
    def import_assets(self, env: ImportEnvironment) -> None:
        """Convert every claimed input into its declared output."""
        pass

    @abstractmethod
    def prepare_export(self, env: ExportEnvironment) -> Optional[str]:
        """Declare the file an export would write, if the input is supported."""
        pass

    @abstractmethod
    def export_assets(self, env: ExportEnvironment) -> Optional[str]:
        """Write the exported file, if the input is supported."""
        pass

    def get_importer_info(self) -> Dict[str, object]:
        """
        Get registration information about this importer.

        Returns:
            Dictionary with importer metadata
        """
        return {
            "id": self.id,
            "name": self.name,
            "priority": self.priority,
            "class": self.__class__.__name__,
        }


class ImporterRegistry:
    """Registry for the importers known to the host."""

    def __init__(self):
        """Initialize empty importer registry."""
        self._importers: Dict[str, AssetImporter] = {}

    def register(self, importer: AssetImporter) -> None:
        """
        Register an importer instance under its id.

        Raises:
            ValueError: If importer is not an AssetImporter or has no id
        """
        if not isinstance(importer, AssetImporter):
            raise ValueError(f"Importer {importer!r} must inherit from AssetImporter")

        if not importer.id:
            raise ValueError(f"Importer {importer.__class__.__name__} has no id")

        self._importers[importer.id] = importer

    def unregister(self, importer_id: str) -> None:
        """Remove a registered importer."""
        if importer_id in self._importers:
            del self._importers[importer_id]

    def get(self, importer_id: str) -> AssetImporter:
        """
        Get a registered importer by id.

        Raises:
            ValueError: If importer is not registered
        """
        if importer_id not in self._importers:
            raise ValueError(f"Importer '{importer_id}' not registered. Available: {list(self._importers.keys())}")

        return self._importers[importer_id]

    def list_importers(self) -> List[AssetImporter]:
        """
        List importers in the order the host consults them.

        Higher priority comes first; equal priorities keep registration order.
        """
        return sorted(self._importers.values(), key=lambda importer: -importer.priority)

    def importers_for(self, path: str) -> List[AssetImporter]:
        """List the importers that accept a source path, in consultation order."""
        return [importer for importer in self.list_importers() if importer.accepts(path)]

    def clear(self) -> None:
        """Remove all registered importers."""
        self._importers.clear()


# Global importer registry instance
importer_registry = ImporterRegistry()
