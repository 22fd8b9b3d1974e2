"""
In-memory host environments.

A real editor supplies its own ImportEnvironment / ExportEnvironment; these
implementations keep every resource and declaration in plain Python objects,
which is enough to drive an importer outside the editor.
"""

import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from .errors import ResourceUnavailableError
from .importers.base import ImportCandidate, OutputDeclaration, ImportEnvironment, ExportEnvironment
from .resources import RasterResource, Resource


def discover_candidates(source_root: Union[str, Path]) -> List[ImportCandidate]:
    """
    Enumerate every file under source_root as an import candidate.

    Candidates are returned in sorted path order with asset names relative
    to source_root.
    """
    candidates = []
    for dirpath, dirnames, filenames in os.walk(source_root):
        dirnames.sort()
        for filename in sorted(filenames):
            candidates.append(ImportCandidate.from_path(os.path.join(dirpath, filename), source_root))
    return candidates


class MemoryImportEnvironment(ImportEnvironment):
    """Import environment backed by a dictionary of pixmaps."""

    def __init__(self, candidates: Iterable[ImportCandidate],
                 resources: Optional[Dict[str, RasterResource]] = None,
                 denied: Iterable[str] = (),
                 raise_unavailable: bool = False):
        """
        Initialize the environment.

        Args:
            candidates: Files offered to the importer
            resources: Existing pixmaps by name, updated in place on import
            denied: Output names the host refuses to supply
            raise_unavailable: Refuse by raising ResourceUnavailableError instead of returning None
        """
        self.candidates = list(candidates)
        self.resources: Dict[str, RasterResource] = resources if resources is not None else {}
        self.denied = set(denied)
        self.raise_unavailable = raise_unavailable

        self.declarations: List[OutputDeclaration] = []
        self.produced: Dict[str, str] = {}
        self._handled: List[ImportCandidate] = []

    @property
    def input(self) -> List[ImportCandidate]:
        return list(self._handled)

    def handle_all_input(self, predicate: Callable[[str], bool]) -> List[ImportCandidate]:
        claimed = [candidate for candidate in self.candidates if predicate(candidate.path)]
        for candidate in claimed:
            if candidate not in self._handled:
                self._handled.append(candidate)
        return claimed

    def declare_output(self, name: str, source_path: str) -> OutputDeclaration:
        declaration = OutputDeclaration(name=name, source_path=source_path)
        if declaration not in self.declarations:
            self.declarations.append(declaration)
        return declaration

    def resolve_output(self, name: str) -> Optional[RasterResource]:
        declaration = self._find_declaration(name)

        if declaration is None or name in self.denied:
            if self.raise_unavailable:
                raise ResourceUnavailableError(name)
            return None

        if name not in self.resources:
            self.resources[name] = RasterResource(name=name, source_path=declaration.source_path)
        return self.resources[name]

    def mark_produced(self, resource: RasterResource, source_path: str) -> None:
        self.produced[resource.name] = source_path

    def _find_declaration(self, name: str) -> Optional[OutputDeclaration]:
        for declaration in self.declarations:
            if declaration.name == name:
                return declaration
        return None


class MemoryExportEnvironment(ExportEnvironment):
    """Export environment writing below an output directory."""

    def __init__(self, resource: Resource, output_dir: Union[str, Path]):
        self.resource = resource
        self.output_dir = Path(output_dir)
        self.output_paths: List[str] = []

    @property
    def input(self) -> Resource:
        return self.resource

    def add_output_path(self, relative_path: str) -> str:
        output_path = str(self.output_dir / relative_path)
        if output_path not in self.output_paths:
            self.output_paths.append(output_path)
        return output_path
