"""Host-side ownership of the currently imported assembly.

An import decodes a file into a brand-new assembly and then swaps it in as a
whole. The previously held assembly is discarded, never patched.
"""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

from jax_mrr import config
from jax_mrr.core import Assembly
from jax_mrr.io import MrrError, load_assembly
from jax_mrr.mesh import MeshGeometry, build_meshes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssemblyMetadata:
    """Where an assembly came from."""
    file_path: Path

    @property
    def name(self) -> str:
        """Display name: the file name without its extension."""
        return self.file_path.stem or "Unnamed"


@dataclass(frozen=True)
class LoadedAssembly:
    """An assembly together with its meshes and metadata."""
    assembly: Assembly
    meshes: Tuple[MeshGeometry, ...]
    metadata: AssemblyMetadata


@dataclass
class AssemblySession:
    """Holds at most one LoadedAssembly and replaces it atomically."""
    mesh_scale: float = config.MESH_SCALE
    _current: Optional[LoadedAssembly] = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def current(self) -> Optional[LoadedAssembly]:
        return self._current

    def import_file(self, path: Union[str, Path]) -> LoadedAssembly:
        """Load *path* and publish it as the current assembly.

        On failure the error is logged and re-raised, and the previously
        held assembly stays current.
        """
        path = Path(path)
        logger.info("Importing assembly from %s", path)
        try:
            assembly = load_assembly(path)
            meshes = build_meshes(assembly, self.mesh_scale)
        except MrrError as exc:
            logger.error("Import of %s failed, %s: %s", path, exc.user_message, exc)
            raise

        loaded = LoadedAssembly(
            assembly=assembly,
            meshes=meshes,
            metadata=AssemblyMetadata(file_path=path),
        )
        with self._lock:
            self._current = loaded
        logger.info(
            "Imported '%s': %d joints, %d parts, %d bodies",
            loaded.metadata.name,
            len(assembly.joints),
            len(assembly.parts),
            assembly.body_count,
        )
        return loaded

    def clear(self) -> None:
        """Discard the current assembly."""
        with self._lock:
            previous, self._current = self._current, None
        if previous is not None:
            logger.info("Removed assembly '%s'", previous.metadata.name)
