"""Configuration constants and .env loading.

python-dotenv loads a .env file on import; every value can be overridden with
an environment variable.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _default_root() -> Path:
    if os.name == "nt":
        return Path(r"C:\Users\Public\MechSim")
    return Path.home() / ".mechsim"


MECHSIM_ROOT = Path(os.getenv("MECHSIM_ROOT", str(_default_root())))
ASSEMBLY_DIR = Path(os.getenv("MRR_ASSEMBLY_DIR", str(MECHSIM_ROOT / "assemblies")))
LOG_DIR = Path(os.getenv("MRR_LOG_DIR", str(MECHSIM_ROOT / "log")))

# Exported models are in a larger unit than the viewer's scene.
MESH_SCALE = float(os.getenv("MRR_MESH_SCALE", str(1.0 / 6.0)))

LOG_LEVEL = os.getenv("MRR_LOG_LEVEL", "INFO").upper()

MRR_FILE_EXTENSION = ".mrr"


def resolve_assembly_path(name: str) -> Path:
    """Find an assembly file given a path or a bare name.

    An existing path is returned as is. Otherwise a relative name is looked up
    in ASSEMBLY_DIR, with the .mrr extension added when it has none.
    """
    path = Path(name)
    if path.exists() or path.is_absolute():
        return path
    if not path.suffix:
        path = path.with_suffix(MRR_FILE_EXTENSION)
    return ASSEMBLY_DIR / path
