"""
Script discovery in the user's scripts folder.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..models.script import ScriptDescriptor
from ..exceptions import ScriptsFolderNotFoundError
from .parser import parse_script_file

logger = logging.getLogger(__name__)

DEFAULT_SCRIPTS_DIR = ".scanscripts"


def find_scripts(base_dir: Union[str, Path], scripts_dir: str = DEFAULT_SCRIPTS_DIR) -> List[Path]:
    """List every entry of the scripts folder under ``base_dir``.

    Entries are not filtered by extension or type and keep the order the
    filesystem returns them in.
    """
    path = Path(base_dir) / scripts_dir
    if not path.is_dir():
        raise ScriptsFolderNotFoundError(path)

    logger.debug(f"Scripts folder found {path}")
    return list(path.iterdir())


def parse_scripts(scripts: List[Path]) -> List[ScriptDescriptor]:
    """Parse each script header, dropping the ones that fail."""
    parsed_scripts = []
    for script in scripts:
        logger.debug(f"Parsing script {script}")
        descriptor = parse_script_file(script)
        if descriptor is not None:
            parsed_scripts.append(descriptor)
    return parsed_scripts


class ScriptRepository:
    """Loads the descriptors found in a scripts folder."""

    def __init__(self, base_dir: Union[str, Path], scripts_dir: str = DEFAULT_SCRIPTS_DIR):
        self.base_dir = Path(base_dir)
        self.scripts_dir = scripts_dir
        self.outcomes: List[Tuple[Path, Optional[ScriptDescriptor]]] = []

    @property
    def path(self) -> Path:
        return self.base_dir / self.scripts_dir

    def load(self) -> List[ScriptDescriptor]:
        """Discover and parse all scripts. A missing folder is fatal."""
        script_paths = find_scripts(self.base_dir, self.scripts_dir)
        logger.debug(f"Scripts paths \n{script_paths}")

        self.outcomes = []
        for script_path in script_paths:
            self.outcomes.append((script_path, parse_script_file(script_path)))

        loaded = self.descriptors
        logger.debug(f"Loaded {len(loaded)} of {len(script_paths)} scripts from {self.path}")
        return loaded

    @property
    def descriptors(self) -> List[ScriptDescriptor]:
        return [descriptor for _, descriptor in self.outcomes if descriptor is not None]

    @property
    def failed_paths(self) -> List[Path]:
        return [path for path, descriptor in self.outcomes if descriptor is None]
