"""Locate the mods folder of a Prism Launcher instance."""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..exceptions import DiscoveryError, MultipleInstancesError

logger = logging.getLogger(__name__)

# Instances directory relative to the home directory, per sys.platform prefix
INSTANCE_ROOTS = {
    'win32': Path('AppData', 'Roaming', 'PrismLauncher', 'instances'),
    'darwin': Path('Library', 'Application Support', 'PrismLauncher', 'instances'),
    'linux': Path('.local', 'share', 'PrismLauncher', 'instances'),
}


@dataclass(frozen=True)
class InstanceInfo:
    """A launcher instance and the mods folder inside it."""
    name: str
    mods_path: Path


class PrismInstanceLocator:
    """Find launcher instances whose name contains a keyword.

    Instances of the callable can be passed straight to the orchestrator
    as its path resolver.
    """

    def __init__(self, keyword: str = "axolotlsmp", home: Optional[Path] = None,
                 platform: Optional[str] = None):
        self.keyword = keyword.lower()
        self.home = Path(home) if home else Path.home()
        self.platform = platform or sys.platform

    def instances_root(self) -> Path:
        """Return the launcher's instances directory for this platform."""
        for prefix, relative in INSTANCE_ROOTS.items():
            if self.platform.startswith(prefix):
                return self.home / relative
        raise DiscoveryError(f"Unsupported operating system: {self.platform}")

    def find_instances(self) -> List[InstanceInfo]:
        """List matching instances, sorted by name.

        Raises:
            DiscoveryError: The platform is unsupported or the launcher is not installed
        """
        root = self.instances_root()
        if not root.is_dir():
            raise DiscoveryError("Prism Launcher not found. Please ensure it is installed.")

        try:
            with os.scandir(root) as entries:
                names = sorted(entry.name for entry in entries
                               if entry.is_dir() and self.keyword in entry.name.lower())
        except OSError as e:
            raise DiscoveryError(f"Could not read launcher instances at {root}: {e}") from e

        return [InstanceInfo(name=name, mods_path=root / name / 'minecraft' / 'mods')
                for name in names]

    def resolve(self) -> Path:
        """Return the mods folder of the single matching instance.

        Raises:
            DiscoveryError: No instance matches
            MultipleInstancesError: More than one instance matches
        """
        instances = self.find_instances()
        if not instances:
            raise DiscoveryError(f"No instances matching '{self.keyword}' found")
        if len(instances) > 1:
            raise MultipleInstancesError(instances)

        logger.info(f"Using instance {instances[0].name}")
        return instances[0].mods_path

    def __call__(self) -> Path:
        return self.resolve()
