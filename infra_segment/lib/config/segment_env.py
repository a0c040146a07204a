import logging
import sys
from collections import UserDict
from pathlib import Path
from typing import Optional

import hiyapyco

from infra_segment.lib.utils import run_once

logger = logging.getLogger(__name__)


class SegmentConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")
        self.key = key


class HierarchicalConfig(UserDict):
    """
    HierarchicalConfig is a UserDict that loads configuration from a tiered set of config files.

    Starting at the directory of the entrypoint (the `__main__` module unless one is given), it walks the filesystem
    upwards a configurable number of times to find `Segment.common.yaml` files. The file closest to the entrypoint
    wins.

    The discovered files are merged using a YAML object merger (HiYaPyCo) that supports Jinja2 syntax.

    Example usage:
        from infra_segment.lib.config import get_segment_env

        get_segment_env().get("myconfig", "somedefault")
        get_segment_env().require("myotherconfig")
    """

    def __init__(self, limit=5, filename="Segment.common.yaml", entrypoint: Optional[Path] = None):
        """
        Create a HierarchicalConfig UserDict

        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        :param entrypoint: File to start searching from, defaults to the `__main__` module
        """
        super().__init__()
        self.filename = filename
        configs = list(reversed(self._discover_configs(limit, entrypoint or self._main_entrypoint())))
        logger.debug("Found configs in %s", configs)

        if configs:
            self.data = dict(hiyapyco.load([str(path) for path in configs]) or {})

    def require(self, key: str) -> any:
        """
        Require a key from the configuration and return it. If not found, throw a `SegmentConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if v := self.get(key):
            return v
        else:
            raise SegmentConfigException(key)

    @staticmethod
    def _main_entrypoint() -> Path:
        main_module = sys.modules["__main__"]
        if not hasattr(main_module, "__file__"):
            raise Exception(
                "Can't find __file__ for __main__. HINT: Don't use HierarchicalConfig from a REPL if you are."
            )
        return Path(main_module.__file__)

    def _discover_configs(self, limit: int, entrypoint: Path) -> list[Path]:
        """
        Walk upwards from the entrypoint and collect config files, closest first

        :param limit: Max parent directories to walk
        :param entrypoint: File the search starts from
        :return: Paths of discovered config files
        """
        config_paths = []

        entrypoint = entrypoint.absolute()
        logger.debug("Entrypoint: %s", entrypoint)

        for path in list(entrypoint.parents)[:limit]:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.exists():
                logger.debug("Detected config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # stop at the project root; a config may live there but not above it
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths


@run_once
def get_segment_env() -> HierarchicalConfig:
    """Load and merge the hierarchical configuration once per process"""
    return HierarchicalConfig()
