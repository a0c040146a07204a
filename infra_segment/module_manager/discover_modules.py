from os import walk
from pathlib import Path

from pulumi import log

import infra_segment
from infra_segment.lib.utils import kebab_from_snake
from .lazy_module import LazyModule

_module_container_name = "modules"


def _get_dirs(path: Path) -> list[str]:
    """Get all package directories in ``path`` that don't start with underscore

    :param path: Path to start from
    :return: List of directories in ``path``
    """
    _, dirs, _ = next(walk(path))
    return sorted(d for d in dirs if not d.startswith("_") and (path / d / "__init__.py").exists())


def discover_modules() -> dict[str, dict[str, LazyModule]]:
    """Find all modules

    Assumes that the path to a module is ``infra_segment/modules/{provider}/{module}``.

    The module folder name is converted from snake to kebab case for the nested dictionary key.

    Example::

        # infra_segment
        # └── modules
        #     └── aws
        #         └── subnet_route_table

        {
            "aws": {
                "subnet-route-table": LazyModule(provider='aws', name='subnet_route_table'),
            },
        }

    :return: A mapping of providers to mappings of module names to lazy modules
    """
    package_path = Path(infra_segment.__file__).parent

    log.debug(f"identified package path for `infra_segment` as `{package_path}`")

    providers_path = package_path / _module_container_name

    return {
        provider: {
            kebab_from_snake(module_name): LazyModule(provider, module_name)
            for module_name in _get_dirs(providers_path / provider)
        }
        for provider in _get_dirs(providers_path)
    }
