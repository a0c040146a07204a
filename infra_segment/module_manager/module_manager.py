from pulumi import log

from .discover_modules import discover_modules
from .lazy_module import LazyModule


class _ModuleManager:
    """Stores and hands out segment modules."""

    def __init__(self):
        """Initialize the module manager

        The ``modules`` instance attribute would look like::

            {
                "aws": {
                    "subnet-route-table": LazyModule(provider='aws', name='subnet_route_table'),
                }
            }
        """
        self.modules = discover_modules()

        log.debug(f"discovered modules `{self.modules}`")

    def get_module(self, provider: str, module_name: str) -> LazyModule:
        """Returns the lazy module without importing it.

        :param provider: Provider name
        :param module_name: Module name in kebab case
        :return: A LazyModule
        """
        try:
            lazy_module = self.modules[provider][module_name]

            log.debug(f"accessing module `{lazy_module}`")

            return lazy_module
        except KeyError:
            raise ModuleNotFoundError(f"module `{module_name}` was not found under provider `{provider}`")


module_manager = _ModuleManager()
