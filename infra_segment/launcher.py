import logging
import os

from pulumi import get_stack, log, export

from infra_segment.lib.config import get_module_override
from infra_segment.lib.utils import exports_to_dict
from infra_segment.module_manager import module_manager


def run_stack(provider: str, stack_name: str) -> None:
    """Invoke a module with its stack configuration

    :param provider: A provider
    :param stack_name: The stack name
    :return: None
    """

    # stacks named after the segment they build pick their module from config
    module_name = get_module_override() or stack_name

    module = module_manager.get_module(provider, module_name)

    log.debug(f"running module `{module_name}` for stack `{stack_name}`")

    exports = module.run(stack_name)

    export(stack_name, exports_to_dict(exports))


def run_active_stack(provider: str) -> None:
    """Invoke the active module with its configuration

    :param provider: A provider
    :return: None
    """
    stack = get_stack()

    log.debug(f"active stack is `{stack}`")

    run_stack(provider, stack)


# configure logging before the config loaders run, they log on first use
if os.getenv("SEGMENT_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    msg = "segment logging enabled"
    log.debug(msg)
    logging.debug(msg)
