from .core import (
    get_sysenv,
    get_purpose,
    get_phase,
    get_provider_and_region,
    get_stack_name,
    get_project_name,
    get_tag_namespace,
    get_tag_prefix,
    get_team,
    get_module_override,
)
from .mapper import get_stack_config, config_from_dict
from .segment_env import get_segment_env, HierarchicalConfig, SegmentConfigException
