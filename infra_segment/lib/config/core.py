from typing import Optional

from pulumi import Config, get_stack, get_project

from .segment_env import get_segment_env


def get_tag_namespace() -> str:
    """Prefix namespace for the standard tags. This is not the Pulumi config namespace."""
    return get_segment_env().get("tag_namespace", "segment")


def get_tag_prefix() -> str:
    return f"{get_tag_namespace()}{get_segment_env().get('tag_separator', ':')}"


def get_team() -> str:
    return get_segment_env().require("team")


def get_purpose() -> str:
    return get_segment_env().require("purpose")


def get_phase() -> str:
    return get_segment_env().require("phase")


def get_provider_and_region() -> tuple[str, str]:
    """
    Retrieve the provider and region for this program
    :return: (provider, region)
    """
    aws_region = Config("aws").get("region")

    if aws_region:
        return "aws", aws_region
    else:
        raise Exception("Unknown provider! Set `aws:region` in the stack config.")


def get_sysenv() -> str:
    """
    Returns the SysEnv name for this program
    SysEnvs are named `{namespace}-{provider}-{region}-{purpose}-{phase}`.

    An example SysEnv name is `co-aws-us-west-2-sandbox-dev`

    Can be overridden by setting `sysenv` in your Segment.common.yaml

    :return: SysEnv name
    """
    if config_sysenv := get_segment_env().get("sysenv"):
        return config_sysenv

    namespace = get_segment_env().require("namespace")
    provider, region = get_provider_and_region()
    return f"{namespace}-{provider}-{region}-{get_purpose()}-{get_phase()}"


def get_module_override() -> Optional[str]:
    """
    Retrieve the module override for the current stack (`segment:module: subnet-route-table`)

    Lets a stack named after the segment it builds (`private-us-west-2a`) run a module with a different name.
    """
    return Config("segment").get("module")


def get_stack_name() -> str:
    return get_stack()


def get_project_name() -> str:
    return get_project()
