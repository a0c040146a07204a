from abc import ABC
from typing import Optional

from pulumi import ResourceOptions, Config

from infra_segment.lib.base import BaseModule, ConfigType


class AWSModule(BaseModule, ABC):
    """
    Base class for segment modules using the AWS provider
    """

    provider: str = "aws"

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(name, config, opts)

        self.region: Optional[str] = Config(self.provider).get("region")
