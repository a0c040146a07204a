from dataclasses import dataclass
from typing import Optional

from pulumi import Output

from infra_segment.lib.segment import NetworkSegmentSpec


@dataclass(frozen=True)
class SubnetRouteTableArgs(NetworkSegmentSpec):
    purpose: Optional[str] = None
    """Purpose of this subnet (public, private, lb, dmz,...). Used as the role in standard tags."""

    standard_tags: bool = False
    """Merge the standard segment tags under `subnet_labels` and `route_table_labels`?"""


@dataclass
class SubnetRouteTableExports:
    subnet_id: Output[str]
    route_table_id: Output[str]
    association_id: Output[str]
    route_ids: list[Output[str]]
