from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .errors import UnsupportedTargetKind


class TargetKind(Enum):
    """Category of next-hop a route points to"""

    TRANSIT_GATEWAY = "transit-gateway"
    VPC_ENDPOINT = "vpc-endpoint"
    INTERNET_GATEWAY = "internet-gateway"
    NAT_GATEWAY = "nat-gateway"

    @classmethod
    def _missing_(cls, value):
        # older stack configs still say `tgw`
        if value == "tgw":
            return cls.TRANSIT_GATEWAY
        raise UnsupportedTargetKind(value, [kind.value for kind in cls])


class ResourceKind(Enum):
    SUBNET = "subnet"
    ROUTE_TABLE = "route-table"
    ROUTE_TABLE_ASSOCIATION = "route-table-association"
    ROUTE = "route"


class Label(NamedTuple):
    key: str
    value: str


class TargetBinding(NamedTuple):
    field: str
    """Name of the route property that holds the target reference"""

    value: str


@dataclass(frozen=True)
class RouteSpec:
    destination_block: str
    """Destination CIDR block (0.0.0.0/0)"""

    target_kind: TargetKind
    """What kind of next-hop is `target_id`?"""

    target_id: str
    """Identifier of the next-hop (igw-..., nat-..., tgw-..., vpce-...)"""


@dataclass(frozen=True)
class NetworkSegmentSpec:
    network_id: str
    """ID of the VPC the subnet is created in"""

    address_block: str
    """Subnet CIDR block (10.5.22.0/24). Validated by the provider, not here."""

    zone: str
    """Availability zone for the subnet"""

    routes: Optional[list[RouteSpec]] = None
    """Static routes to add to the route table, in order. Unset or empty means no routes beyond the defaults."""

    subnet_labels: Optional[dict[str, str]] = None
    """Tags for the subnet. Unset means no tags, which is not the same as an empty tag set."""

    route_table_labels: Optional[dict[str, str]] = None
    """Tags for the route table"""
