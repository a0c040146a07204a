"""
Network segment definition: a subnet, its route table, the association between them and any static routes.

`define` is a pure function from a `NetworkSegmentSpec` to a `SegmentGraph`. Nothing here talks to a cloud API; the
graph is handed to a materializer (see `infra_segment.lib.aws.segment`) which turns it into Pulumi resources.

Example::

    graph = define(
        NetworkSegmentSpec(
            network_id="vpc-1",
            address_block="10.0.1.0/24",
            zone="us-east-1a",
            routes=[RouteSpec("0.0.0.0/0", TargetKind.INTERNET_GATEWAY, "igw-123")],
        )
    )
    graph.subnet       # Ref(name='Subnet')
    graph.routes[0]    # ResourceDeclaration(kind=<ResourceKind.ROUTE: 'route'>, name='Route0', ...)
"""
import logging
from typing import Iterable, Optional

from .errors import SegmentValidationError
from .graph import Ref, ResourceDeclaration, ResourceGraph
from .labels import to_label_list
from .targets import TARGET_FIELDS, resolve_target
from .types import NetworkSegmentSpec, ResourceKind, RouteSpec, TargetBinding

logger = logging.getLogger(__name__)

SUBNET = "Subnet"
ROUTE_TABLE = "RouteTable"
ASSOCIATION = "SubnetRouteTableAssoc"
ROUTE_PREFIX = "Route"


class SegmentGraph(ResourceGraph):
    """Declaration graph for a single network segment, with handles for further composition"""

    @property
    def subnet(self) -> Ref:
        return Ref(SUBNET)

    @property
    def route_table(self) -> Ref:
        return Ref(ROUTE_TABLE)

    @property
    def association(self) -> Ref:
        return Ref(ASSOCIATION)

    @property
    def routes(self) -> list[ResourceDeclaration]:
        return self.of_kind(ResourceKind.ROUTE)


def define(spec: NetworkSegmentSpec) -> SegmentGraph:
    """
    Declare the subnet, route table, association and routes for a network segment

    Route targets are resolved before anything is declared, so a bad route fails the whole segment.

    :param spec: Segment specification
    :return: The declaration graph
    :raises SegmentValidationError: a required field is missing or empty
    :raises UnsupportedTargetKind: a route has an unknown target kind
    """
    _require(spec.network_id, "network_id")
    _require(spec.address_block, "address_block")
    _require(spec.zone, "zone")

    # snapshot the mutable parts of the spec
    routes = list(spec.routes or [])
    subnet_labels = None if spec.subnet_labels is None else dict(spec.subnet_labels)
    route_table_labels = None if spec.route_table_labels is None else dict(spec.route_table_labels)

    bindings = [resolve_target(route) for route in routes]

    subnet = ResourceDeclaration(
        ResourceKind.SUBNET,
        SUBNET,
        _with_tags(
            {
                "vpc_id": spec.network_id,
                "cidr_block": spec.address_block,
                "availability_zone": spec.zone,
                # instances in this subnet never receive a public IP on launch
                "map_public_ip_on_launch": False,
            },
            subnet_labels,
        ),
    )
    route_table = ResourceDeclaration(
        ResourceKind.ROUTE_TABLE,
        ROUTE_TABLE,
        _with_tags({"vpc_id": spec.network_id}, route_table_labels),
    )
    association = ResourceDeclaration(
        ResourceKind.ROUTE_TABLE_ASSOCIATION,
        ASSOCIATION,
        {"subnet_id": Ref(SUBNET), "route_table_id": Ref(ROUTE_TABLE)},
    )

    logger.debug("defining segment %s in %s with %d route(s)", spec.address_block, spec.zone, len(routes))

    return SegmentGraph(
        [
            subnet,
            route_table,
            association,
            *_declare_routes(zip(routes, bindings), start=0),
        ]
    )


def add_routes(graph: SegmentGraph, routes: Iterable[RouteSpec]) -> SegmentGraph:
    """
    Append routes to an existing segment graph

    New routes are numbered after the routes already in the graph. A route whose destination and target are already
    declared is skipped, so adding the same routes twice is a no-op.

    :param graph: Graph returned by `define`
    :param routes: Routes to add
    :return: A new graph; `graph` is not modified
    """
    routes = list(routes)
    bindings = [resolve_target(route) for route in routes]

    existing = {_route_key(declaration) for declaration in graph.routes}
    new_routes: list[tuple[RouteSpec, TargetBinding]] = []
    for route, binding in zip(routes, bindings):
        key = (route.destination_block, binding)
        if key in existing:
            logger.debug("route to %s via %s already declared, skipping", route.destination_block, binding.value)
            continue
        existing.add(key)
        new_routes.append((route, binding))

    return graph.extend(_declare_routes(new_routes, start=_next_route_index(graph)))


def _declare_routes(
    routes: Iterable[tuple[RouteSpec, TargetBinding]], start: int
) -> list[ResourceDeclaration]:
    return [
        ResourceDeclaration(
            ResourceKind.ROUTE,
            f"{ROUTE_PREFIX}{index}",
            {
                "route_table_id": Ref(ROUTE_TABLE),
                "destination_cidr_block": route.destination_block,
                binding.field: binding.value,
            },
        )
        for index, (route, binding) in enumerate(routes, start=start)
    ]


def _next_route_index(graph: SegmentGraph) -> int:
    indexes = [int(declaration.name.removeprefix(ROUTE_PREFIX)) for declaration in graph.routes]
    return max(indexes) + 1 if indexes else 0


def _route_key(declaration: ResourceDeclaration) -> tuple[str, TargetBinding]:
    properties = declaration.properties
    field = next(f for f in TARGET_FIELDS.values() if f in properties)
    return properties["destination_cidr_block"], TargetBinding(field, properties[field])


def _with_tags(properties: dict, labels: Optional[dict[str, str]]) -> dict:
    tags = to_label_list(labels)
    if tags is not None:
        properties["tags"] = tags
    return properties


def _require(value, name: str) -> None:
    if not isinstance(value, str) or not value:
        raise SegmentValidationError(name)
