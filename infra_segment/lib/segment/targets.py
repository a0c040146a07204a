from .errors import SegmentValidationError
from .types import RouteSpec, TargetBinding, TargetKind

TARGET_FIELDS: dict[TargetKind, str] = {
    TargetKind.TRANSIT_GATEWAY: "transit_gateway_id",
    TargetKind.VPC_ENDPOINT: "vpc_endpoint_id",
    TargetKind.INTERNET_GATEWAY: "gateway_id",
    TargetKind.NAT_GATEWAY: "nat_gateway_id",
}
"""Route property that carries the target reference for each target kind"""


def resolve_target(route: RouteSpec) -> TargetBinding:
    """
    Pick the single route property that references the route's next-hop
    :param route: Route to resolve
    :return: (field, value) binding
    :raises UnsupportedTargetKind: `route.target_kind` is not a known target kind
    """
    # raw strings from config files are parsed here, enum members pass through
    kind = TargetKind(route.target_kind)

    if not isinstance(route.destination_block, str) or not route.destination_block:
        raise SegmentValidationError("destination_block")
    if not isinstance(route.target_id, str) or not route.target_id:
        raise SegmentValidationError("target_id")

    return TargetBinding(TARGET_FIELDS[kind], route.target_id)
