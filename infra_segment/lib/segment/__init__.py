from .errors import SegmentError, SegmentValidationError, UnsupportedTargetKind, GraphError
from .graph import Ref, ResourceDeclaration, ResourceGraph
from .labels import to_label_list
from .segment import (
    SegmentGraph,
    define,
    add_routes,
    SUBNET,
    ROUTE_TABLE,
    ASSOCIATION,
    ROUTE_PREFIX,
)
from .targets import resolve_target, TARGET_FIELDS
from .types import (
    NetworkSegmentSpec,
    RouteSpec,
    TargetKind,
    TargetBinding,
    ResourceKind,
    Label,
)
