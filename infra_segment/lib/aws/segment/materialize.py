from typing import Any, Optional

from pulumi import CustomResource, Resource, ResourceOptions, log
from pulumi_aws import ec2

from infra_segment.lib.segment import Label, Ref, ResourceDeclaration, ResourceGraph, ResourceKind

RESOURCE_TYPES: dict[ResourceKind, type[CustomResource]] = {
    ResourceKind.SUBNET: ec2.Subnet,
    ResourceKind.ROUTE_TABLE: ec2.RouteTable,
    ResourceKind.ROUTE_TABLE_ASSOCIATION: ec2.RouteTableAssociation,
    ResourceKind.ROUTE: ec2.Route,
}


def materialize(
    graph: ResourceGraph,
    prefix: str,
    parent: Resource,
    existing: Optional[dict[str, CustomResource]] = None,
) -> dict[str, CustomResource]:
    """
    Create Pulumi resources for every declaration in a graph
    :param graph: Declaration graph to materialize
    :param prefix: Prepended to each logical name to build the Pulumi resource name
    :param parent: Parent for declarations that don't reference another resource
    :param existing: Resources created by an earlier call, keyed by logical name. These are reused, not re-created.
    :return: All resources for the graph, keyed by logical name
    """
    resources = dict(existing or {})

    for declaration in graph.topological_order():
        if declaration.name in resources:
            continue
        resources[declaration.name] = _materialize_declaration(declaration, prefix, parent, resources)

    return resources


def _materialize_declaration(
    declaration: ResourceDeclaration,
    prefix: str,
    parent: Resource,
    resources: dict[str, CustomResource],
) -> CustomResource:
    resource_type = RESOURCE_TYPES[declaration.kind]
    name = f"{prefix}-{declaration.name}"

    log.debug(f"materializing `{declaration.name}` as {resource_type.__name__} `{name}`")

    # parent each resource to the first resource it depends on, like routes under their route table
    refs = declaration.references
    resource_parent = resources[refs[0].name] if refs else parent

    return resource_type(
        name,
        **{key: _resolve(value, resources) for key, value in declaration.properties.items()},
        opts=ResourceOptions(parent=resource_parent),
    )


def _resolve(value: Any, resources: dict[str, CustomResource]) -> Any:
    if isinstance(value, Ref):
        return resources[value.name].id
    elif isinstance(value, list) and all(isinstance(v, Label) for v in value):
        # pulumi_aws takes tags as a mapping
        return {label.key: label.value for label in value}
    else:
        return value
