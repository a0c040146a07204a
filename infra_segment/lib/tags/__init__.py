from ..config import (
    get_tag_prefix,
    get_team,
    get_sysenv,
    get_stack_name,
    get_project_name,
    get_purpose,
    get_phase,
)


def get_tags(service, role, group=None) -> dict:
    """
    Generate the standard tag dict for resources

    example tags:
      subnet-private-us-west-2a subnet:
        Name = subnet-private-us-west-2a
               service-role-group
        segment:sysenv = co-aws-us-west-2-prod-app
        segment:service = subnet
        segment:role = private
        segment:group = us-west-2a
        segment:createdby = pulumi
        segment:team = infrastructure
        segment:project = network
        segment:stack = private-us-west-2a
        segment:purpose = app
        segment:phase = prod

      routetable-private-us-west-2a route table:
        Name = routetable-private-us-west-2a
        segment:service = routetable
        segment:role = private
        segment:group = us-west-2a
        ...

    :param service: This resource's "namespace" (subnet, routetable,...)
    :param role: The role this resource performs within the namespace (public, private, dmz,...)
    :param group: The group this resource belongs to (us-west-2a). Leave unset to use "main".
    :return: Dict of tags
    """

    group_name = "main" if not group else group
    group_suffix = f"-{group}" if group else ""
    tag_prefix = get_tag_prefix()

    return {
        "Name": f"{service}-{role}{group_suffix}",
        f"{tag_prefix}sysenv": get_sysenv(),
        f"{tag_prefix}service": service,
        f"{tag_prefix}role": role,
        f"{tag_prefix}group": group_name,
        f"{tag_prefix}team": get_team(),
        f"{tag_prefix}createdby": "pulumi",
        f"{tag_prefix}stack": get_stack_name(),
        f"{tag_prefix}project": get_project_name(),
        f"{tag_prefix}purpose": get_purpose(),
        f"{tag_prefix}phase": get_phase(),
    }
