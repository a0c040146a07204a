def kebab_from_snake(v: str) -> str:
    """Convert a python module name to the kebab case used for stack names

    :param v: String in snake case (``subnet_route_table``)
    :return: String in kebab case (``subnet-route-table``)
    """
    return v.replace("_", "-")
