from dataclasses import replace
from typing import Iterable, Optional

from pulumi import ResourceOptions, log
from pulumi_aws import ec2

from infra_segment.lib.aws.base import AWSModule
from infra_segment.lib.aws.segment import materialize
from infra_segment.lib.segment import (
    SegmentGraph,
    RouteSpec,
    define,
    add_routes,
    SUBNET,
    ROUTE_TABLE,
    ASSOCIATION,
)
from infra_segment.lib.tags import get_tags
from .config import SubnetRouteTableArgs, SubnetRouteTableExports


class SubnetRouteTable(AWSModule):
    """
    A subnet with its own route table and a set of static routes

    Other modules can keep composing on top of the segment through `subnet`, `route_table` and `add_routes`.
    """

    def __init__(self, name: str, config: SubnetRouteTableArgs, opts: ResourceOptions = None):
        super().__init__(name, config, opts)

        self.graph: Optional[SegmentGraph] = None
        self.resources: dict = {}

    def build(self, config: SubnetRouteTableArgs) -> SubnetRouteTableExports:
        if config.standard_tags:
            config = self._with_standard_tags(config)

        self.graph = define(config)

        if self.region and not config.zone.startswith(self.region):
            log.warn(f"availability zone `{config.zone}` is not in region `{self.region}`", self)

        self.resources = materialize(self.graph, self.module_name, self)

        return self._exports()

    @property
    def subnet(self) -> ec2.Subnet:
        return self.resources[SUBNET]

    @property
    def route_table(self) -> ec2.RouteTable:
        return self.resources[ROUTE_TABLE]

    @property
    def routes(self) -> list[ec2.Route]:
        return [self.resources[declaration.name] for declaration in self.graph.routes]

    def add_routes(self, routes: Iterable[RouteSpec]) -> list[ec2.Route]:
        """
        Add routes to the segment's route table after the module has run
        :param routes: Routes to add; routes that already exist are skipped
        :return: The newly created routes
        """
        if self.graph is None:
            raise RuntimeError(f"module `{self.module_name}` must run before routes can be added")

        known = set(self.resources)
        self.graph = add_routes(self.graph, routes)
        self.resources = materialize(self.graph, self.module_name, self, existing=self.resources)

        return [self.resources[d.name] for d in self.graph.routes if d.name not in known]

    def _exports(self) -> SubnetRouteTableExports:
        return SubnetRouteTableExports(
            subnet_id=self.subnet.id,
            route_table_id=self.route_table.id,
            association_id=self.resources[ASSOCIATION].id,
            route_ids=[route.id for route in self.routes],
        )

    @staticmethod
    def _with_standard_tags(config: SubnetRouteTableArgs) -> SubnetRouteTableArgs:
        role = config.purpose or "segment"
        return replace(
            config,
            subnet_labels={
                **get_tags("subnet", role, config.zone),
                **(config.subnet_labels or {}),
            },
            route_table_labels={
                **get_tags("routetable", role, config.zone),
                **(config.route_table_labels or {}),
            },
        )
