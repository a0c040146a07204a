from .subnet_route_table import SubnetRouteTable
from .config import SubnetRouteTableArgs, SubnetRouteTableExports
