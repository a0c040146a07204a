# This file is boilerplate. Copy it to any new sysenv you create.
# It calls the launcher that ships with `infra_segment`, which picks the module to run from the stack name
# (or from `segment:module` in the stack config).
from infra_segment.launcher import run_active_stack

run_active_stack("aws")
