from .materialize import materialize, RESOURCE_TYPES
