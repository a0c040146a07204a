from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping

from .errors import GraphError
from .types import Label, ResourceKind


@dataclass(frozen=True)
class Ref:
    """Identity of another declaration in the same graph (the `.ref` / `.id` of the resource it names)"""

    name: str


@dataclass(frozen=True)
class ResourceDeclaration:
    kind: ResourceKind
    name: str
    """Logical name, unique within a graph and stable across synthesis"""

    properties: Mapping[str, Any] = field(default_factory=dict)

    @property
    def references(self) -> list[Ref]:
        return [value for value in self.properties.values() if isinstance(value, Ref)]


class ResourceGraph:
    """
    Ordered set of resource declarations

    Edges are not stored. They are derived from the `Ref` values in each declaration's properties, so the only way
    to depend on another resource is to reference its identity.
    """

    def __init__(self, declarations: Iterable[ResourceDeclaration] = ()):
        self._nodes: dict[str, ResourceDeclaration] = {}

        for declaration in declarations:
            if declaration.name in self._nodes:
                raise GraphError(f"duplicate declaration `{declaration.name}`")
            self._nodes[declaration.name] = declaration

        for declaration in self._nodes.values():
            for ref in declaration.references:
                if ref.name not in self._nodes:
                    raise GraphError(f"`{declaration.name}` references unknown declaration `{ref.name}`")

    def __iter__(self) -> Iterator[ResourceDeclaration]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: str) -> bool:
        return name in self._nodes

    def __getitem__(self, name: str) -> ResourceDeclaration:
        return self._nodes[name]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ResourceGraph):
            return NotImplemented
        return self.nodes == other.nodes

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._nodes)})"

    @property
    def nodes(self) -> tuple[ResourceDeclaration, ...]:
        return tuple(self._nodes.values())

    @property
    def edges(self) -> list[tuple[str, str]]:
        """(dependent, dependency) pairs, in declaration order"""
        return [(declaration.name, ref.name) for declaration in self for ref in declaration.references]

    def dependencies(self, name: str) -> list[str]:
        return [ref.name for ref in self._nodes[name].references]

    def of_kind(self, kind: ResourceKind) -> list[ResourceDeclaration]:
        return [declaration for declaration in self if declaration.kind == kind]

    def topological_order(self) -> list[ResourceDeclaration]:
        """
        Order declarations so that every declaration comes after the ones it references

        Ties keep declaration order, so the result is deterministic.
        """
        ordered: list[ResourceDeclaration] = []
        placed: set[str] = set()
        pending = list(self._nodes.values())

        while pending:
            ready = [d for d in pending if all(ref.name in placed for ref in d.references)]
            if not ready:
                raise GraphError(f"reference cycle between {[d.name for d in pending]}")
            for declaration in ready:
                ordered.append(declaration)
                placed.add(declaration.name)
            pending = [d for d in pending if d.name not in placed]

        return ordered

    def extend(self, declarations: Iterable[ResourceDeclaration]):
        """Return a new graph of the same type with `declarations` appended"""
        return type(self)([*self._nodes.values(), *declarations])

    def to_dict(self) -> dict:
        return {
            "resources": [
                {
                    "kind": declaration.kind.value,
                    "name": declaration.name,
                    "properties": {k: _plain(v) for k, v in declaration.properties.items()},
                }
                for declaration in self
            ],
            "edges": [list(edge) for edge in self.edges],
        }


def _plain(value: Any) -> Any:
    if isinstance(value, Ref):
        return {"ref": value.name}
    elif isinstance(value, Label):
        return {"key": value.key, "value": value.value}
    elif isinstance(value, list):
        return [_plain(v) for v in value]
    elif isinstance(value, Enum):
        return value.value
    else:
        return value
