"""Update graph models and lookup accessors."""

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import semver
from pydantic import BaseModel, Field, ValidationError

from ..errors import EmptyGraph, GraphDataError, NodeNotFound
from ..utils.versions import max_version


class Risk(BaseModel):
    """Risk disclosed before a conditional edge may be taken."""

    url: str
    name: str
    message: str


class Edge(BaseModel):
    """Version-keyed edge inside a conditional edge group."""

    from_version: str = Field(alias="from")
    to_version: str = Field(alias="to")

    class Config:
        populate_by_name = True


class ConditionalEdge(BaseModel):
    """Group of edges gated by the same set of risks."""

    edges: List[Edge] = []
    risks: List[Risk] = []


class Node(BaseModel):
    """A single release in the update graph."""

    version: str
    payload: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


@dataclass
class ConditionalTarget:
    """Target version reachable over a conditional edge, with its risks."""

    to_version: str
    risks: List[Risk] = field(default_factory=list)


class Graph(BaseModel):
    """Update graph as published by the upgrade service.

    Unconditional edges are index pairs into ``nodes`` while conditional edges
    are keyed by version string. All translation between the two addressing
    schemes goes through the accessors below.
    """

    nodes: List[Node] = []
    edges: List[Tuple[int, int]] = []
    conditional_edges: List[ConditionalEdge] = Field(default=[], alias="conditionalEdges")

    class Config:
        populate_by_name = True
        frozen = True

    @classmethod
    def from_json(cls, data: str) -> "Graph":
        """Parse graph JSON, raising ``GraphDataError`` on malformed input."""
        try:
            raw = json.loads(data)
        except json.JSONDecodeError as e:
            raise GraphDataError(f"Graph data is not valid JSON: {e}") from e

        if not isinstance(raw, dict):
            raise GraphDataError("Graph data must be a JSON object")

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise GraphDataError(f"Graph data does not match the expected shape: {e}") from e

    def find_node_index_by_version(self, version: str) -> Optional[int]:
        """Return the index of the first node with ``version``, if any."""
        for index, node in enumerate(self.nodes):
            if node.version == version:
                return index
        return None

    def node_index(self, version: str) -> int:
        """Return the index of the first node with ``version`` or raise ``NodeNotFound``."""
        index = self.find_node_index_by_version(version)
        if index is None:
            raise NodeNotFound(version=version)
        return index

    def node_at(self, index: int) -> Node:
        """Return the node at ``index`` or raise ``NodeNotFound``."""
        if not 0 <= index < len(self.nodes):
            raise NodeNotFound(index=index)
        return self.nodes[index]

    def head_version(self) -> semver.Version:
        """Return the newest version known to the graph."""
        if not self.nodes:
            raise EmptyGraph()
        return max_version(node.version for node in self.nodes)

    def conditional_edges_from(self, from_version: str) -> List[ConditionalTarget]:
        """List every conditional target of ``from_version`` with its gating risks."""
        targets = []
        for group in self.conditional_edges:
            for edge in group.edges:
                if edge.from_version == from_version:
                    targets.append(ConditionalTarget(edge.to_version, list(group.risks)))
        return targets

    def conditional_risks(self, from_version: str, to_version: str) -> List[Risk]:
        """Collect the risks of every conditional edge ``from_version -> to_version``."""
        risks = []
        for group in self.conditional_edges:
            for edge in group.edges:
                if edge.from_version == from_version and edge.to_version == to_version:
                    risks.extend(group.risks)
        return risks

    def unconditional_targets(self, node_index: int) -> List[str]:
        """Versions reachable from ``node_index`` over one unconditional edge."""
        return [
            self.node_at(target).version for source, target in self.edges if source == node_index
        ]

    def has_direct_unconditional_edge(self, from_index: int, to_index: int) -> bool:
        """Check whether an unconditional edge ``from_index -> to_index`` exists."""
        return any(source == from_index and target == to_index for source, target in self.edges)
