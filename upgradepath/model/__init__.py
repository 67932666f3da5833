"""Data models for upgradepath."""

from .config import ToolConfig
from .graph import ConditionalEdge, ConditionalTarget, Edge, Graph, Node, Risk
from .upgrade import DiagnosticEvent, EventKind, UpgradePath, UpgradePathStatus, UpgradeResult

__all__ = [
    "ToolConfig",
    "ConditionalEdge",
    "ConditionalTarget",
    "Edge",
    "Graph",
    "Node",
    "Risk",
    "DiagnosticEvent",
    "EventKind",
    "UpgradePath",
    "UpgradePathStatus",
    "UpgradeResult",
]
