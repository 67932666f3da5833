"""Upgrade path resolution over an update graph."""

from typing import List

from ..model.graph import Graph
from ..model.upgrade import (
    DiagnosticEvent,
    EventKind,
    UpgradePath,
    UpgradePathStatus,
    UpgradeResult,
)
from ..utils.logger import get_logger
from ..utils.versions import parse_version

logger = get_logger(__name__)


def _event(kind: EventKind, text: str, **data: str) -> DiagnosticEvent:
    return DiagnosticEvent(kind=kind, message=text, data=data)


class UpgradePathResolver:
    """Computes the release images needed to move between two versions.

    The furthest release reachable over a conditional edge from the start
    version is used as the stepping stone. Its unconditional successors form the
    intermediate set, minus any release that can jump straight to the newest
    version in the graph.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    def resolve(self, from_version: str, to_version: str) -> UpgradePath:
        """Resolve the upgrade path from ``from_version`` to ``to_version``."""
        events: List[DiagnosticEvent] = []
        self._validate_versions(from_version, to_version)

        candidates = self.graph.conditional_edges_from(from_version)
        logger.info(f"conditional candidates from {from_version}: {len(candidates)}")
        events.append(
            _event(
                EventKind.CANDIDATES,
                f"conditional candidates from {from_version}: {len(candidates)}",
                count=str(len(candidates)),
                versions=",".join(c.to_version for c in candidates),
            )
        )
        if not candidates:
            logger.info(f"No conditional edges leave {from_version}, no upgrade path")
            return UpgradePath.not_found(from_version, to_version, events=events)

        for candidate in candidates:
            for risk in candidate.risks:
                logger.debug(f"candidate {candidate.to_version} gated by risk {risk.name}")

        ordered = sorted((c.to_version for c in candidates), key=parse_version)
        last_version = ordered[-1]
        events.append(
            _event(EventKind.STEPPING_STONE, f"stepping stone: {last_version}", version=last_version)
        )

        pivot = self.graph.find_node_index_by_version(last_version)
        if pivot is None:
            logger.debug(f"{last_version} is not a graph node, pivoting on {to_version}")
            pivot = self.graph.node_index(to_version)

        head = str(self.graph.head_version())
        logger.debug(f"graph head: {head}")

        upgrade_list = self.graph.unconditional_targets(pivot)
        upgrade_list.append(last_version)
        logger.debug(f"upgrade list {upgrade_list}")

        # Risks are disclosed for the edge actually taken, they never alter the path
        risks = self.graph.conditional_risks(from_version, last_version)
        for risk in risks:
            logger.info(f"risk name    : {risk.name}")
            logger.info(f"risk message : {risk.message}")
            events.append(
                _event(
                    EventKind.RISK,
                    f"{risk.name}: {risk.message}",
                    name=risk.name,
                    message=risk.message,
                    url=risk.url,
                )
            )

        remaining = self._prune(upgrade_list, head, events)
        unique = list(dict.fromkeys(remaining))
        images = self._lookup_images(unique, events)

        resolved = [result.version for result in images]
        logger.info(f"upgrade list {resolved}")
        events.append(
            _event(EventKind.RESOLVED, f"upgrade list {resolved}", versions=",".join(resolved))
        )

        return UpgradePath(
            status=UpgradePathStatus.FOUND,
            from_version=from_version,
            to_version=to_version,
            stepping_stone=last_version,
            head=head,
            images=images,
            risks=risks,
            events=events,
        )

    def _validate_versions(self, from_version: str, to_version: str) -> None:
        """Parse every version the resolution may touch."""
        parse_version(from_version)
        parse_version(to_version)
        for node in self.graph.nodes:
            parse_version(node.version)
        for group in self.graph.conditional_edges:
            for edge in group.edges:
                parse_version(edge.from_version)
                parse_version(edge.to_version)

    def _prune(
        self, upgrade_list: List[str], head: str, events: List[DiagnosticEvent]
    ) -> List[str]:
        """Drop versions with a direct unconditional edge to the head.

        Only one hop is considered. A version with no node has no edges and is
        kept; it yields no image later.
        """
        head_index = self.graph.node_index(head)
        remaining = []
        for version in upgrade_list:
            index = self.graph.find_node_index_by_version(version)
            if index is not None and self.graph.has_direct_unconditional_edge(index, head_index):
                logger.debug(f"{version} upgrades directly to {head}, excluding")
                events.append(_event(EventKind.PRUNED, f"excluded {version}", version=version))
                continue
            remaining.append(version)
        return remaining

    def _lookup_images(
        self, versions: List[str], events: List[DiagnosticEvent]
    ) -> List[UpgradeResult]:
        """Map versions to release images, sorted by version."""
        wanted = set(versions)
        seen = set()
        results = []
        for node in self.graph.nodes:
            if node.version not in wanted or node.version in seen:
                continue
            seen.add(node.version)
            if node.payload is not None:
                results.append(UpgradeResult(version=node.version, image=node.payload))
            else:
                logger.info(f"no image found for {node.version}")
                events.append(
                    _event(
                        EventKind.MISSING_PAYLOAD,
                        f"no image found for {node.version}",
                        version=node.version,
                    )
                )
        results.sort(key=lambda result: parse_version(result.version))
        return results


def resolve(graph: Graph, from_version: str, to_version: str) -> UpgradePath:
    """Resolve an upgrade path; see ``UpgradePathResolver.resolve``."""
    return UpgradePathResolver(graph).resolve(from_version, to_version)
