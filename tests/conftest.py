"""Test configuration and fixtures."""

import json
from typing import Any, Dict

import pytest

from upgradepath.model.graph import Graph


@pytest.fixture
def sample_graph_data() -> Dict[str, Any]:
    """Graph document in the shape published by the upgrade service.

    Indices:
        0 4.13.0, 1 4.13.5, 2 4.14.0, 3 4.14.1, 4 4.14.2, 5 4.14.3, 6 4.14.4 (head)
    """
    return {
        "nodes": [
            {
                "version": "4.13.0",
                "payload": "quay.io/openshift-release-dev/ocp-release@sha256:1300",
                "metadata": {"io.openshift.upgrades.graph.release.channels": "stable-4.13"},
            },
            {
                "version": "4.13.5",
                "payload": "quay.io/openshift-release-dev/ocp-release@sha256:1305",
            },
            {
                "version": "4.14.0",
                "payload": "quay.io/openshift-release-dev/ocp-release@sha256:1400",
            },
            {
                "version": "4.14.1",
                "payload": "quay.io/openshift-release-dev/ocp-release@sha256:1401",
            },
            {
                "version": "4.14.2",
                "payload": "quay.io/openshift-release-dev/ocp-release@sha256:1402",
            },
            {
                "version": "4.14.3",
                "payload": "quay.io/openshift-release-dev/ocp-release@sha256:1403",
            },
            {
                "version": "4.14.4",
                "payload": "quay.io/openshift-release-dev/ocp-release@sha256:1404",
            },
        ],
        "edges": [[0, 1], [1, 2], [2, 3], [3, 4], [3, 5], [4, 5], [5, 6]],
        "conditionalEdges": [
            {
                "edges": [{"from": "4.13.5", "to": "4.14.0"}],
                "risks": [
                    {
                        "url": "https://issues.example.com/OCPBUGS-1",
                        "name": "DNSMasqRestart",
                        "message": "Clusters using dnsmasq may lose name resolution.",
                        "matchingRules": [{"type": "Always"}],
                    }
                ],
            },
            {
                "edges": [
                    {"from": "4.13.5", "to": "4.14.1"},
                    {"from": "4.13.0", "to": "4.14.1"},
                ],
                "risks": [
                    {
                        "url": "https://issues.example.com/OCPBUGS-2",
                        "name": "ExamplePauseRisk",
                        "message": "Paused machine config pools block the upgrade.",
                    }
                ],
            },
        ],
    }


@pytest.fixture
def sample_graph(sample_graph_data) -> Graph:
    """Parsed sample graph."""
    return Graph.from_json(json.dumps(sample_graph_data))


@pytest.fixture
def trivial_graph() -> Graph:
    """Two releases joined by both an unconditional and a risk-free conditional edge."""
    return Graph.model_validate(
        {
            "nodes": [
                {"version": "4.10.0", "payload": "quay.io/release@sha256:410"},
                {"version": "4.11.0", "payload": "quay.io/release@sha256:411"},
            ],
            "edges": [[0, 1]],
            "conditionalEdges": [
                {"edges": [{"from": "4.10.0", "to": "4.11.0"}], "risks": []},
            ],
        }
    )
