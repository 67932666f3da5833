"""Upgrade path result models."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .graph import Risk


class UpgradeResult(BaseModel):
    """A release version and the image needed to reach it."""

    version: str
    image: str


class UpgradePathStatus(str, Enum):
    """Outcome of a resolution."""

    FOUND = "found"
    NOT_FOUND = "not_found"


class EventKind(str, Enum):
    """Kinds of diagnostic events recorded while resolving."""

    CANDIDATES = "candidates"
    STEPPING_STONE = "stepping_stone"
    RISK = "risk"
    PRUNED = "pruned"
    MISSING_PAYLOAD = "missing_payload"
    RESOLVED = "resolved"


class DiagnosticEvent(BaseModel):
    """Structured diagnostic emitted alongside log output."""

    kind: EventKind
    message: str
    data: Dict[str, str] = Field(default_factory=dict)


class UpgradePath(BaseModel):
    """Resolved upgrade path between two versions.

    ``status`` distinguishes a resolved path, which may legitimately hold no
    images, from the case where no conditional edge leaves ``from_version``.
    """

    status: UpgradePathStatus
    from_version: str
    to_version: str
    stepping_stone: Optional[str] = None
    head: Optional[str] = None
    images: List[UpgradeResult] = []
    risks: List[Risk] = []
    events: List[DiagnosticEvent] = []

    @classmethod
    def not_found(
        cls, from_version: str, to_version: str, events: Optional[List[DiagnosticEvent]] = None
    ) -> "UpgradePath":
        """Build the outcome for a start version with no conditional edges."""
        return cls(
            status=UpgradePathStatus.NOT_FOUND,
            from_version=from_version,
            to_version=to_version,
            events=events or [],
        )

    @property
    def found(self) -> bool:
        """Whether a path was resolved."""
        return self.status == UpgradePathStatus.FOUND

    @property
    def versions(self) -> List[str]:
        """Resolved versions in upgrade order."""
        return [result.version for result in self.images]

    def as_results(self) -> List[UpgradeResult]:
        """Flatten to the legacy result list.

        A path that was not found becomes a single record with empty version and
        image, which is what older consumers check for.
        """
        if not self.found:
            return [UpgradeResult(version="", image="")]
        return list(self.images)

    def events_of(self, kind: EventKind) -> List[DiagnosticEvent]:
        """Return recorded events of a given kind."""
        return [event for event in self.events if event.kind == kind]
