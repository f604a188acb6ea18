"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures operation-scoped metadata that should be included with all
    instrumentation events.

    Attributes:
        request_id: Unique identifier for the current operation.
        group_source: The group source being read (if applicable).
        passwd_source: The passwd source being read (if applicable).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(
            request_id="reparse-1",
            group_source="/etc/group",
            passwd_source="/etc/passwd",
        )
        probe = DefaultParserProbe().with_context(context)
    """

    request_id: str | None = None
    group_source: str | None = None
    passwd_source: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.group_source is not None:
            result["group_source"] = self.group_source
        if self.passwd_source is not None:
            result["passwd_source"] = self.passwd_source
        result.update(self.extra)
        return result

    def with_sources(self, group_source: str, passwd_source: str) -> ObservationContext:
        """Create a new context with the source descriptions set."""
        return ObservationContext(
            request_id=self.request_id,
            group_source=group_source,
            passwd_source=passwd_source,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        new_extra = {**self.extra, **kwargs}
        return ObservationContext(
            request_id=self.request_id,
            group_source=self.group_source,
            passwd_source=self.passwd_source,
            extra=new_extra,
        )
