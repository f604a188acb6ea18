"""Protocol for account directory observability.

Defines the interface for domain probes that capture application-level
events for snapshot loading.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class AccountDirectoryProbe(Protocol):
    """Domain probe for account directory operations."""

    def snapshot_loaded(self, group_count: int, user_count: int) -> None:
        """Record that a new snapshot replaced the previous one."""
        ...

    def source_unavailable(self, source: str, error: str) -> None:
        """Record that an account source could not be read."""
        ...

    def reparse_failed(self, error: str) -> None:
        """Record that a reparse failed on malformed data."""
        ...

    def with_context(self, context: ObservationContext) -> AccountDirectoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAccountDirectoryProbe:
    """Default implementation of AccountDirectoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAccountDirectoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultAccountDirectoryProbe(logger=self._logger, context=context)

    def snapshot_loaded(self, group_count: int, user_count: int) -> None:
        """Record that a new snapshot replaced the previous one."""
        self._logger.info(
            "account_snapshot_loaded",
            group_count=group_count,
            user_count=user_count,
            **self._get_context_kwargs(),
        )

    def source_unavailable(self, source: str, error: str) -> None:
        """Record that an account source could not be read."""
        self._logger.error(
            "account_source_unavailable",
            source=source,
            error=error,
            **self._get_context_kwargs(),
        )

    def reparse_failed(self, error: str) -> None:
        """Record that a reparse failed on malformed data."""
        self._logger.error(
            "account_reparse_failed",
            error=error,
            **self._get_context_kwargs(),
        )
