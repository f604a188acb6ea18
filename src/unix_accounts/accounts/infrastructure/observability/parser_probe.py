"""Protocol for account file parser observability.

Defines the interface for domain probes that capture parser events such as
skipped comments, defaulted numeric fields and malformed records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class ParserProbe(Protocol):
    """Domain probe for account file parsing."""

    def comment_skipped(self, file_kind: str) -> None:
        """Record that a comment line was skipped."""
        ...

    def numeric_field_defaulted(
        self,
        file_kind: str,
        record_index: int,
        field: str,
        value: str,
    ) -> None:
        """Record that a non-numeric ID field was stored as 0."""
        ...

    def malformed_record(
        self,
        file_kind: str,
        record_index: int,
        field_count: int,
        expected_field_count: int,
    ) -> None:
        """Record that a line had the wrong field count."""
        ...

    def file_parsed(self, file_kind: str, record_count: int) -> None:
        """Record that a whole file was parsed."""
        ...

    def with_context(self, context: ObservationContext) -> ParserProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultParserProbe:
    """Default implementation of ParserProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultParserProbe:
        """Create a new probe with observation context bound."""
        return DefaultParserProbe(logger=self._logger, context=context)

    def comment_skipped(self, file_kind: str) -> None:
        """Record that a comment line was skipped."""
        self._logger.debug(
            "account_comment_skipped",
            file_kind=file_kind,
            **self._get_context_kwargs(),
        )

    def numeric_field_defaulted(
        self,
        file_kind: str,
        record_index: int,
        field: str,
        value: str,
    ) -> None:
        """Record that a non-numeric ID field was stored as 0."""
        self._logger.warning(
            "account_numeric_field_defaulted",
            file_kind=file_kind,
            record_index=record_index,
            field=field,
            value=value,
            **self._get_context_kwargs(),
        )

    def malformed_record(
        self,
        file_kind: str,
        record_index: int,
        field_count: int,
        expected_field_count: int,
    ) -> None:
        """Record that a line had the wrong field count."""
        self._logger.error(
            "account_malformed_record",
            file_kind=file_kind,
            record_index=record_index,
            field_count=field_count,
            expected_field_count=expected_field_count,
            **self._get_context_kwargs(),
        )

    def file_parsed(self, file_kind: str, record_count: int) -> None:
        """Record that a whole file was parsed."""
        self._logger.info(
            "account_file_parsed",
            file_kind=file_kind,
            record_count=record_count,
            **self._get_context_kwargs(),
        )
