"""Domain-Oriented Observability for the accounts infrastructure layer."""

from accounts.infrastructure.observability.parser_probe import (
    DefaultParserProbe,
    ParserProbe,
)

__all__ = [
    "DefaultParserProbe",
    "ParserProbe",
]
