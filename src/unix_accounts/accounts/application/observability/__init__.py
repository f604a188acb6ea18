"""Domain-Oriented Observability for the accounts application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from accounts.application.observability.account_directory_probe import (
    AccountDirectoryProbe,
    DefaultAccountDirectoryProbe,
)

__all__ = [
    "AccountDirectoryProbe",
    "DefaultAccountDirectoryProbe",
]
