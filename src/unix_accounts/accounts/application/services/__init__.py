"""Application services for the accounts bounded context.

Application services orchestrate parsing and querying to fulfill use
cases. They are the "front door" to the accounts context.
"""

from accounts.application.services.account_directory import AccountDirectory
from accounts.application.services.resolver import RelationshipResolver

__all__ = [
    "AccountDirectory",
    "RelationshipResolver",
]
