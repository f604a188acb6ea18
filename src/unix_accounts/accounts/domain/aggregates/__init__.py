"""Domain aggregates for the accounts context.

Aggregates are the immutable records produced by one parse of the account
database. They carry no knowledge of files, parsing or logging.
"""

from accounts.domain.aggregates.group import Group
from accounts.domain.aggregates.snapshot import AccountSnapshot
from accounts.domain.aggregates.user import User, shell_disables_login

__all__ = [
    "AccountSnapshot",
    "Group",
    "User",
    "shell_disables_login",
]
