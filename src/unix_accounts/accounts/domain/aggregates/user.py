"""User aggregate for the accounts context."""

from __future__ import annotations

from dataclasses import dataclass

# Substrings which mark a login shell as refusing interactive logins.
DISABLING_SHELL_MARKERS = ("nologin", "false")


def shell_disables_login(shell: str) -> bool:
    """Decide whether a login shell disables the account.

    An empty shell disables the account, as does any shell path containing
    one of the disabling markers anywhere (substring match, not exact path).

    Args:
        shell: The login shell field of a user record

    Returns:
        True if the account is disabled, False otherwise
    """
    if shell == "":
        return True
    return any(marker in shell for marker in DISABLING_SHELL_MARKERS)


@dataclass(frozen=True)
class User:
    """A user record read from the passwd file.

    A user is implicitly a member of the group whose ID equals
    primary_group_id, even when that group's member list never names it.
    """

    name: str
    id: int
    primary_group_id: int
    full_name: str = ""
    home_directory: str = ""
    shell: str = ""
    disabled: bool = True

    @classmethod
    def create(
        cls,
        name: str,
        id: int,
        primary_group_id: int,
        full_name: str,
        home_directory: str,
        shell: str,
    ) -> "User":
        """Factory method deriving the disabled flag from the shell.

        Args:
            name: Login name
            id: Numeric user ID
            primary_group_id: Numeric ID of the user's primary group
            full_name: Descriptive (GECOS) name
            home_directory: Already normalized home directory
            shell: Login shell

        Returns:
            A new User with disabled computed from the shell
        """
        return cls(
            name=name,
            id=id,
            primary_group_id=primary_group_id,
            full_name=full_name,
            home_directory=home_directory,
            shell=shell,
            disabled=shell_disables_login(shell),
        )

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.name}, {self.id})"
