"""Factory for account directories backed by the local account files."""

from __future__ import annotations

from accounts.application.observability import DefaultAccountDirectoryProbe
from accounts.application.services import AccountDirectory
from accounts.infrastructure.observability import DefaultParserProbe
from accounts.infrastructure.parser import AccountFileParser
from accounts.infrastructure.sources import FileLineSource
from infrastructure.observability.context import ObservationContext
from infrastructure.settings import AccountSourceSettings


def create_account_directory(
    settings: AccountSourceSettings | None = None,
    parse: bool = True,
) -> AccountDirectory:
    """Create a directory reading the group and passwd files named by settings.

    Args:
        settings: Source locations; a fresh AccountSourceSettings (environment
            or /etc defaults) is used when omitted.
        parse: Parse immediately when True, otherwise start empty.

    Returns:
        The account directory

    Raises:
        SourceUnavailableError: If parse is True and a file cannot be read
        MalformedRecordError: If parse is True and a file has a malformed line
    """
    settings = settings or AccountSourceSettings()
    context = ObservationContext().with_sources(
        group_source=settings.group_path,
        passwd_source=settings.passwd_path,
    )

    directory = AccountDirectory(
        group_source=FileLineSource(settings.group_path),
        user_source=FileLineSource(settings.passwd_path),
        parser=AccountFileParser(probe=DefaultParserProbe().with_context(context)),
        probe=DefaultAccountDirectoryProbe().with_context(context),
    )
    if parse:
        directory.reparse()
    return directory
