"""Unit test fixtures with mocked dependencies."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from accounts.application.observability import DefaultAccountDirectoryProbe
from accounts.infrastructure.observability import DefaultParserProbe
from accounts.infrastructure.parser import AccountFileParser

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def group_path() -> Path:
    """A valid group file."""
    return FIXTURES_DIR / "group"


@pytest.fixture
def passwd_path() -> Path:
    """A valid passwd file."""
    return FIXTURES_DIR / "passwd"


@pytest.fixture
def invalid_group_path() -> Path:
    """A group file whose second record has three fields."""
    return FIXTURES_DIR / "invalid-group"


@pytest.fixture
def invalid_passwd_path() -> Path:
    """A passwd file whose second record has six fields."""
    return FIXTURES_DIR / "invalid-passwd"


@pytest.fixture
def mock_logger() -> MagicMock:
    """Provide a mocked structlog logger."""
    return MagicMock()


@pytest.fixture
def parser(mock_logger: MagicMock) -> AccountFileParser:
    """Provide a parser whose probe logs to the mocked logger."""
    return AccountFileParser(probe=DefaultParserProbe(logger=mock_logger))


@pytest.fixture
def directory_probe(mock_logger: MagicMock) -> DefaultAccountDirectoryProbe:
    """Provide a directory probe logging to the mocked logger."""
    return DefaultAccountDirectoryProbe(logger=mock_logger)
