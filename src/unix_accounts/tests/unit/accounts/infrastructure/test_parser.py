"""Unit tests for the group and passwd file parser."""

import pytest

from accounts.domain.aggregates import Group, User
from accounts.infrastructure.parser import AccountFileParser, clean_path
from accounts.ports.exceptions import MalformedRecordError, SourceUnavailableError
from accounts.infrastructure.sources import FileLineSource, InMemoryLineSource


class TestParseGroups:
    """Tests for group line parsing."""

    def test_parses_group_fields(self, parser):
        """Group lines yield name, id and members; the password is ignored."""
        groups = parser.parse_groups(["cdrom:x:11:root,test\n"])

        assert groups == (Group(name="cdrom", id=11, members=("root", "test")),)

    def test_empty_member_field_yields_placeholder(self, parser):
        """An empty member list is kept as a single empty-string member."""
        (group,) = parser.parse_groups(["bin:x:1:\n"])

        assert group.members == ("",)

    def test_skips_comment_lines(self, parser, mock_logger):
        """Lines starting with # are skipped."""
        groups = parser.parse_groups(["# comment\n", "bin:x:1:\n"])

        assert [g.name for g in groups] == ["bin"]
        mock_logger.debug.assert_called_once()
        assert mock_logger.debug.call_args[0][0] == "account_comment_skipped"

    def test_indented_hash_is_not_a_comment(self, parser):
        """Only a # at position 0 marks a comment."""
        with pytest.raises(MalformedRecordError):
            parser.parse_groups([" # not a comment\n"])

    def test_wrong_field_count_reports_accepted_record_count(self, parser):
        """The error carries the number of records accepted so far."""
        lines = ["# header\n", "root:x:0:\n", "# middle\n", "bin:x:1\n"]

        with pytest.raises(MalformedRecordError) as exc_info:
            parser.parse_groups(lines)

        assert exc_info.value.file_kind == "group"
        assert exc_info.value.record_index == 1
        assert exc_info.value.field_count == 3
        assert exc_info.value.expected_field_count == 4
        assert "group file on record 1" in str(exc_info.value)

    def test_too_many_fields_fail(self, parser):
        """Five fields is as wrong as three."""
        with pytest.raises(MalformedRecordError):
            parser.parse_groups(["bin:x:1::extra\n"])

    def test_blank_line_fails(self, parser):
        """A blank line is a one-field record, not a comment."""
        with pytest.raises(MalformedRecordError) as exc_info:
            parser.parse_groups(["root:x:0:\n", "\n"])

        assert exc_info.value.field_count == 1

    def test_malformed_record_is_logged(self, parser, mock_logger):
        """The probe records the malformed line before the error is raised."""
        with pytest.raises(MalformedRecordError):
            parser.parse_groups(["bin:x\n"])

        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert call_args[0][0] == "account_malformed_record"
        assert call_args[1]["file_kind"] == "group"
        assert call_args[1]["record_index"] == 0

    def test_non_numeric_gid_defaults_to_zero(self, parser, mock_logger):
        """A bad numeric field is stored as 0 without failing."""
        (group,) = parser.parse_groups(["odd:x:eleven:a\n"])

        assert group.id == 0
        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "account_numeric_field_defaulted"
        assert call_args[1]["field"] == "gid"
        assert call_args[1]["value"] == "eleven"

    def test_handles_crlf_line_endings(self, parser):
        """Windows line endings do not leak into the last field."""
        (group,) = parser.parse_groups(["cdrom:x:11:root,test\r\n"])

        assert group.members == ("root", "test")

    def test_strips_only_one_carriage_return(self, parser):
        """Only the carriage return of a CRLF ending is removed."""
        (group,) = parser.parse_groups(["cdrom:x:11:root,test\r\r\n"])

        assert group.members == ("root", "test\r")


class TestParseUsers:
    """Tests for passwd line parsing."""

    def test_parses_user_fields(self, parser):
        """User lines yield all seven fields except the password."""
        (user,) = parser.parse_users(["test:x:1000:11:Test User:/home/test:/bin/bash\n"])

        assert user == User(
            name="test",
            id=1000,
            primary_group_id=11,
            full_name="Test User",
            home_directory="/home/test",
            shell="/bin/bash",
            disabled=False,
        )

    def test_normalizes_home_directory(self, parser):
        """Redundant separators and relative segments are removed."""
        (user,) = parser.parse_users(["test:x:1000:11::/home//test/../test/./:/bin/bash\n"])

        assert user.home_directory == "/home/test"

    @pytest.mark.parametrize(
        "shell,disabled",
        [
            ("/usr/sbin/nologin", True),
            ("", True),
            ("/bin/false", True),
            ("/bin/bash", False),
        ],
    )
    def test_disabled_computed_at_parse_time(self, parser, shell, disabled):
        """disabled follows the shell rule."""
        (user,) = parser.parse_users([f"svc:x:5:5::/srv:{shell}\n"])

        assert user.disabled is disabled

    def test_wrong_field_count_fails(self, parser):
        """Users must have exactly seven fields."""
        lines = ["root:x:0:0:root:/root:/bin/bash\n", "daemon:x:2:2::/sbin\n"]

        with pytest.raises(MalformedRecordError) as exc_info:
            parser.parse_users(lines)

        assert exc_info.value.file_kind == "passwd"
        assert exc_info.value.record_index == 1
        assert exc_info.value.field_count == 6
        assert exc_info.value.expected_field_count == 7

    def test_non_numeric_ids_default_to_zero(self, parser, mock_logger):
        """Both uid and gid fall back to 0."""
        (user,) = parser.parse_users(["odd:x:uid:gid::/home/odd:/bin/sh\n"])

        assert user.id == 0
        assert user.primary_group_id == 0
        assert mock_logger.warning.call_count == 2

    def test_signed_ids_parse(self, parser):
        """Signed decimal IDs are accepted."""
        (user,) = parser.parse_users(["neg:x:-2:+3::/:/bin/sh\n"])

        assert user.id == -2
        assert user.primary_group_id == 3

    def test_file_parsed_is_logged(self, parser, mock_logger):
        """A successful file parse records the record count."""
        parser.parse_users(["root:x:0:0:root:/root:/bin/bash\n"])

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args
        assert call_args[0][0] == "account_file_parsed"
        assert call_args[1]["file_kind"] == "passwd"
        assert call_args[1]["record_count"] == 1


class TestParse:
    """Tests for parsing both files together."""

    def test_parse_builds_snapshot(self, parser):
        """parse returns both record sequences in source order."""
        snapshot = parser.parse(
            ["bin:x:1:\n", "cdrom:x:11:root,test\n"],
            ["daemon:x:2:2::/sbin:/usr/sbin/nologin\n", "test:x:1000:11::/home/test:/bin/bash\n"],
        )

        assert [g.name for g in snapshot.groups] == ["bin", "cdrom"]
        assert [u.name for u in snapshot.users] == ["daemon", "test"]

    def test_malformed_user_fails_whole_parse(self, parser):
        """A bad user line fails even though the groups were valid."""
        with pytest.raises(MalformedRecordError):
            parser.parse(["bin:x:1:\n"], ["daemon:x:2\n"])

    def test_parse_sources_reads_files(self, parser, group_path, passwd_path):
        """parse_sources opens and parses both files."""
        snapshot = parser.parse_sources(FileLineSource(group_path), FileLineSource(passwd_path))

        assert len(snapshot.groups) == 6
        assert len(snapshot.users) == 5

    def test_parse_sources_surfaces_missing_file(self, parser, tmp_path, passwd_path):
        """A missing source raises SourceUnavailableError."""
        with pytest.raises(SourceUnavailableError):
            parser.parse_sources(
                FileLineSource(tmp_path / "missing"), FileLineSource(passwd_path)
            )

    def test_parse_sources_accepts_latin1_full_name(self, parser, tmp_path, group_path):
        """A full name that is not valid UTF-8 does not fail the parse."""
        passwd = tmp_path / "passwd"
        passwd.write_bytes(b"jose:x:1000:100:Jos\xe9:/home/jose:/bin/bash\n")

        snapshot = parser.parse_sources(FileLineSource(group_path), FileLineSource(passwd))

        (user,) = snapshot.users
        assert user.name == "jose"
        assert user.id == 1000
        assert user.full_name.encode("utf-8", "surrogateescape") == b"Jos\xe9"
        assert user.disabled is False

    def test_parse_sources_keeps_carriage_return_inside_field(
        self, parser, tmp_path, group_path
    ):
        """A carriage return inside a field does not split the record."""
        passwd = tmp_path / "passwd"
        passwd.write_bytes(b"a:x:1:100:A\rB:/home/a:/bin/bash\r\n")

        snapshot = parser.parse_sources(FileLineSource(group_path), FileLineSource(passwd))

        (user,) = snapshot.users
        assert user.full_name == "A\rB"
        assert user.shell == "/bin/bash"

    def test_parse_sources_accepts_memory_sources(self, parser):
        """Any LineSource can feed the parser."""
        snapshot = parser.parse_sources(
            InMemoryLineSource("bin:x:1:\n"),
            InMemoryLineSource("bin:x:1:1::/bin:/bin/false\n"),
        )

        assert snapshot.groups[0].name == "bin"
        assert snapshot.users[0].disabled is True

    def test_parser_without_probe_uses_default(self):
        """A parser can be created without a probe."""
        snapshot = AccountFileParser().parse(["bin:x:1:\n"], [])

        assert len(snapshot.groups) == 1


class TestCleanPath:
    """Tests for lexical home directory normalization."""

    @pytest.mark.parametrize(
        "raw,cleaned",
        [
            ("/home/test", "/home/test"),
            ("/home//test/", "/home/test"),
            ("/home/./test", "/home/test"),
            ("/home/other/../test", "/home/test"),
            ("/..", "/"),
            ("//root", "/root"),
            ("", "."),
            ("relative/./dir/", "relative/dir"),
        ],
    )
    def test_clean_path(self, raw, cleaned):
        assert clean_path(raw) == cleaned
