"""
Unit tests for Zig target discovery.

Tests cover:
- Parsing of `zig targets` output
- Format errors for unexpected output
- Process failures (exit code, signal, missing executable)
"""

import signal
import subprocess
from unittest.mock import Mock, patch

import pytest

from zigcmake.core.exceptions import (
    DiscoveryError,
    DiscoveryFormatError,
    DiscoveryProcessError,
)
from zigcmake.toolchain.discovery import (
    DEFAULT_ZIG_EXECUTABLE,
    TargetDiscovery,
    discover_targets,
    parse_targets,
)


@pytest.mark.unit
class TestParseTargets:
    """Test parse_targets()."""

    def test_minimal_block(self):
        """Quoted entries of the libc block are returned in order."""
        output = '.{ .libc = .{ "a-b-c", "d-e-f" }, }'

        assert parse_targets(output) == ["a-b-c", "d-e-f"]

    def test_full_output(self, zig_targets_output, zig_libc_targets):
        """Only the .libc block is used from a complete listing."""
        targets = parse_targets(zig_targets_output)

        assert targets == zig_libc_targets
        # .arch/.os/.glibc entries must not leak in
        assert "x86_64" not in targets
        assert "2.17.0" not in targets

    def test_whitespace_around_assignment(self):
        """Any whitespace between .libc, '=' and '.{' is accepted."""
        output = '.libc\n  =\t.{\n"x86_64-linux-gnu",\n}'

        assert parse_targets(output) == ["x86_64-linux-gnu"]

    def test_missing_libc_block(self):
        """Output without .libc raises DiscoveryFormatError."""
        output = '.{ .arch = .{ "x86_64" }, .os = .{ "linux" } }'

        with pytest.raises(DiscoveryFormatError, match="libc"):
            parse_targets(output)

    def test_empty_libc_block(self):
        """An empty libc block is a format error, not an empty list."""
        with pytest.raises(DiscoveryFormatError, match="empty"):
            parse_targets(".libc = .{ },")

    def test_malformed_entry(self):
        """Entries that are not arch-os-libc triples are rejected."""
        output = '.libc = .{ "x86_64-linux-gnu", "x86_64-linux" },'

        with pytest.raises(DiscoveryFormatError, match="x86_64-linux"):
            parse_targets(output)

    def test_empty_output(self):
        """Empty output is a format error."""
        with pytest.raises(DiscoveryFormatError):
            parse_targets("")

    def test_format_error_is_discovery_error(self):
        """DiscoveryFormatError derives from DiscoveryError."""
        with pytest.raises(DiscoveryError):
            parse_targets("garbage")


@pytest.mark.unit
class TestTargetDiscovery:
    """Test TargetDiscovery.discover()."""

    def test_default_executable(self):
        """zig on PATH is used by default."""
        assert TargetDiscovery().zig_executable == DEFAULT_ZIG_EXECUTABLE
        assert TargetDiscovery(None).zig_executable == "zig"

    @patch("subprocess.run")
    def test_discover_success(self, mock_run, zig_targets_output, zig_libc_targets):
        """Successful run returns parsed targets."""
        mock_run.return_value = Mock(returncode=0, stdout=zig_targets_output, stderr="")

        targets = TargetDiscovery().discover()

        assert targets == zig_libc_targets

    @patch("subprocess.run")
    def test_discover_command(self, mock_run, zig_targets_output):
        """`<zig> targets` is run with output captured."""
        mock_run.return_value = Mock(returncode=0, stdout=zig_targets_output, stderr="")

        TargetDiscovery("/opt/zig/zig").discover()

        mock_run.assert_called_once()
        assert mock_run.call_args[0][0] == ["/opt/zig/zig", "targets"]
        call_kwargs = mock_run.call_args[1]
        assert call_kwargs["capture_output"] is True
        assert call_kwargs["text"] is True
        assert call_kwargs["stdin"] == subprocess.DEVNULL

    @patch("subprocess.run")
    def test_discover_nonzero_exit(self, mock_run):
        """Non-zero exit raises DiscoveryProcessError with stderr."""
        mock_run.return_value = Mock(
            returncode=1, stdout="", stderr="error: unable to find zig lib dir"
        )

        with pytest.raises(DiscoveryProcessError) as exc_info:
            TargetDiscovery().discover()

        error = exc_info.value
        assert error.returncode == 1
        assert error.signal_name is None
        assert "exit code 1" in str(error)
        assert "unable to find zig lib dir" in str(error)
        assert error.stderr == "error: unable to find zig lib dir"

    @patch("subprocess.run")
    def test_discover_killed_by_signal(self, mock_run):
        """Negative return code is reported as the terminating signal."""
        mock_run.return_value = Mock(
            returncode=-signal.SIGKILL, stdout="", stderr="partial"
        )

        with pytest.raises(DiscoveryProcessError) as exc_info:
            TargetDiscovery().discover()

        error = exc_info.value
        assert error.signal_name == "SIGKILL"
        assert "signal SIGKILL" in str(error)
        assert "partial" in str(error)

    @patch("subprocess.run")
    def test_discover_missing_executable(self, mock_run):
        """An executable that cannot be started raises DiscoveryProcessError."""
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory")

        with pytest.raises(DiscoveryProcessError, match="Failed to execute"):
            TargetDiscovery("zig-missing").discover()

    @patch("subprocess.run")
    def test_discover_unparseable_output(self, mock_run):
        """Successful exit with unexpected output raises DiscoveryFormatError."""
        mock_run.return_value = Mock(returncode=0, stdout="info: usage", stderr="")

        with pytest.raises(DiscoveryFormatError):
            TargetDiscovery().discover()

    @patch("subprocess.run")
    def test_discover_targets_wrapper(self, mock_run):
        """discover_targets() delegates to TargetDiscovery."""
        mock_run.return_value = Mock(
            returncode=0, stdout='.libc = .{ "a-b-c", "d-e-f" },', stderr=""
        )

        assert discover_targets("zig") == ["a-b-c", "d-e-f"]
