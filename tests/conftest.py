"""
Pytest configuration and shared fixtures for zigcmake tests.
"""

import pytest
import tempfile
import threading
from pathlib import Path
from typing import Dict, Generator, List
from unittest.mock import Mock

from zigcmake.toolchain.discovery import TargetDiscovery


# Trimmed `zig targets` output (zig 0.13) covering the structure around .libc
ZIG_TARGETS_OUTPUT = """.{
 .arch = .{
  "aarch64",
  "arm",
  "x86",
  "x86_64",
 },
 .os = .{
  "freestanding",
  "linux",
  "macos",
  "windows",
  "wasi",
 },
 .abi = .{
  "none",
  "gnu",
  "musl",
 },
 .libc = .{
  "aarch64-linux-gnu",
  "aarch64-linux-musl",
  "aarch64-macos-none",
  "arm-linux-gnueabihf",
  "wasm32-wasi-musl",
  "x86-linux-musl",
  "x86-windows-gnu",
  "x86_64-linux-gnu",
  "x86_64-macos-none",
  "x86_64-windows-gnu",
 },
 .glibc = .{
  "2.17.0",
  "2.38.0",
 },
 .native = .{
  .triple = "x86_64-linux.6.8...6.8-gnu.2.39",
  .cpu = .{
   .arch = "x86_64",
   .name = "znver3",
  },
  .os = "linux",
  .abi = "gnu",
 },
}
"""

ZIG_LIBC_TARGETS = [
    "aarch64-linux-gnu",
    "aarch64-linux-musl",
    "aarch64-macos-none",
    "arm-linux-gnueabihf",
    "wasm32-wasi-musl",
    "x86-linux-musl",
    "x86-windows-gnu",
    "x86_64-linux-gnu",
    "x86_64-macos-none",
    "x86_64-windows-gnu",
]


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require a zig executable",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def zig_targets_output() -> str:
    """Literal `zig targets` output."""
    return ZIG_TARGETS_OUTPUT


@pytest.fixture
def zig_libc_targets() -> List[str]:
    """Targets listed in the .libc block of zig_targets_output."""
    return list(ZIG_LIBC_TARGETS)


@pytest.fixture
def mock_discovery(zig_libc_targets) -> Mock:
    """TargetDiscovery double returning zig_libc_targets."""
    discovery = Mock(spec=TargetDiscovery)
    discovery.discover.return_value = zig_libc_targets
    return discovery


class RecordingWriter:
    """Thread-safe writer double recording every write."""

    def __init__(self):
        self._lock = threading.Lock()
        self.calls: List[Path] = []
        self.files: Dict[Path, str] = {}

    def __call__(self, path: Path, content: str) -> None:
        with self._lock:
            self.calls.append(path)
            self.files[path] = content


@pytest.fixture
def recording_writer() -> RecordingWriter:
    """Writer double for orchestrator tests."""
    return RecordingWriter()
