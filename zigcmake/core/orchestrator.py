"""
Toolchain generation orchestration.

Ties discovery, target resolution and per-target generation together:

    1. ask Zig for every supported target (once per run)
    2. resolve the requested targets against that list
    3. render and write one toolchain file per target, concurrently

Usage:
    from zigcmake.core.orchestrator import ToolchainOrchestrator

    orchestrator = ToolchainOrchestrator()
    result = orchestrator.run(["x86_64-linux-gnu"], Path("cmake"))
    print(result.written)
"""

import concurrent.futures
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from zigcmake.cmake.toolchain_generator import generate_toolchain, toolchain_filename
from zigcmake.core.exceptions import GenerationError, ValidationError
from zigcmake.core.filesystem import atomic_write, ensure_directory
from zigcmake.toolchain.discovery import TargetDiscovery

logger = logging.getLogger(__name__)

Writer = Callable[[Path, str], None]


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a generation run.

    Attributes:
        universe: Every target reported by ``zig targets``
        targets: Targets selected for generation (empty in listing mode)
        written: Toolchain files written, in the order of ``targets``
    """

    universe: Tuple[str, ...]
    targets: Tuple[str, ...]
    written: Tuple[Path, ...]


def resolve_targets(
    requested: Iterable[str], universe: Sequence[str], all_targets: bool = False
) -> List[str]:
    """
    Resolve requested targets against the discovered target list.

    Args:
        requested: Target triples asked for (duplicates allowed)
        universe: Targets supported by Zig
        all_targets: Select every supported target, ignoring ``requested``

    Returns:
        Unique targets to generate, in first-seen order. Empty when nothing
        was requested and ``all_targets`` is False.

    Raises:
        ValidationError: Listing every requested target Zig does not support

    Example:
        >>> resolve_targets(["a-b-c", "a-b-c"], ["a-b-c", "d-e-f"])
        ['a-b-c']
    """
    if all_targets:
        return list(dict.fromkeys(universe))

    targets = list(dict.fromkeys(requested))
    supported = set(universe)
    invalid = [target for target in targets if target not in supported]
    if invalid:
        raise ValidationError(invalid)

    return targets


def write_toolchains(
    targets: Sequence[str],
    output_dir: Union[str, Path],
    max_workers: Optional[int] = None,
    writer: Writer = atomic_write,
) -> List[Path]:
    """
    Generate and write one toolchain file per target in parallel.

    Every target is processed even if another one fails; failures are
    reported once all workers have finished.

    Args:
        targets: Targets to generate
        output_dir: Directory receiving ``<target>.cmake`` files (must exist)
        max_workers: Worker thread count (default: executor default)
        writer: Callable writing text content to a path

    Returns:
        Paths written, in the order of ``targets``

    Raises:
        FilesystemError: If exactly one target failed to write
        GenerationError: If several targets failed
    """
    output_dir = Path(output_dir)

    def _generate(target: str) -> Path:
        output_path = output_dir / toolchain_filename(target)
        writer(output_path, generate_toolchain(target))
        logger.info(f"Generated CMake toolchain file: {output_path}")
        return output_path

    written: Dict[str, Path] = {}
    failures: Dict[str, Exception] = {}

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {pool.submit(_generate, target): target for target in targets}
        for future in concurrent.futures.as_completed(futures):
            target = futures[future]
            try:
                written[target] = future.result()
            except Exception as e:
                logger.debug(f"Failed to generate toolchain for {target}: {e}")
                failures[target] = e

    if failures:
        ordered = {t: failures[t] for t in targets if t in failures}
        if len(ordered) == 1:
            raise next(iter(ordered.values()))
        raise GenerationError(ordered)

    return [written[target] for target in targets]


class ToolchainOrchestrator:
    """
    Generate CMake toolchain files for Zig targets.

    Example:
        >>> orchestrator = ToolchainOrchestrator(TargetDiscovery("zig"))
        >>> result = orchestrator.run([], Path("."), all_targets=True)
        >>> len(result.written) == len(result.universe)
        True
    """

    def __init__(
        self,
        discovery: Optional[TargetDiscovery] = None,
        max_workers: Optional[int] = None,
        writer: Writer = atomic_write,
    ):
        """
        Initialize the orchestrator.

        Args:
            discovery: Target discovery to use (default: ``zig`` on PATH)
            max_workers: Worker thread count for file generation
            writer: Callable writing text content to a path
        """
        self.discovery = discovery or TargetDiscovery()
        self.max_workers = max_workers
        self.writer = writer

    def run(
        self,
        requested: Iterable[str],
        output_dir: Union[str, Path],
        all_targets: bool = False,
    ) -> GenerationResult:
        """
        Discover, resolve and generate.

        When nothing is requested and ``all_targets`` is False, no files are
        written and the result only carries the discovered universe.

        Raises:
            DiscoveryError: If Zig targets cannot be discovered
            ValidationError: If requested targets are unsupported
            FilesystemError: If the output directory or a file cannot be written
            GenerationError: If several files cannot be written
        """
        universe = tuple(self.discovery.discover())
        targets = tuple(resolve_targets(requested, universe, all_targets))

        if not targets:
            logger.debug("No targets requested")
            return GenerationResult(universe=universe, targets=(), written=())

        logger.debug(f"Generating toolchain files for {len(targets)} targets")
        output_dir = ensure_directory(output_dir)
        written = write_toolchains(
            targets, output_dir, max_workers=self.max_workers, writer=self.writer
        )

        return GenerationResult(
            universe=universe, targets=targets, written=tuple(written)
        )
