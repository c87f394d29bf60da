"""
Collision-aware relocation of grouped images.

Every move is attempted independently: a failed move is logged and the
source file stays where it was.
"""

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ..dedup.model import NamedGroup
from ..logging import get_logger

logger = get_logger(__name__)


class MoveFailure(Exception):
    """Raised when a file cannot be moved to its output name."""

    def __init__(self, source: Path, destination: Path, cause: Optional[Exception] = None) -> None:
        reason = cause if cause is not None else "destination already exists"
        super().__init__(f"Failed to move {source} to {destination}: {reason}")
        self.source = source
        self.destination = destination
        self.cause = cause


@dataclass(frozen=True)
class MoveRecord:
    source: Path
    destination: Path


@dataclass
class RelocationResult:
    """Outcome of moving all groups."""
    moved: List[MoveRecord] = field(default_factory=list)
    failures: List[MoveFailure] = field(default_factory=list)

    @property
    def moved_sources(self) -> set:
        return {record.source for record in self.moved}


def move_file(source: Path, destination: Path) -> MoveRecord:
    """
    Move ``source`` to ``destination`` without overwriting anything.

    Raises:
        MoveFailure: If the destination exists or the move itself fails
    """
    if destination.exists():
        raise MoveFailure(source, destination)

    try:
        shutil.move(str(source), str(destination))
    except OSError as exc:
        raise MoveFailure(source, destination, exc) from exc

    return MoveRecord(source=source, destination=destination)


def move_groups(named_groups: Sequence[NamedGroup], output_dir: Path) -> RelocationResult:
    """Move every named group member into ``output_dir``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    result = RelocationResult()

    for named_group in named_groups:
        for item, name in named_group:
            destination = output_dir / name
            try:
                record = move_file(item.source_path, destination)
            except MoveFailure as exc:
                logger.error(str(exc))
                result.failures.append(exc)
                continue

            logger.debug(f"Moved {record.source} -> {record.destination}")
            result.moved.append(record)

    logger.info(f"Moved {len(result.moved)} files, {len(result.failures)} failures")
    return result
