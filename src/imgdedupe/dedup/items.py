"""Value types flowing between fingerprinting, clustering and naming."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple

from .signature import Fingerprint
from ..media.formats import ImageFormat


@dataclass(frozen=True)
class ProcessedItem:
    """A successfully decoded and fingerprinted input file."""
    fingerprint: Fingerprint
    source_path: Path
    pixel_count: int               # width * height, resolution proxy
    image_format: ImageFormat


@dataclass(frozen=True)
class DuplicateGroup:
    """
    Items judged similar to a common anchor.

    The anchor is always the last member and serves as the canonical
    member for naming.
    """
    members: Tuple[ProcessedItem, ...]

    def __post_init__(self) -> None:
        if not self.members:
            raise ValueError("DuplicateGroup requires at least one member")

    @property
    def canonical(self) -> ProcessedItem:
        return self.members[-1]

    @property
    def is_duplicate_set(self) -> bool:
        return len(self.members) > 1

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[ProcessedItem]:
        return iter(self.members)
