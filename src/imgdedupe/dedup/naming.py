"""Deterministic output names for members of a duplicate group."""

from typing import List, Tuple

from .items import DuplicateGroup, ProcessedItem
from .signature import Fingerprint
from ..media.formats import ImageFormat


def output_name(
    canonical: Fingerprint,
    member: Fingerprint,
    rank: int,
    image_format: ImageFormat,
) -> str:
    """
    Build the output file name for one group member.

    The canonical member (rank 0) is named after its own fingerprint. Every
    other member is named ``{canonical}-{rank}-{member}`` so it stays
    traceable to both the group and its own content.
    """
    if rank == 0:
        stem = canonical.hex
    else:
        stem = f"{canonical.hex}-{rank}-{member.hex}"
    return f"{stem}.{image_format.extension}"


def name_group(group: DuplicateGroup) -> List[Tuple[ProcessedItem, str]]:
    """Assign names walking the group backwards, so the canonical member gets rank 0."""
    canonical = group.canonical.fingerprint
    return [
        (member, output_name(canonical, member.fingerprint, rank, member.image_format))
        for rank, member in enumerate(reversed(group.members))
    ]
