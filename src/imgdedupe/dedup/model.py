"""Public API for image deduplication."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from ..media.formats import ImageFormat
from ..media.ingestion import DecodeFailure, discover_images, load_image
from .cluster import cluster_duplicates, cluster_transitive, sort_by_resolution
from .items import DuplicateGroup, ProcessedItem
from .naming import name_group
from .signature import PerceptualHash, Signature
from ..logging import get_logger

logger = get_logger(__name__)

NamedGroup = List[Tuple[ProcessedItem, str]]


@dataclass
class DedupRun:
    """Outcome of fingerprinting, clustering and naming one directory."""
    groups: List[DuplicateGroup]
    named_groups: List[NamedGroup]
    processed_count: int
    failures: List[DecodeFailure] = field(default_factory=list)

    @property
    def duplicate_group_count(self) -> int:
        return sum(1 for group in self.groups if group.is_duplicate_set)

    @property
    def duplicate_count(self) -> int:
        return sum(len(group) - 1 for group in self.groups)


def process_image(
    path: Path,
    image_format: ImageFormat,
    signature: Optional[Signature] = None,
) -> ProcessedItem:
    """
    Decode one file and fingerprint it.

    Raises:
        DecodeFailure: If the file cannot be decoded as ``image_format``
    """
    if signature is None:
        signature = PerceptualHash()

    image = load_image(path, image_format)
    width, height = image.size
    fingerprint = signature.compute(image)
    logger.debug(f"Computed fingerprint for {path}: {fingerprint}")

    return ProcessedItem(
        fingerprint=fingerprint,
        source_path=path,
        pixel_count=width * height,
        image_format=image_format,
    )


def fingerprint_images(
    files: Iterable[Tuple[Path, ImageFormat]],
    signature: Optional[Signature] = None,
    on_item: Optional[Callable[[ProcessedItem], None]] = None,
) -> Tuple[List[ProcessedItem], List[DecodeFailure]]:
    """
    Fingerprint every file, skipping the ones that fail to decode.

    Items come back in input order, ready for clustering.
    """
    if signature is None:
        signature = PerceptualHash()

    items: List[ProcessedItem] = []
    failures: List[DecodeFailure] = []

    for path, image_format in files:
        try:
            item = process_image(path, image_format, signature)
        except DecodeFailure as exc:
            logger.warning(f"Skipping {exc.path}: {exc.cause}")
            failures.append(exc)
            continue

        items.append(item)
        if on_item is not None:
            on_item(item)

    return items, failures


def deduplicate_directory(
    source_dir: Path,
    signature: Optional[Signature] = None,
    transitive: bool = False,
    prefer_largest: bool = False,
    exclude: Optional[Path] = None,
    on_item: Optional[Callable[[ProcessedItem], None]] = None,
) -> DedupRun:
    """
    Fingerprint, cluster and name every supported image below ``source_dir``.

    Args:
        source_dir: Directory to scan recursively
        signature: Fingerprint algorithm and threshold, perceptual hash by default
        transitive: Use single-link union-find clustering instead of the greedy scan
        prefer_largest: Pre-sort by resolution so canonical members are the largest images
        exclude: Directory whose contents are ignored (usually the output directory)
        on_item: Called with each item as soon as it is fingerprinted

    Returns:
        DedupRun with groups and their output names, largest groups first
    """
    if signature is None:
        signature = PerceptualHash()

    files = discover_images(source_dir, exclude=exclude)
    items, failures = fingerprint_images(files, signature, on_item=on_item)
    processed_count = len(items)
    logger.info(f"Fingerprinted {processed_count} images, {len(failures)} failed to decode")

    if prefer_largest:
        items = sort_by_resolution(items)

    if transitive:
        groups = cluster_transitive(items, signature)
    else:
        groups = cluster_duplicates(items, signature)

    named_groups = [name_group(group) for group in groups]

    return DedupRun(
        groups=groups,
        named_groups=named_groups,
        processed_count=processed_count,
        failures=failures,
    )
