"""Clustering logic for grouping duplicate images."""

from collections import defaultdict
from typing import Dict, List, Optional

from .items import DuplicateGroup, ProcessedItem
from .signature import PerceptualHash, Signature
from ..logging import get_logger

logger = get_logger(__name__)


def cluster_duplicates(
    items: List[ProcessedItem],
    signature: Optional[Signature] = None,
) -> List[DuplicateGroup]:
    """
    Group items into duplicate clusters with a greedy stack scan.

    The input list is consumed as a working set. Each round pops the last
    item as anchor, then walks the remaining items from the end toward the
    start, pulling out every item similar to the anchor. The anchor is
    appended last. Membership is decided against the anchor only, so two
    members of one group need not be similar to each other.

    Args:
        items: Fingerprinted items; emptied by this call
        signature: Comparison policy, perceptual hash with threshold 8 by default

    Returns:
        Groups sorted by descending size, ties in construction order
    """
    if signature is None:
        signature = PerceptualHash()

    groups: List[DuplicateGroup] = []

    while items:
        anchor = items.pop()
        members: List[ProcessedItem] = []

        for index in range(len(items) - 1, -1, -1):
            candidate = items[index]
            if signature.is_similar(anchor.fingerprint, candidate.fingerprint):
                members.append(items.pop(index))
                logger.debug(
                    f"Grouped {candidate.source_path} with {anchor.source_path} "
                    f"(distance: {signature.distance(anchor.fingerprint, candidate.fingerprint)})"
                )

        members.append(anchor)
        groups.append(DuplicateGroup(members=tuple(members)))

    groups.sort(key=len, reverse=True)

    logger.info(
        f"Clustered into {len(groups)} groups, "
        f"{sum(1 for group in groups if group.is_duplicate_set)} with duplicates"
    )
    return groups


def cluster_transitive(
    items: List[ProcessedItem],
    signature: Optional[Signature] = None,
) -> List[DuplicateGroup]:
    """
    Group items into single-link clusters using union-find.

    Any chain of similar pairs ends up in one group. Members keep input
    order, so the last of them in the input becomes canonical. The input
    list is consumed like in ``cluster_duplicates``.
    """
    if signature is None:
        signature = PerceptualHash()

    n = len(items)
    parent = list(range(n))

    def find(x: int) -> int:
        if parent[x] != x:
            parent[x] = find(parent[x])
        return parent[x]

    def union(x: int, y: int) -> None:
        px, py = find(x), find(y)
        if px != py:
            parent[px] = py

    for i in range(n):
        for j in range(i + 1, n):
            if signature.is_similar(items[i].fingerprint, items[j].fingerprint):
                union(i, j)

    clusters: Dict[int, List[ProcessedItem]] = defaultdict(list)
    for i, item in enumerate(items):
        clusters[find(i)].append(item)

    # dict preserves first-seen order of each root
    groups = [DuplicateGroup(members=tuple(members)) for members in clusters.values()]
    groups.sort(key=len, reverse=True)
    items.clear()

    logger.info(f"Transitively clustered into {len(groups)} groups")
    return groups


def sort_by_resolution(items: List[ProcessedItem]) -> List[ProcessedItem]:
    """
    Order items by ascending pixel count, stable on ties.

    Feeding the result to ``cluster_duplicates`` makes every anchor the
    largest remaining item, so each group's canonical member is its
    highest-resolution image.
    """
    return sorted(items, key=lambda item: item.pixel_count)
