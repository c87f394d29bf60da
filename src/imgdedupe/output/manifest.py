"""
JSON manifest describing a deduplication run.

The manifest lists every group with its canonical fingerprint and, for each
member, where it came from, the name it was given and whether the move
succeeded.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..dedup.model import DedupRun
from ..dedup.signature import Signature
from .relocate import RelocationResult
from ..logging import get_logger

logger = get_logger(__name__)

MANIFEST_VERSION = "1.0.0"
MANIFEST_FILENAME = "manifest.json"


@dataclass(frozen=True)
class ManifestEntry:
    """Single group member in the manifest."""
    source_path: str                        # Original location
    file_name: str                          # Assigned output name
    rank: int                               # 0 for the canonical member
    fingerprint: str                        # 16-digit hex
    distance: int                           # Hamming distance to canonical
    similarity: float                       # Display-only score in [0, 1]
    moved: bool                             # Whether the move succeeded

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ManifestGroup:
    group_index: int
    canonical_fingerprint: str
    size: int
    entries: List[ManifestEntry]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group_index": self.group_index,
            "canonical_fingerprint": self.canonical_fingerprint,
            "size": self.size,
            "entries": [entry.to_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class Manifest:
    """Complete record of one run."""
    version: str
    source_dir: str
    output_dir: str
    signature: str
    threshold: int
    created_timestamp: str
    summary: Dict[str, Any]
    groups: List[ManifestGroup]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "source_dir": self.source_dir,
            "output_dir": self.output_dir,
            "signature": self.signature,
            "threshold": self.threshold,
            "created_timestamp": self.created_timestamp,
            "summary": self.summary,
            "groups": [group.to_dict() for group in self.groups],
        }


def build_manifest(
    source_dir: Path,
    output_dir: Path,
    signature: Signature,
    run: DedupRun,
    relocation: Optional[RelocationResult] = None,
) -> Manifest:
    """
    Build a manifest from a deduplication run and its relocation outcome.

    Args:
        source_dir: Directory that was scanned
        output_dir: Directory files were moved into
        signature: Signature used for the run, for distances and scores
        run: Groups and assigned names
        relocation: Move outcome; when omitted every entry is reported as not moved

    Returns:
        Manifest object
    """
    moved_sources = relocation.moved_sources if relocation else set()

    groups = []
    for index, named_group in enumerate(run.named_groups):
        canonical = named_group[0][0].fingerprint
        entries = [
            ManifestEntry(
                source_path=str(item.source_path),
                file_name=name,
                rank=rank,
                fingerprint=item.fingerprint.hex,
                distance=signature.distance(canonical, item.fingerprint),
                similarity=signature.similarity(canonical, item.fingerprint),
                moved=item.source_path in moved_sources,
            )
            for rank, (item, name) in enumerate(named_group)
        ]
        groups.append(ManifestGroup(
            group_index=index,
            canonical_fingerprint=canonical.hex,
            size=len(entries),
            entries=entries,
        ))

    summary = _generate_summary(run, relocation)

    return Manifest(
        version=MANIFEST_VERSION,
        source_dir=str(source_dir),
        output_dir=str(output_dir),
        signature=signature.name,
        threshold=signature.threshold,
        created_timestamp=datetime.now().isoformat(),
        summary=summary,
        groups=groups,
    )


def write_manifest_json(manifest: Manifest, output_dir: Path) -> Path:
    """
    Write manifest to JSON file in the output directory.

    Returns:
        Path to the written manifest file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    manifest_path = output_dir / MANIFEST_FILENAME

    try:
        with open(manifest_path, 'w', encoding='utf-8') as f:
            json.dump(manifest.to_dict(), f, indent=2, ensure_ascii=False)

        logger.info(f"Wrote manifest to {manifest_path}")
        return manifest_path

    except Exception as exc:
        logger.error(f"Failed to write manifest to {manifest_path}: {exc}")
        raise


def _generate_summary(run: DedupRun, relocation: Optional[RelocationResult]) -> Dict[str, Any]:
    summary: Dict[str, Any] = {
        "images_processed": run.processed_count,
        "decode_failures": [str(failure.path) for failure in run.failures],
        "groups": len(run.groups),
        "duplicate_groups": run.duplicate_group_count,
        "duplicates": run.duplicate_count,
        "largest_group": max((len(group) for group in run.groups), default=0),
    }
    if relocation is not None:
        summary["moved"] = len(relocation.moved)
        summary["move_failures"] = [str(failure.source) for failure in relocation.failures]
    return summary