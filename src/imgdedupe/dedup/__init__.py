"""Perceptual deduplication engine."""

from .model import deduplicate_directory, fingerprint_images, process_image, DedupRun
from .signature import (
    Fingerprint,
    Signature,
    PerceptualHash,
    DifferenceHash,
    ConstantSignature,
    compute_fingerprint,
    get_signature,
)
from .distance import hamming_distance, is_similar, similarity_score
from .items import ProcessedItem, DuplicateGroup
from .cluster import cluster_duplicates, cluster_transitive, sort_by_resolution
from .naming import output_name, name_group

__all__ = [
    "deduplicate_directory",
    "fingerprint_images",
    "process_image",
    "DedupRun",
    "Fingerprint",
    "Signature",
    "PerceptualHash",
    "DifferenceHash",
    "ConstantSignature",
    "compute_fingerprint",
    "get_signature",
    "hamming_distance",
    "is_similar",
    "similarity_score",
    "ProcessedItem",
    "DuplicateGroup",
    "cluster_duplicates",
    "cluster_transitive",
    "sort_by_resolution",
    "output_name",
    "name_group",
]
