"""Distance metrics for perceptual fingerprint comparison."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .signature import Fingerprint

FINGERPRINT_BITS = 64
DEFAULT_THRESHOLD = 8


def hamming_distance(a: "Fingerprint", b: "Fingerprint") -> int:
    """
    Calculate Hamming distance between two fingerprints.

    Args:
        a: First fingerprint
        b: Second fingerprint

    Returns:
        Number of differing bits, between 0 and 64
    """
    return bin(a.value ^ b.value).count("1")


def is_similar(distance: int, threshold: int = DEFAULT_THRESHOLD) -> bool:
    """Two fingerprints are duplicates when strictly fewer than ``threshold`` bits differ."""
    return distance < threshold


def similarity_score(a: "Fingerprint", b: "Fingerprint") -> float:
    """
    Human-readable similarity in [0, 1].

    Only used for display; duplicate decisions go through ``is_similar``.
    """
    return 1.0 - hamming_distance(a, b) / float(FINGERPRINT_BITS)
