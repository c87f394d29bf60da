"""Perceptual signatures computed from decoded images."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
from typing import Dict, Type

import imagehash
import numpy as np
from PIL import Image

from .distance import DEFAULT_THRESHOLD, FINGERPRINT_BITS, hamming_distance, is_similar, similarity_score

SAMPLE_SIZE = 32
COEFFICIENT_SIZE = 8

# cosines[n][k] = cos(pi/32 * (n + 0.5) * k)
_COSINES = np.array(
    [
        [math.cos(math.pi / SAMPLE_SIZE * (n + 0.5) * k) for k in range(COEFFICIENT_SIZE)]
        for n in range(SAMPLE_SIZE)
    ],
    dtype=np.float64,
)


@dataclass(frozen=True)
class Fingerprint:
    """A 64-bit perceptual fingerprint."""
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < (1 << FINGERPRINT_BITS):
            raise ValueError(f"Fingerprint value out of range: {self.value}")

    @property
    def hex(self) -> str:
        return f"{self.value:016x}"

    @classmethod
    def from_bits(cls, bits) -> "Fingerprint":
        """Pack an iterable of 64 booleans, first element as the most significant bit."""
        value = 0
        for bit in bits:
            value = (value << 1) | int(bool(bit))
        return cls(value)

    def __str__(self) -> str:
        return self.hex


class Signature(ABC):
    """
    A fingerprint algorithm together with its comparison policy.

    Fingerprints from different signatures are not comparable, so a run
    uses exactly one signature for every image.
    """

    name: str = ""

    def __init__(self, threshold: int = DEFAULT_THRESHOLD) -> None:
        self.threshold = threshold

    @abstractmethod
    def compute(self, image: Image.Image) -> Fingerprint:
        """Compute the fingerprint of a decoded image."""

    def distance(self, a: Fingerprint, b: Fingerprint) -> int:
        return hamming_distance(a, b)

    def is_similar(self, a: Fingerprint, b: Fingerprint) -> bool:
        return is_similar(self.distance(a, b), self.threshold)

    def similarity(self, a: Fingerprint, b: Fingerprint) -> float:
        return similarity_score(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(threshold={self.threshold})"


class PerceptualHash(Signature):
    """
    DCT-based perceptual hash.

    The image is reduced to a 32x32 luma grid with nearest-neighbour
    sampling, and the top-left 8x8 block of its type-II DCT is computed
    directly from a fixed cosine table. Each of the 64 coefficients sets
    one bit when it is at or above the mean of the 63 non-DC coefficients.
    Coefficient ``k1 * 8 + k2`` lands in bit ``63 - (k1 * 8 + k2)``.
    """

    name = "phash"

    def compute(self, image: Image.Image) -> Fingerprint:
        gray = image.convert("L").resize((SAMPLE_SIZE, SAMPLE_SIZE), Image.NEAREST)
        centered = np.asarray(gray, dtype=np.float64) - 128.0

        coefficients = np.empty((COEFFICIENT_SIZE, COEFFICIENT_SIZE), dtype=np.float64)
        for k1 in range(COEFFICIENT_SIZE):
            for k2 in range(COEFFICIENT_SIZE):
                basis = np.outer(_COSINES[:, k1], _COSINES[:, k2])
                coefficients[k1, k2] = np.sum(basis * centered)

        flat = coefficients.flatten()
        # DC term reflects overall brightness, not structure
        average = flat[1:].mean()
        return Fingerprint.from_bits(flat >= average)


class DifferenceHash(Signature):
    """64-bit gradient hash from ``imagehash.dhash``."""

    name = "dhash"

    def compute(self, image: Image.Image) -> Fingerprint:
        digest = imagehash.dhash(image, hash_size=COEFFICIENT_SIZE)
        return Fingerprint.from_bits(digest.hash.flatten())


class ConstantSignature(Signature):
    """Every image maps to the same fingerprint, so every image is a duplicate."""

    name = "constant"

    def compute(self, image: Image.Image) -> Fingerprint:
        return Fingerprint(0)

    def distance(self, a: Fingerprint, b: Fingerprint) -> int:
        return 0

    def is_similar(self, a: Fingerprint, b: Fingerprint) -> bool:
        return True

    def similarity(self, a: Fingerprint, b: Fingerprint) -> float:
        return 1.0


SIGNATURES: Dict[str, Type[Signature]] = {
    PerceptualHash.name: PerceptualHash,
    DifferenceHash.name: DifferenceHash,
    ConstantSignature.name: ConstantSignature,
}


def get_signature(name: str = "phash", threshold: int = DEFAULT_THRESHOLD) -> Signature:
    try:
        signature_cls = SIGNATURES[name]
    except KeyError:
        raise ValueError(f"Unknown signature: {name}") from None
    return signature_cls(threshold=threshold)


def compute_fingerprint(image: Image.Image) -> Fingerprint:
    """Perceptual hash of ``image`` with the default parameters."""
    return PerceptualHash().compute(image)
