"""Tests for fingerprint distance metrics."""

from hypothesis import given, strategies as st

from imgdedupe.dedup.distance import hamming_distance, is_similar, similarity_score
from imgdedupe.dedup.signature import Fingerprint

fingerprints = st.integers(min_value=0, max_value=2**64 - 1).map(Fingerprint)


class TestHammingDistance:
    def test_known_values(self):
        assert hamming_distance(Fingerprint(0), Fingerprint(0b111)) == 3
        assert hamming_distance(Fingerprint(0), Fingerprint(2**64 - 1)) == 64
        assert hamming_distance(Fingerprint(0xF0), Fingerprint(0x0F)) == 8

    @given(a=fingerprints, b=fingerprints)
    def test_symmetric(self, a, b):
        assert hamming_distance(a, b) == hamming_distance(b, a)

    @given(a=fingerprints, b=fingerprints)
    def test_bounded(self, a, b):
        assert 0 <= hamming_distance(a, b) <= 64

    @given(a=fingerprints)
    def test_self_distance_zero_and_similar(self, a):
        assert hamming_distance(a, a) == 0
        assert is_similar(hamming_distance(a, a))


class TestSimilarity:
    def test_threshold_boundary(self):
        assert is_similar(7)
        assert not is_similar(8)

    def test_boundary_through_fingerprints(self):
        seven = Fingerprint(0b1111111)
        eight = Fingerprint(0b11111111)
        assert is_similar(hamming_distance(Fingerprint(0), seven))
        assert not is_similar(hamming_distance(Fingerprint(0), eight))

    def test_custom_threshold(self):
        assert is_similar(2, threshold=3)
        assert not is_similar(3, threshold=3)
        assert not is_similar(0, threshold=0)

    def test_similarity_score(self):
        assert similarity_score(Fingerprint(0), Fingerprint(0)) == 1.0
        assert similarity_score(Fingerprint(0), Fingerprint(2**64 - 1)) == 0.0
        assert similarity_score(Fingerprint(0), Fingerprint(0xFFFF_FFFF)) == 0.5

    @given(a=fingerprints, b=fingerprints)
    def test_similarity_score_range(self, a, b):
        assert 0.0 <= similarity_score(a, b) <= 1.0
