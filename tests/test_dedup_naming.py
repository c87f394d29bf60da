"""Tests for output naming of duplicate groups."""

from pathlib import Path

from hypothesis import given, strategies as st

from imgdedupe.dedup.cluster import cluster_duplicates
from imgdedupe.dedup.items import DuplicateGroup, ProcessedItem
from imgdedupe.dedup.naming import name_group, output_name
from imgdedupe.dedup.signature import Fingerprint
from imgdedupe.media.formats import ImageFormat


def make_item(value: int, name: str, image_format: ImageFormat = ImageFormat.PNG) -> ProcessedItem:
    return ProcessedItem(
        fingerprint=Fingerprint(value),
        source_path=Path(name),
        pixel_count=100,
        image_format=image_format,
    )


class TestOutputName:
    def test_canonical_name(self):
        name = output_name(Fingerprint(0xAB), Fingerprint(0xAB), 0, ImageFormat.PNG)
        assert name == "00000000000000ab.png"

    def test_member_name(self):
        name = output_name(Fingerprint(0xAB), Fingerprint(0xAC), 2, ImageFormat.JPEG)
        assert name == "00000000000000ab-2-00000000000000ac.jpg"

    def test_extension_follows_format(self):
        fp = Fingerprint(1)
        assert output_name(fp, fp, 0, ImageFormat.GIF).endswith(".gif")
        assert output_name(fp, fp, 0, ImageFormat.WEBP).endswith(".webp")
        assert output_name(fp, fp, 0, ImageFormat.JPEG).endswith(".jpg")

    def test_rank_zero_ignores_member(self):
        canonical = Fingerprint(5)
        assert output_name(canonical, Fingerprint(1), 0, ImageFormat.PNG) == output_name(
            canonical, Fingerprint(2), 0, ImageFormat.PNG
        )


class TestNameGroup:
    def test_single_item_has_no_suffix(self):
        item = make_item(0xFFFF, "solo.png")
        (group,) = cluster_duplicates([item])

        assert name_group(group) == [(item, "000000000000ffff.png")]

    def test_canonical_gets_rank_zero(self):
        a = make_item(0x0, "A.png")
        b = make_item(0x7, "B.jpeg", ImageFormat.JPEG)
        group = DuplicateGroup(members=(a, b))

        named = name_group(group)

        assert named == [
            (b, "0000000000000007.jpg"),
            (a, "0000000000000007-1-0000000000000000.png"),
        ]

    def test_ranks_follow_reverse_group_order(self):
        members = tuple(make_item(v, f"{v}.png") for v in (1, 2, 3))
        named = name_group(DuplicateGroup(members=members))

        assert [item.fingerprint.value for item, _ in named] == [3, 2, 1]
        assert [name.split("-")[1] for _, name in named[1:]] == ["1", "2"]

    def test_end_to_end_names(self):
        a = make_item(0x0, "A.png")
        b = make_item(0x7, "B.png")
        c = make_item(2**64 - 1, "C.png")

        groups = cluster_duplicates([a, b, c])
        names = [[name for _, name in name_group(group)] for group in groups]

        assert names == [
            ["0000000000000007.png", "0000000000000007-1-0000000000000000.png"],
            ["ffffffffffffffff.png"],
        ]

    @given(values=st.lists(st.integers(min_value=0, max_value=3), min_size=1, max_size=12))
    def test_names_unique_within_group(self, values):
        """Identical fingerprints still get distinct names through their rank."""
        members = tuple(make_item(v, f"m{i}.png") for i, v in enumerate(values))
        named = name_group(DuplicateGroup(members=members))
        names = [name for _, name in named]
        assert len(set(names)) == len(names)
