"""Tests for the tag catalog."""

import dataclasses

import pytest

from exifbridge import exif_tags
from exifbridge.catalog import (
    ALL_TAGS,
    NEVER_NULL_TAGS,
    Mapped,
    TagGroup,
    TagMapper,
    Unmapped,
    build_catalog,
    entries_for,
    group_of,
    is_spurious_zero,
    lookup,
)
from exifbridge.directories import DirectoryKind, DirectorySet
from exifbridge.exceptions import CatalogError
from exifbridge.value_coercion import TagFormat


def test_group_labels_in_output_order():
    assert [group.label for group in TagGroup] == ["Exif", "Exif Thumbnail", "GPS", "XMP", "Exif Raw"]
    assert TagGroup.from_label("Exif Raw") is TagGroup.RAW
    with pytest.raises(ValueError):
        TagGroup.from_label("IPTC")


def test_lookup_mapped_entry():
    entry = lookup("FNumber")

    assert isinstance(entry, Mapped)
    assert entry.mapper == TagMapper(exif_tags.TAG_FNUMBER, DirectoryKind.EXIF_IFD0, TagFormat.RATIONAL)


def test_lookup_unmapped_entries():
    assert lookup("Xmp") == Unmapped("Xmp")
    assert isinstance(lookup("DNGVersion"), Unmapped)
    assert isinstance(lookup("DefaultCropSize"), Unmapped)


def test_mapped_without_format_is_not_unmapped():
    """Known-but-not-coercible tags still have a directory counterpart."""

    entry = lookup("AspectFrame")

    assert isinstance(entry, Mapped)
    assert entry.mapper.format is None
    assert entry.mapper.directory is DirectoryKind.OLYMPUS_IMAGE_PROCESSING


def test_unknown_key_is_not_an_error():
    assert lookup("NotAnAttribute") is None
    assert group_of("NotAnAttribute") is None


@pytest.mark.parametrize(
    "key, group",
    [
        ("Make", TagGroup.BASE),
        ("ThumbnailImageWidth", TagGroup.BASE),
        ("JPEGInterchangeFormat", TagGroup.THUMBNAIL),
        ("GPSLatitude", TagGroup.GPS),
        ("Xmp", TagGroup.XMP),
        ("ISO", TagGroup.RAW),
    ],
)
def test_group_of(key, group):
    assert group_of(key) is group
    assert lookup(key) in entries_for(group)


def test_groups_partition_the_key_space():
    keys = [entry.source_key for group in TagGroup for entry in entries_for(group)]

    assert len(keys) == len(set(keys)) == len(ALL_TAGS)


def test_group_sizes():
    assert len(entries_for(TagGroup.THUMBNAIL)) == 2
    assert len(entries_for(TagGroup.GPS)) == 32
    assert len(entries_for(TagGroup.XMP)) == 1
    assert len(entries_for(TagGroup.RAW)) == 12


def test_every_mapped_tag_has_a_name_in_its_directory():
    directories = DirectorySet()
    for entry in ALL_TAGS.values():
        if isinstance(entry, Mapped):
            directory = directories.get(entry.mapper.directory)
            assert directory.has_tag_name(entry.mapper.tag), entry.source_key


def test_white_balance_and_light_source_use_distinct_tags():
    assert lookup("WhiteBalance").mapper.tag == exif_tags.TAG_WHITE_BALANCE_MODE
    assert lookup("LightSource").mapper.tag == exif_tags.TAG_LIGHT_SOURCE


def test_thumbnail_dimensions_target_the_thumbnail_directory():
    for key in ("ThumbnailImageWidth", "ThumbnailImageLength"):
        assert lookup(key).mapper.directory is DirectoryKind.EXIF_THUMBNAIL
    assert lookup("ImageWidth").mapper.directory is DirectoryKind.EXIF_IFD0


def test_gps_formats():
    assert lookup("GPSAltitudeRef").mapper.format is TagFormat.BYTE
    assert lookup("GPSVersionID").mapper.format is TagFormat.BYTE
    assert lookup("GPSTimeStamp").mapper.format is TagFormat.RATIONAL_ARRAY
    assert lookup("GPSProcessingMethod").mapper.format is TagFormat.COMMENT
    assert lookup("GPSDifferential").mapper.format is TagFormat.SHORT


def test_never_null_tags():
    assert NEVER_NULL_TAGS == {"ImageLength", "ImageWidth", "LightSource", "Orientation"}


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("Orientation", "0", True),
        ("ImageWidth", "0", True),
        ("Orientation", "1", False),
        ("Orientation", None, False),
        ("Flash", "0", False),
        ("GPSAltitude", "0", False),
    ],
)
def test_is_spurious_zero(key, value, expected):
    assert is_spurious_zero(key, value) is expected


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        ALL_TAGS["Make"] = Unmapped("Make")
    with pytest.raises(dataclasses.FrozenInstanceError):
        lookup("Make").mapper.tag = 0
    assert isinstance(entries_for(TagGroup.BASE), tuple)


def test_duplicate_key_across_groups_is_rejected():
    mapper = TagMapper(exif_tags.TAG_MAKE, DirectoryKind.EXIF_IFD0, TagFormat.ASCII)

    with pytest.raises(CatalogError):
        build_catalog({
            TagGroup.BASE: [("Make", mapper)],
            TagGroup.RAW: [("Make", None)],
        })


def test_duplicate_key_within_group_is_rejected():
    with pytest.raises(CatalogError):
        build_catalog({TagGroup.XMP: [("Xmp", None), ("Xmp", None)]})


def test_build_catalog_returns_variants():
    mapper = TagMapper(exif_tags.TAG_MAKE, DirectoryKind.EXIF_IFD0, TagFormat.ASCII)

    groups, key_groups = build_catalog({TagGroup.BASE: [("Make", mapper), ("Extra", None)]})

    assert groups[TagGroup.BASE] == (Mapped("Make", mapper), Unmapped("Extra"))
    assert groups[TagGroup.GPS] == ()
    assert key_groups["Extra"] is TagGroup.BASE
