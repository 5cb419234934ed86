"""Tests for structured metadata directories."""

import pytest

from exifbridge.directories import (
    DirectoryKind,
    DirectorySet,
    ExifIFD0Directory,
    ExifThumbnailDirectory,
    GpsDirectory,
    OlympusImageProcessingMakernoteDirectory,
    PanasonicRawIFD0Directory,
)
from exifbridge.exceptions import InvalidTagError
from exifbridge.exif_tags import (
    TAG_FNUMBER,
    TAG_GPS_LATITUDE_REF,
    TAG_IMAGE_WIDTH,
    TAG_INTEROP_INDEX,
    TAG_ORIENTATION,
    TAG_PANASONIC_ISO,
)
from exifbridge.rational import Rational


def test_set_and_describe():
    directory = ExifIFD0Directory()
    directory.set_object(TAG_ORIENTATION, 6)

    assert directory.contains_tag(TAG_ORIENTATION)
    assert directory.get_object(TAG_ORIENTATION) == 6
    assert directory.get_description(TAG_ORIENTATION) == "Rotate 90 CW"
    assert len(directory) == 1


def test_set_object_replaces_value():
    directory = ExifIFD0Directory()
    directory.set_object(TAG_FNUMBER, Rational(28, 10))
    directory.set_object(TAG_FNUMBER, Rational(4, 1))

    assert directory.get_description(TAG_FNUMBER) == "f/4"
    assert directory.get_object(TAG_FNUMBER) == (4, 1)
    assert len(directory) == 1


@pytest.mark.parametrize("tag, value", [(TAG_ORIENTATION, None), (-1, 1), ("Orientation", 1), (True, 1)])
def test_set_object_rejects_unusable_input(tag, value):
    with pytest.raises(InvalidTagError):
        ExifIFD0Directory().set_object(tag, value)


def test_description_of_missing_tag_is_none():
    assert ExifIFD0Directory().get_description(TAG_ORIENTATION) is None


def test_tag_names_are_scoped_by_directory():
    """The same identifier names different tags in different directories."""

    assert ExifIFD0Directory().get_tag_name(TAG_IMAGE_WIDTH) == "ImageWidth"
    assert ExifThumbnailDirectory().get_tag_name(TAG_IMAGE_WIDTH) == "ThumbnailImageWidth"
    assert ExifIFD0Directory().get_tag_name(TAG_INTEROP_INDEX) == "InteroperabilityIndex"
    assert GpsDirectory().get_tag_name(TAG_GPS_LATITUDE_REF) == "GPSLatitudeRef"
    assert PanasonicRawIFD0Directory().get_tag_name(TAG_PANASONIC_ISO) == "ISO"
    assert OlympusImageProcessingMakernoteDirectory().get_tag_name(0x1113) == "AspectFrame"


def test_unknown_tag_name():
    directory = GpsDirectory()

    assert directory.get_tag_name(0x9999) == "Unknown tag (0x9999)"
    assert not directory.has_tag_name(0x9999)


def test_clear():
    directory = GpsDirectory()
    directory.set_object(TAG_GPS_LATITUDE_REF, "N")
    directory.clear()

    assert len(directory) == 0
    assert directory.get_description(TAG_GPS_LATITUDE_REF) is None


def test_directory_set_holds_one_directory_per_kind():
    directories = DirectorySet()

    assert len(directories) == len(DirectoryKind)
    assert isinstance(directories.get(DirectoryKind.EXIF_IFD0), ExifIFD0Directory)
    assert isinstance(directories.get(DirectoryKind.EXIF_THUMBNAIL), ExifThumbnailDirectory)
    assert directories.get(DirectoryKind.GPS) is directories.get(DirectoryKind.GPS)
    assert len({id(directory) for directory in directories}) == len(DirectoryKind)


def test_directory_set_clear_all():
    directories = DirectorySet()
    directories.get(DirectoryKind.EXIF_IFD0).set_object(TAG_ORIENTATION, 1)
    directories.get(DirectoryKind.GPS).set_object(TAG_GPS_LATITUDE_REF, "S")

    directories.clear_all()

    assert all(len(directory) == 0 for directory in directories)


def test_directory_set_accepts_replacements():
    gps = GpsDirectory()
    directories = DirectorySet({DirectoryKind.GPS: gps})

    assert directories.get(DirectoryKind.GPS) is gps
