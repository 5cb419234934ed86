# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Structured metadata directories

A directory holds typed values for one metadata category (IFD0, thumbnail,
GPS, maker notes) keyed by numeric tag, and renders them as human-readable
descriptions.

Copyright 2025 DNAi inc.
"""

from enum import Enum
from typing import Any, Dict, Iterator, Optional

from exifbridge.exceptions import InvalidTagError
from exifbridge.exif_tags import (
    EXIF_IFD0_TAG_NAMES,
    EXIF_THUMBNAIL_TAG_NAMES,
    GPS_TAG_NAMES,
    OLYMPUS_CAMERA_SETTINGS_TAG_NAMES,
    OLYMPUS_IMAGE_PROCESSING_TAG_NAMES,
    OLYMPUS_MAKERNOTE_TAG_NAMES,
    PANASONIC_RAW_IFD0_TAG_NAMES,
)
from exifbridge.value_formatter import format_tag_value


class DirectoryKind(Enum):
    """Directory instances a tag can be written to."""
    EXIF_IFD0 = "exif_ifd0"
    EXIF_THUMBNAIL = "exif_thumbnail"
    GPS = "gps"
    OLYMPUS_MAKERNOTE = "olympus_makernote"
    OLYMPUS_CAMERA_SETTINGS = "olympus_camera_settings"
    OLYMPUS_IMAGE_PROCESSING = "olympus_image_processing"
    PANASONIC_RAW_IFD0 = "panasonic_raw_ifd0"


class Directory:
    """
    Typed tag storage for one metadata category.

    Subclasses set NAME and TAG_NAMES; everything else is shared.
    """

    NAME = "Unknown"
    TAG_NAMES: Dict[int, str] = {}

    def __init__(self):
        self._values: Dict[int, Any] = {}

    @property
    def name(self) -> str:
        return self.NAME

    def set_object(self, tag: int, value: Any) -> None:
        """
        Store a typed value for a tag, replacing any previous one.

        Args:
            tag: Numeric tag identifier
            value: str, int, Rational or list of Rational

        Raises:
            InvalidTagError: If the tag is not a non-negative integer or the
                value is None
        """
        if not isinstance(tag, int) or isinstance(tag, bool) or tag < 0:
            raise InvalidTagError(f"Tag must be a non-negative integer, got {tag!r}")
        if value is None:
            raise InvalidTagError(f"Cannot store None for tag 0x{tag:04x} in {self.NAME}")
        self._values[tag] = value

    def get_object(self, tag: int) -> Any:
        return self._values.get(tag)

    def contains_tag(self, tag: int) -> bool:
        return tag in self._values

    def get_tag_name(self, tag: int) -> str:
        """Return the tag's name, or "Unknown tag (0x....)" for tags outside the table."""
        name = self.TAG_NAMES.get(tag)
        if name is None:
            return f"Unknown tag (0x{tag:04x})"
        return name

    def has_tag_name(self, tag: int) -> bool:
        return tag in self.TAG_NAMES

    def get_description(self, tag: int) -> Optional[str]:
        """
        Render the stored value of a tag as a human-readable string.

        Returns:
            Description, or None when the tag holds no value or the value
            cannot be described
        """
        value = self._values.get(tag)
        if value is None:
            return None
        return format_tag_value(self.get_tag_name(tag), value)

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self)} tags>"


class ExifIFD0Directory(Directory):
    NAME = "Exif IFD0"
    TAG_NAMES = EXIF_IFD0_TAG_NAMES


class ExifThumbnailDirectory(Directory):
    NAME = "Exif Thumbnail"
    TAG_NAMES = EXIF_THUMBNAIL_TAG_NAMES


class GpsDirectory(Directory):
    NAME = "GPS"
    TAG_NAMES = GPS_TAG_NAMES


class OlympusMakernoteDirectory(Directory):
    NAME = "Olympus Makernote"
    TAG_NAMES = OLYMPUS_MAKERNOTE_TAG_NAMES


class OlympusCameraSettingsMakernoteDirectory(Directory):
    NAME = "Olympus Camera Settings"
    TAG_NAMES = OLYMPUS_CAMERA_SETTINGS_TAG_NAMES


class OlympusImageProcessingMakernoteDirectory(Directory):
    NAME = "Olympus Image Processing"
    TAG_NAMES = OLYMPUS_IMAGE_PROCESSING_TAG_NAMES


class PanasonicRawIFD0Directory(Directory):
    NAME = "PanasonicRaw Exif IFD0"
    TAG_NAMES = PANASONIC_RAW_IFD0_TAG_NAMES


_DIRECTORY_CLASSES = {
    DirectoryKind.EXIF_IFD0: ExifIFD0Directory,
    DirectoryKind.EXIF_THUMBNAIL: ExifThumbnailDirectory,
    DirectoryKind.GPS: GpsDirectory,
    DirectoryKind.OLYMPUS_MAKERNOTE: OlympusMakernoteDirectory,
    DirectoryKind.OLYMPUS_CAMERA_SETTINGS: OlympusCameraSettingsMakernoteDirectory,
    DirectoryKind.OLYMPUS_IMAGE_PROCESSING: OlympusImageProcessingMakernoteDirectory,
    DirectoryKind.PANASONIC_RAW_IFD0: PanasonicRawIFD0Directory,
}


class DirectorySet:
    """
    One directory instance per DirectoryKind.

    A translator owns a DirectorySet and overwrites its contents on every
    call; share one between translators only if their calls are serialized.

    Example:
        >>> directories = DirectorySet()
        >>> directories.get(DirectoryKind.GPS).set_object(0x0001, "N")
        >>> directories.get(DirectoryKind.GPS).get_description(0x0001)
        'North'
    """

    def __init__(self, directories: Optional[Dict[DirectoryKind, Directory]] = None):
        self._directories: Dict[DirectoryKind, Directory] = {
            kind: directory_class() for kind, directory_class in _DIRECTORY_CLASSES.items()
        }
        if directories:
            self._directories.update(directories)

    def get(self, kind: DirectoryKind) -> Directory:
        return self._directories[kind]

    def clear_all(self) -> None:
        """Drop every stored value in every directory."""
        for directory in self._directories.values():
            directory.clear()

    def __iter__(self) -> Iterator[Directory]:
        return iter(self._directories.values())

    def __len__(self) -> int:
        return len(self._directories)
