# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Tag catalog

Static translation table from source attribute names to directory tags.
Every known source attribute appears exactly once, in one of five groups:

- Exif: IFD0 and EXIF sub-IFD attributes
- Exif Thumbnail: IFD1 thumbnail location
- GPS: GPS IFD attributes
- XMP: the raw XMP packet
- Exif Raw: DNG, Olympus ORF and Panasonic RW2 specific attributes

Attribute names are those of androidx ExifInterface 1.3; tag identifiers
follow the EXIF 2.32 numbering and the maker note layouts in exif_tags.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from exifbridge import exif_tags as tags
from exifbridge import source_keys as keys
from exifbridge.directories import DirectoryKind
from exifbridge.exceptions import CatalogError
from exifbridge.value_coercion import TagFormat


class TagGroup(Enum):
    """Logical partitions of the catalog, valued by their output label."""
    BASE = "Exif"
    THUMBNAIL = "Exif Thumbnail"
    GPS = "GPS"
    XMP = "XMP"
    RAW = "Exif Raw"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> 'TagGroup':
        for group in cls:
            if group.value == label:
                return group
        raise ValueError(f"Unknown group label: {label}")


@dataclass(frozen=True)
class TagMapper:
    """Where a source attribute lands: tag, owning directory and value format."""
    tag: int
    directory: DirectoryKind
    format: Optional[TagFormat]


@dataclass(frozen=True)
class Mapped:
    """Catalog entry with a directory counterpart."""
    source_key: str
    mapper: TagMapper


@dataclass(frozen=True)
class Unmapped:
    """Catalog entry known to the source with no directory counterpart."""
    source_key: str


CatalogEntry = Union[Mapped, Unmapped]

# Source keys for which the store reports "0" when the attribute is missing
NEVER_NULL_TAGS = frozenset([
    keys.TAG_IMAGE_LENGTH,
    keys.TAG_IMAGE_WIDTH,
    keys.TAG_LIGHT_SOURCE,
    keys.TAG_ORIENTATION,
])


def _ifd0(tag: int, fmt: Optional[TagFormat]) -> TagMapper:
    return TagMapper(tag, DirectoryKind.EXIF_IFD0, fmt)


def _thumbnail(tag: int, fmt: Optional[TagFormat]) -> TagMapper:
    return TagMapper(tag, DirectoryKind.EXIF_THUMBNAIL, fmt)


def _gps(tag: int, fmt: Optional[TagFormat]) -> TagMapper:
    return TagMapper(tag, DirectoryKind.GPS, fmt)


ASCII = TagFormat.ASCII
COMMENT = TagFormat.COMMENT
BYTE = TagFormat.BYTE
SHORT = TagFormat.SHORT
LONG = TagFormat.LONG
RATIONAL = TagFormat.RATIONAL
RATIONAL_ARRAY = TagFormat.RATIONAL_ARRAY
UNDEFINED = TagFormat.UNDEFINED

# ============================================================
# Exif
# ============================================================
_BASE_ROWS: List[Tuple[str, Optional[TagMapper]]] = [
    (keys.TAG_APERTURE_VALUE, _ifd0(tags.TAG_APERTURE, RATIONAL)),
    (keys.TAG_ARTIST, _ifd0(tags.TAG_ARTIST, ASCII)),
    (keys.TAG_BITS_PER_SAMPLE, _ifd0(tags.TAG_BITS_PER_SAMPLE, SHORT)),
    (keys.TAG_BODY_SERIAL_NUMBER, _ifd0(tags.TAG_BODY_SERIAL_NUMBER, ASCII)),
    (keys.TAG_BRIGHTNESS_VALUE, _ifd0(tags.TAG_BRIGHTNESS_VALUE, RATIONAL)),
    (keys.TAG_CAMERA_OWNER_NAME, _ifd0(tags.TAG_CAMERA_OWNER_NAME, ASCII)),
    (keys.TAG_CFA_PATTERN, _ifd0(tags.TAG_CFA_PATTERN, UNDEFINED)),
    (keys.TAG_COLOR_SPACE, _ifd0(tags.TAG_COLOR_SPACE, SHORT)),
    (keys.TAG_COMPONENTS_CONFIGURATION, _ifd0(tags.TAG_COMPONENTS_CONFIGURATION, UNDEFINED)),
    (keys.TAG_COMPRESSED_BITS_PER_PIXEL, _ifd0(tags.TAG_COMPRESSED_AVERAGE_BITS_PER_PIXEL, RATIONAL)),
    (keys.TAG_COMPRESSION, _ifd0(tags.TAG_COMPRESSION, None)),
    (keys.TAG_CONTRAST, _ifd0(tags.TAG_CONTRAST, None)),
    (keys.TAG_COPYRIGHT, _ifd0(tags.TAG_COPYRIGHT, ASCII)),
    (keys.TAG_CUSTOM_RENDERED, _ifd0(tags.TAG_CUSTOM_RENDERED, None)),
    (keys.TAG_DATETIME, _ifd0(tags.TAG_DATETIME, ASCII)),
    (keys.TAG_DATETIME_DIGITIZED, _ifd0(tags.TAG_DATETIME_DIGITIZED, ASCII)),
    (keys.TAG_DATETIME_ORIGINAL, _ifd0(tags.TAG_DATETIME_ORIGINAL, ASCII)),
    (keys.TAG_DEVICE_SETTING_DESCRIPTION, _ifd0(tags.TAG_DEVICE_SETTING_DESCRIPTION, None)),
    (keys.TAG_DIGITAL_ZOOM_RATIO, _ifd0(tags.TAG_DIGITAL_ZOOM_RATIO, RATIONAL)),
    (keys.TAG_EXIF_VERSION, _ifd0(tags.TAG_EXIF_VERSION, UNDEFINED)),
    (keys.TAG_EXPOSURE_BIAS_VALUE, _ifd0(tags.TAG_EXPOSURE_BIAS, RATIONAL)),
    (keys.TAG_EXPOSURE_INDEX, _ifd0(tags.TAG_EXPOSURE_INDEX, None)),
    (keys.TAG_EXPOSURE_MODE, _ifd0(tags.TAG_EXPOSURE_MODE, SHORT)),
    (keys.TAG_EXPOSURE_PROGRAM, _ifd0(tags.TAG_EXPOSURE_PROGRAM, SHORT)),
    (keys.TAG_EXPOSURE_TIME, _ifd0(tags.TAG_EXPOSURE_TIME, RATIONAL)),
    (keys.TAG_FILE_SOURCE, _ifd0(tags.TAG_FILE_SOURCE, None)),
    (keys.TAG_FLASH, _ifd0(tags.TAG_FLASH, SHORT)),
    (keys.TAG_FLASHPIX_VERSION, _ifd0(tags.TAG_FLASHPIX_VERSION, UNDEFINED)),
    (keys.TAG_FLASH_ENERGY, _ifd0(tags.TAG_FLASH_ENERGY, RATIONAL)),
    (keys.TAG_FOCAL_LENGTH, _ifd0(tags.TAG_FOCAL_LENGTH, RATIONAL)),
    (keys.TAG_FOCAL_LENGTH_IN_35MM_FILM, _ifd0(tags.TAG_35MM_FILM_EQUIV_FOCAL_LENGTH, SHORT)),
    (keys.TAG_FOCAL_PLANE_RESOLUTION_UNIT, _ifd0(tags.TAG_FOCAL_PLANE_RESOLUTION_UNIT, None)),
    (keys.TAG_FOCAL_PLANE_X_RESOLUTION, _ifd0(tags.TAG_FOCAL_PLANE_X_RESOLUTION, None)),
    (keys.TAG_FOCAL_PLANE_Y_RESOLUTION, _ifd0(tags.TAG_FOCAL_PLANE_Y_RESOLUTION, None)),
    (keys.TAG_F_NUMBER, _ifd0(tags.TAG_FNUMBER, RATIONAL)),
    (keys.TAG_GAIN_CONTROL, _ifd0(tags.TAG_GAIN_CONTROL, None)),
    (keys.TAG_GAMMA, _ifd0(tags.TAG_GAMMA, RATIONAL)),
    (keys.TAG_IMAGE_DESCRIPTION, _ifd0(tags.TAG_IMAGE_DESCRIPTION, ASCII)),
    (keys.TAG_IMAGE_LENGTH, _ifd0(tags.TAG_IMAGE_HEIGHT, LONG)),
    (keys.TAG_IMAGE_UNIQUE_ID, _ifd0(tags.TAG_IMAGE_UNIQUE_ID, ASCII)),
    (keys.TAG_IMAGE_WIDTH, _ifd0(tags.TAG_IMAGE_WIDTH, LONG)),
    (keys.TAG_INTEROPERABILITY_INDEX, _ifd0(tags.TAG_INTEROP_INDEX, ASCII)),
    (keys.TAG_ISO_SPEED, _ifd0(tags.TAG_ISO_SPEED, None)),
    (keys.TAG_ISO_SPEED_LATITUDE_YYY, _ifd0(tags.TAG_ISO_SPEED_LATITUDE_YYY, LONG)),
    (keys.TAG_ISO_SPEED_LATITUDE_ZZZ, _ifd0(tags.TAG_ISO_SPEED_LATITUDE_ZZZ, LONG)),
    (keys.TAG_LENS_MAKE, _ifd0(tags.TAG_LENS_MAKE, ASCII)),
    (keys.TAG_LENS_MODEL, _ifd0(tags.TAG_LENS_MODEL, ASCII)),
    (keys.TAG_LENS_SERIAL_NUMBER, _ifd0(tags.TAG_LENS_SERIAL_NUMBER, ASCII)),
    (keys.TAG_LENS_SPECIFICATION, _ifd0(tags.TAG_LENS_SPECIFICATION, RATIONAL_ARRAY)),
    (keys.TAG_LIGHT_SOURCE, _ifd0(tags.TAG_LIGHT_SOURCE, None)),
    (keys.TAG_MAKE, _ifd0(tags.TAG_MAKE, ASCII)),
    (keys.TAG_MAKER_NOTE, _ifd0(tags.TAG_MAKERNOTE, None)),
    (keys.TAG_MAX_APERTURE_VALUE, _ifd0(tags.TAG_MAX_APERTURE, RATIONAL)),
    (keys.TAG_METERING_MODE, _ifd0(tags.TAG_METERING_MODE, SHORT)),
    (keys.TAG_MODEL, _ifd0(tags.TAG_MODEL, ASCII)),
    (keys.TAG_NEW_SUBFILE_TYPE, _ifd0(tags.TAG_NEW_SUBFILE_TYPE, LONG)),
    (keys.TAG_OECF, _ifd0(tags.TAG_OPTO_ELECTRIC_CONVERSION_FUNCTION, None)),
    (keys.TAG_OFFSET_TIME, _ifd0(tags.TAG_TIME_ZONE, ASCII)),
    (keys.TAG_OFFSET_TIME_DIGITIZED, _ifd0(tags.TAG_TIME_ZONE_DIGITIZED, ASCII)),
    (keys.TAG_OFFSET_TIME_ORIGINAL, _ifd0(tags.TAG_TIME_ZONE_ORIGINAL, ASCII)),
    (keys.TAG_ORIENTATION, _ifd0(tags.TAG_ORIENTATION, SHORT)),
    (keys.TAG_PHOTOGRAPHIC_SENSITIVITY, _ifd0(tags.TAG_ISO_EQUIVALENT, SHORT)),
    (keys.TAG_PHOTOMETRIC_INTERPRETATION, _ifd0(tags.TAG_PHOTOMETRIC_INTERPRETATION, None)),
    (keys.TAG_PIXEL_X_DIMENSION, _ifd0(tags.TAG_EXIF_IMAGE_WIDTH, LONG)),
    (keys.TAG_PIXEL_Y_DIMENSION, _ifd0(tags.TAG_EXIF_IMAGE_HEIGHT, LONG)),
    (keys.TAG_PLANAR_CONFIGURATION, _ifd0(tags.TAG_PLANAR_CONFIGURATION, None)),
    (keys.TAG_PRIMARY_CHROMATICITIES, _ifd0(tags.TAG_PRIMARY_CHROMATICITIES, None)),
    (keys.TAG_RECOMMENDED_EXPOSURE_INDEX, _ifd0(tags.TAG_RECOMMENDED_EXPOSURE_INDEX, None)),
    (keys.TAG_REFERENCE_BLACK_WHITE, _ifd0(tags.TAG_REFERENCE_BLACK_WHITE, None)),
    (keys.TAG_RELATED_SOUND_FILE, _ifd0(tags.TAG_RELATED_SOUND_FILE, ASCII)),
    (keys.TAG_RESOLUTION_UNIT, _ifd0(tags.TAG_RESOLUTION_UNIT, SHORT)),
    (keys.TAG_ROWS_PER_STRIP, _ifd0(tags.TAG_ROWS_PER_STRIP, None)),
    (keys.TAG_SAMPLES_PER_PIXEL, _ifd0(tags.TAG_SAMPLES_PER_PIXEL, None)),
    (keys.TAG_SATURATION, _ifd0(tags.TAG_SATURATION, None)),
    (keys.TAG_SCENE_CAPTURE_TYPE, _ifd0(tags.TAG_SCENE_CAPTURE_TYPE, SHORT)),
    (keys.TAG_SCENE_TYPE, _ifd0(tags.TAG_SCENE_TYPE, UNDEFINED)),
    (keys.TAG_SENSING_METHOD, _ifd0(tags.TAG_SENSING_METHOD, None)),
    (keys.TAG_SENSITIVITY_TYPE, _ifd0(tags.TAG_SENSITIVITY_TYPE, None)),
    (keys.TAG_SHARPNESS, _ifd0(tags.TAG_SHARPNESS, None)),
    (keys.TAG_SHUTTER_SPEED_VALUE, _ifd0(tags.TAG_SHUTTER_SPEED, None)),
    (keys.TAG_SOFTWARE, _ifd0(tags.TAG_SOFTWARE, ASCII)),
    (keys.TAG_SPATIAL_FREQUENCY_RESPONSE, _ifd0(tags.TAG_SPATIAL_FREQ_RESPONSE, None)),
    (keys.TAG_SPECTRAL_SENSITIVITY, _ifd0(tags.TAG_SPECTRAL_SENSITIVITY, ASCII)),
    (keys.TAG_STANDARD_OUTPUT_SENSITIVITY, _ifd0(tags.TAG_STANDARD_OUTPUT_SENSITIVITY, None)),
    (keys.TAG_STRIP_BYTE_COUNTS, _ifd0(tags.TAG_STRIP_BYTE_COUNTS, LONG)),
    (keys.TAG_STRIP_OFFSETS, _ifd0(tags.TAG_STRIP_OFFSETS, LONG)),
    (keys.TAG_SUBFILE_TYPE, _ifd0(tags.TAG_SUBFILE_TYPE, SHORT)),
    (keys.TAG_SUBJECT_AREA, _ifd0(tags.TAG_SUBJECT_AREA, SHORT)),
    (keys.TAG_SUBJECT_DISTANCE, _ifd0(tags.TAG_SUBJECT_DISTANCE, RATIONAL)),
    (keys.TAG_SUBJECT_DISTANCE_RANGE, _ifd0(tags.TAG_SUBJECT_DISTANCE_RANGE, SHORT)),
    (keys.TAG_SUBJECT_LOCATION, _ifd0(tags.TAG_SUBJECT_LOCATION, SHORT)),
    (keys.TAG_SUBSEC_TIME, _ifd0(tags.TAG_SUBSECOND_TIME, ASCII)),
    (keys.TAG_SUBSEC_TIME_DIGITIZED, _ifd0(tags.TAG_SUBSECOND_TIME_DIGITIZED, ASCII)),
    (keys.TAG_SUBSEC_TIME_ORIGINAL, _ifd0(tags.TAG_SUBSECOND_TIME_ORIGINAL, ASCII)),
    # IFD1 dimensions: written to the thumbnail directory, reported under Exif
    (keys.TAG_THUMBNAIL_IMAGE_LENGTH, _thumbnail(tags.TAG_THUMBNAIL_IMAGE_HEIGHT, LONG)),
    (keys.TAG_THUMBNAIL_IMAGE_WIDTH, _thumbnail(tags.TAG_THUMBNAIL_IMAGE_WIDTH, LONG)),
    (keys.TAG_TRANSFER_FUNCTION, _ifd0(tags.TAG_TRANSFER_FUNCTION, SHORT)),
    (keys.TAG_USER_COMMENT, _ifd0(tags.TAG_USER_COMMENT, COMMENT)),
    (keys.TAG_WHITE_BALANCE, _ifd0(tags.TAG_WHITE_BALANCE_MODE, SHORT)),
    (keys.TAG_WHITE_POINT, _ifd0(tags.TAG_WHITE_POINT, RATIONAL)),
    (keys.TAG_X_RESOLUTION, _ifd0(tags.TAG_X_RESOLUTION, RATIONAL)),
    (keys.TAG_Y_CB_CR_COEFFICIENTS, _ifd0(tags.TAG_YCBCR_COEFFICIENTS, RATIONAL)),
    (keys.TAG_Y_CB_CR_POSITIONING, _ifd0(tags.TAG_YCBCR_POSITIONING, SHORT)),
    (keys.TAG_Y_CB_CR_SUB_SAMPLING, _ifd0(tags.TAG_YCBCR_SUBSAMPLING, SHORT)),
    (keys.TAG_Y_RESOLUTION, _ifd0(tags.TAG_Y_RESOLUTION, RATIONAL)),
]

# ============================================================
# Exif Thumbnail
# ============================================================
_THUMBNAIL_ROWS: List[Tuple[str, Optional[TagMapper]]] = [
    (keys.TAG_JPEG_INTERCHANGE_FORMAT, _thumbnail(tags.TAG_THUMBNAIL_OFFSET, LONG)),
    (keys.TAG_JPEG_INTERCHANGE_FORMAT_LENGTH, _thumbnail(tags.TAG_THUMBNAIL_LENGTH, LONG)),
]

# ============================================================
# GPS
# ============================================================
_GPS_ROWS: List[Tuple[str, Optional[TagMapper]]] = [
    (keys.TAG_GPS_ALTITUDE, _gps(tags.TAG_GPS_ALTITUDE, RATIONAL)),
    (keys.TAG_GPS_ALTITUDE_REF, _gps(tags.TAG_GPS_ALTITUDE_REF, BYTE)),
    (keys.TAG_GPS_AREA_INFORMATION, _gps(tags.TAG_GPS_AREA_INFORMATION, COMMENT)),
    (keys.TAG_GPS_DATESTAMP, _gps(tags.TAG_GPS_DATE_STAMP, ASCII)),
    (keys.TAG_GPS_DEST_BEARING, _gps(tags.TAG_GPS_DEST_BEARING, RATIONAL)),
    (keys.TAG_GPS_DEST_BEARING_REF, _gps(tags.TAG_GPS_DEST_BEARING_REF, ASCII)),
    (keys.TAG_GPS_DEST_DISTANCE, _gps(tags.TAG_GPS_DEST_DISTANCE, RATIONAL)),
    (keys.TAG_GPS_DEST_DISTANCE_REF, _gps(tags.TAG_GPS_DEST_DISTANCE_REF, ASCII)),
    (keys.TAG_GPS_DEST_LATITUDE, _gps(tags.TAG_GPS_DEST_LATITUDE, RATIONAL_ARRAY)),
    (keys.TAG_GPS_DEST_LATITUDE_REF, _gps(tags.TAG_GPS_DEST_LATITUDE_REF, ASCII)),
    (keys.TAG_GPS_DEST_LONGITUDE, _gps(tags.TAG_GPS_DEST_LONGITUDE, RATIONAL_ARRAY)),
    (keys.TAG_GPS_DEST_LONGITUDE_REF, _gps(tags.TAG_GPS_DEST_LONGITUDE_REF, ASCII)),
    (keys.TAG_GPS_DIFFERENTIAL, _gps(tags.TAG_GPS_DIFFERENTIAL, SHORT)),
    (keys.TAG_GPS_DOP, _gps(tags.TAG_GPS_DOP, RATIONAL)),
    (keys.TAG_GPS_H_POSITIONING_ERROR, _gps(tags.TAG_GPS_H_POSITIONING_ERROR, RATIONAL)),
    (keys.TAG_GPS_IMG_DIRECTION, _gps(tags.TAG_GPS_IMG_DIRECTION, RATIONAL)),
    (keys.TAG_GPS_IMG_DIRECTION_REF, _gps(tags.TAG_GPS_IMG_DIRECTION_REF, ASCII)),
    (keys.TAG_GPS_LATITUDE, _gps(tags.TAG_GPS_LATITUDE, RATIONAL_ARRAY)),
    (keys.TAG_GPS_LATITUDE_REF, _gps(tags.TAG_GPS_LATITUDE_REF, ASCII)),
    (keys.TAG_GPS_LONGITUDE, _gps(tags.TAG_GPS_LONGITUDE, RATIONAL_ARRAY)),
    (keys.TAG_GPS_LONGITUDE_REF, _gps(tags.TAG_GPS_LONGITUDE_REF, ASCII)),
    (keys.TAG_GPS_MAP_DATUM, _gps(tags.TAG_GPS_MAP_DATUM, ASCII)),
    (keys.TAG_GPS_MEASURE_MODE, _gps(tags.TAG_GPS_MEASURE_MODE, ASCII)),
    (keys.TAG_GPS_PROCESSING_METHOD, _gps(tags.TAG_GPS_PROCESSING_METHOD, COMMENT)),
    (keys.TAG_GPS_SATELLITES, _gps(tags.TAG_GPS_SATELLITES, ASCII)),
    (keys.TAG_GPS_SPEED, _gps(tags.TAG_GPS_SPEED, RATIONAL)),
    (keys.TAG_GPS_SPEED_REF, _gps(tags.TAG_GPS_SPEED_REF, ASCII)),
    (keys.TAG_GPS_STATUS, _gps(tags.TAG_GPS_STATUS, ASCII)),
    (keys.TAG_GPS_TIMESTAMP, _gps(tags.TAG_GPS_TIME_STAMP, RATIONAL_ARRAY)),
    (keys.TAG_GPS_TRACK, _gps(tags.TAG_GPS_TRACK, RATIONAL)),
    (keys.TAG_GPS_TRACK_REF, _gps(tags.TAG_GPS_TRACK_REF, ASCII)),
    (keys.TAG_GPS_VERSION_ID, _gps(tags.TAG_GPS_VERSION_ID, BYTE)),
]

# ============================================================
# XMP
# ============================================================
_XMP_ROWS: List[Tuple[str, Optional[TagMapper]]] = [
    (keys.TAG_XMP, None),
]

# ============================================================
# Exif Raw
# ============================================================
_RAW_ROWS: List[Tuple[str, Optional[TagMapper]]] = [
    # DNG
    (keys.TAG_DEFAULT_CROP_SIZE, None),
    (keys.TAG_DNG_VERSION, None),
    # ORF
    (keys.TAG_ORF_ASPECT_FRAME,
     TagMapper(tags.TAG_OLYMPUS_ASPECT_FRAME, DirectoryKind.OLYMPUS_IMAGE_PROCESSING, None)),
    (keys.TAG_ORF_PREVIEW_IMAGE_LENGTH,
     TagMapper(tags.TAG_OLYMPUS_PREVIEW_IMAGE_LENGTH, DirectoryKind.OLYMPUS_CAMERA_SETTINGS, None)),
    (keys.TAG_ORF_PREVIEW_IMAGE_START,
     TagMapper(tags.TAG_OLYMPUS_PREVIEW_IMAGE_START, DirectoryKind.OLYMPUS_CAMERA_SETTINGS, None)),
    (keys.TAG_ORF_THUMBNAIL_IMAGE,
     TagMapper(tags.TAG_OLYMPUS_THUMBNAIL_IMAGE, DirectoryKind.OLYMPUS_MAKERNOTE, None)),
    # RW2
    (keys.TAG_RW2_ISO,
     TagMapper(tags.TAG_PANASONIC_ISO, DirectoryKind.PANASONIC_RAW_IFD0, None)),
    (keys.TAG_RW2_JPG_FROM_RAW,
     TagMapper(tags.TAG_PANASONIC_JPG_FROM_RAW, DirectoryKind.PANASONIC_RAW_IFD0, None)),
    (keys.TAG_RW2_SENSOR_BOTTOM_BORDER,
     TagMapper(tags.TAG_PANASONIC_SENSOR_BOTTOM_BORDER, DirectoryKind.PANASONIC_RAW_IFD0, None)),
    (keys.TAG_RW2_SENSOR_LEFT_BORDER,
     TagMapper(tags.TAG_PANASONIC_SENSOR_LEFT_BORDER, DirectoryKind.PANASONIC_RAW_IFD0, None)),
    (keys.TAG_RW2_SENSOR_RIGHT_BORDER,
     TagMapper(tags.TAG_PANASONIC_SENSOR_RIGHT_BORDER, DirectoryKind.PANASONIC_RAW_IFD0, None)),
    (keys.TAG_RW2_SENSOR_TOP_BORDER,
     TagMapper(tags.TAG_PANASONIC_SENSOR_TOP_BORDER, DirectoryKind.PANASONIC_RAW_IFD0, None)),
]


def build_catalog(
    rows_by_group: Mapping[TagGroup, Iterable[Tuple[str, Optional[TagMapper]]]]
) -> Tuple[Mapping[TagGroup, Tuple[CatalogEntry, ...]], Mapping[str, TagGroup]]:
    """
    Turn per-group rows into read-only catalog tables.

    Args:
        rows_by_group: (source key, mapper or None) rows for each group

    Returns:
        Tuple of (group -> entries, source key -> group), both read-only

    Raises:
        CatalogError: If a source key appears more than once
    """
    groups: Dict[TagGroup, Tuple[CatalogEntry, ...]] = {}
    key_groups: Dict[str, TagGroup] = {}

    for group in TagGroup:
        entries: List[CatalogEntry] = []
        for source_key, mapper in rows_by_group.get(group, ()):
            if source_key in key_groups:
                raise CatalogError(
                    f"Source key {source_key!r} listed in {group.label!r} "
                    f"is already listed in {key_groups[source_key].label!r}"
                )
            key_groups[source_key] = group
            if mapper is None:
                entries.append(Unmapped(source_key))
            else:
                entries.append(Mapped(source_key, mapper))
        groups[group] = tuple(entries)

    return MappingProxyType(groups), MappingProxyType(key_groups)


GROUPS, _KEY_GROUPS = build_catalog({
    TagGroup.BASE: _BASE_ROWS,
    TagGroup.THUMBNAIL: _THUMBNAIL_ROWS,
    TagGroup.GPS: _GPS_ROWS,
    TagGroup.XMP: _XMP_ROWS,
    TagGroup.RAW: _RAW_ROWS,
})

# All known source keys across groups
ALL_TAGS: Mapping[str, CatalogEntry] = MappingProxyType({
    entry.source_key: entry
    for entries in GROUPS.values()
    for entry in entries
})


def lookup(source_key: str) -> Optional[CatalogEntry]:
    """
    Look up the catalog entry for a source attribute.

    Returns:
        Mapped or Unmapped for catalogued keys, None for keys the catalog
        does not know
    """
    return ALL_TAGS.get(source_key)


def entries_for(group: TagGroup) -> Tuple[CatalogEntry, ...]:
    return GROUPS[group]


def group_of(source_key: str) -> Optional[TagGroup]:
    return _KEY_GROUPS.get(source_key)


def is_spurious_zero(source_key: str, value: Optional[str]) -> bool:
    """Whether a "0" reported for this key stands for a missing attribute."""
    return value == "0" and source_key in NEVER_NULL_TAGS
