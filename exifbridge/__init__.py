# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
exifbridge - EXIF tag translation between flat and structured metadata

Translates string attributes reported by flat, string-keyed EXIF accessors
into typed directory tags, and describes them in five groups: Exif,
Exif Thumbnail, GPS, XMP and Exif Raw.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from exifbridge.exceptions import (
    ExifBridgeError,
    CatalogError,
    InvalidTagError,
    SourceStoreError,
)
from exifbridge.rational import Rational, to_rational, to_rational_array
from exifbridge.value_coercion import TagFormat, coerce
from exifbridge.directories import Directory, DirectoryKind, DirectorySet
from exifbridge.catalog import (
    ALL_TAGS,
    NEVER_NULL_TAGS,
    Mapped,
    TagGroup,
    TagMapper,
    Unmapped,
    entries_for,
    group_of,
    is_spurious_zero,
    lookup,
)
from exifbridge.source_store import MappingSourceStore, SourceStore
from exifbridge.translator import TagTranslator, TranslationConfig, describe_all

__all__ = [
    "ExifBridgeError",
    "CatalogError",
    "InvalidTagError",
    "SourceStoreError",
    "Rational",
    "to_rational",
    "to_rational_array",
    "TagFormat",
    "coerce",
    "Directory",
    "DirectoryKind",
    "DirectorySet",
    "ALL_TAGS",
    "NEVER_NULL_TAGS",
    "Mapped",
    "TagGroup",
    "TagMapper",
    "Unmapped",
    "entries_for",
    "group_of",
    "is_spurious_zero",
    "lookup",
    "MappingSourceStore",
    "SourceStore",
    "TagTranslator",
    "TranslationConfig",
    "describe_all",
]
