# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Translation of source attributes into grouped tag descriptions

For each group the translator runs two passes over the group's catalog
entries:

1. Populate: coerce every present raw value to its tag format and store it
   in the owning directory.
2. Describe: read back the directory description of every present tag,
   falling back to the raw value when there is none.

Copyright 2025 DNAi inc.
"""

import threading
from typing import Dict, Iterable, Optional, Tuple, Union

from loguru import logger

from exifbridge.catalog import (
    CatalogEntry,
    Mapped,
    TagGroup,
    Unmapped,
    entries_for,
    is_spurious_zero,
)
from exifbridge.directories import DirectorySet
from exifbridge.source_store import SourceStore
from exifbridge.value_coercion import coerce


class TranslationConfig:
    """
    Configuration for a TagTranslator.

    Groups are always emitted in catalog order (Exif, Exif Thumbnail, GPS,
    XMP, Exif Raw), whatever order they are given in.
    """

    def __init__(
        self,
        groups: Optional[Iterable[Union[TagGroup, str]]] = None,
        warn_on_fallback: bool = True,
        reset_directories: bool = True,
    ):
        """
        Initialize translation configuration.

        Args:
            groups: Groups to describe, as TagGroup members or labels
                    (default: all five)
            warn_on_fallback: Log a warning when a tag has no description and
                              its raw value is reported instead
            reset_directories: Clear all directories at the start of each call
        """
        if groups is None:
            selected = set(TagGroup)
        else:
            selected = {
                group if isinstance(group, TagGroup) else TagGroup.from_label(group)
                for group in groups
            }
        self.groups: Tuple[TagGroup, ...] = tuple(g for g in TagGroup if g in selected)
        self.warn_on_fallback = warn_on_fallback
        self.reset_directories = reset_directories


class TagTranslator:
    """
    Translate a source store into per-group description maps.

    The translator owns its directories and overwrites them on every call;
    calls on one translator are serialized.

    Example:
        >>> from exifbridge.source_store import MappingSourceStore
        >>> translator = TagTranslator()
        >>> translator.describe_all(MappingSourceStore({"Orientation": "6"}))
        {'Exif': {'Orientation': 'Rotate 90 CW'}}
    """

    def __init__(
        self,
        directories: Optional[DirectorySet] = None,
        config: Optional[TranslationConfig] = None,
    ):
        self.directories = directories if directories is not None else DirectorySet()
        self.config = config if config is not None else TranslationConfig()
        self._lock = threading.Lock()

    def describe_all(self, source: SourceStore) -> Dict[str, Dict[str, str]]:
        """
        Describe every catalogued attribute the source holds.

        Args:
            source: Source store to read raw attribute strings from

        Returns:
            Mapping of group label to {tag name: description}; groups without
            entries are left out
        """
        with self._lock:
            if self.config.reset_directories:
                self.directories.clear_all()

            result: Dict[str, Dict[str, str]] = {}
            for group in self.config.groups:
                described = self._describe_group(source, entries_for(group))
                if described:
                    result[group.label] = described
            return result

    def _describe_group(
        self,
        source: SourceStore,
        entries: Tuple[CatalogEntry, ...],
    ) -> Dict[str, str]:
        self._populate(source, entries)

        described: Dict[str, str] = {}
        for entry in entries:
            raw = _present_value(source, entry.source_key)
            if raw is None:
                continue

            if isinstance(entry, Unmapped):
                described[entry.source_key] = raw
                continue

            directory = self.directories.get(entry.mapper.directory)
            tag_name = directory.get_tag_name(entry.mapper.tag)
            description = directory.get_description(entry.mapper.tag)
            if description is None:
                if self.config.warn_on_fallback:
                    logger.warning(
                        "failed to get description for tag={} value={}",
                        entry.source_key, raw,
                    )
                description = raw
            described[tag_name] = description
        return described

    def _populate(self, source: SourceStore, entries: Tuple[CatalogEntry, ...]) -> None:
        for entry in entries:
            if not isinstance(entry, Mapped):
                continue
            raw = _present_value(source, entry.source_key)
            if raw is None:
                continue

            fmt = entry.mapper.format
            if fmt is None:
                logger.debug("no value format for tag={}, raw value kept", entry.source_key)
                continue

            value = coerce(raw, fmt)
            if value is None:
                logger.warning(
                    "failed to convert tag={} value={} to {}",
                    entry.source_key, raw, fmt.name,
                )
                continue
            self.directories.get(entry.mapper.directory).set_object(entry.mapper.tag, value)


def _present_value(source: SourceStore, source_key: str) -> Optional[str]:
    # Missing, null and spurious "0" values are all treated as absent
    if not source.has_attribute(source_key):
        return None
    raw = source.get_attribute(source_key)
    if raw is None or is_spurious_zero(source_key, raw):
        return None
    return raw


_default_translator = TagTranslator()


def describe_all(source: SourceStore) -> Dict[str, Dict[str, str]]:
    """Describe a source store with the process-wide default translator."""
    return _default_translator.describe_all(source)
