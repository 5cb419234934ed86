# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Source stores

A source store is any flat, string-keyed accessor over embedded image
metadata. The translator only needs has_attribute() and get_attribute();
MappingSourceStore provides both over an in-memory mapping or a JSON
document.

Copyright 2025 DNAi inc.
"""

import json
from typing import Any, Dict, Iterator, Mapping, Optional, Protocol

from exifbridge.exceptions import SourceStoreError


class SourceStore(Protocol):
    """String-keyed attribute accessor."""

    def has_attribute(self, key: str) -> bool:
        """Return True if the store knows the attribute, even with a null value."""
        raise NotImplementedError

    def get_attribute(self, key: str) -> Optional[str]:
        """Return the attribute value as a string, or None."""
        raise NotImplementedError


class MappingSourceStore:
    """
    Read-only source store over a mapping of attribute names to strings.

    A key mapped to None is present but null, the way some accessors report
    attributes they know about without holding a value.

    Example:
        >>> store = MappingSourceStore({"FNumber": "2.8"})
        >>> store.has_attribute("FNumber")
        True
        >>> store.get_attribute("Make") is None
        True
    """

    def __init__(self, attributes: Mapping[str, Optional[str]]):
        self._attributes: Dict[str, Optional[str]] = dict(attributes)

    def has_attribute(self, key: str) -> bool:
        return key in self._attributes

    def get_attribute(self, key: str) -> Optional[str]:
        return self._attributes.get(key)

    def keys(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    @classmethod
    def from_json(cls, text: str) -> 'MappingSourceStore':
        """
        Build a store from a JSON object of attribute names to values.

        Numbers and booleans are converted to their string form; null is
        kept as a present-but-null attribute.

        Args:
            text: JSON document

        Returns:
            MappingSourceStore

        Raises:
            SourceStoreError: If the document is not valid JSON or not a flat
                object of scalar values
        """
        try:
            document = json.loads(text)
        except ValueError as e:
            raise SourceStoreError(f"Invalid JSON: {e}")

        if not isinstance(document, dict):
            raise SourceStoreError(
                f"Expected a JSON object of attributes, got {type(document).__name__}"
            )

        attributes: Dict[str, Optional[str]] = {}
        for key, value in document.items():
            attributes[key] = _attribute_string(key, value)
        return cls(attributes)


def _attribute_string(key: str, value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise SourceStoreError(
        f"Attribute {key!r} must be a string, number or null, got {type(value).__name__}"
    )
