# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for exifbridge

A translation pass never raises: coercion failures and missing descriptions
are logged and degrade to raw values. The exceptions below signal programming
errors in the static tables or unusable input handed to the package.

Copyright 2025 DNAi inc.
"""


class ExifBridgeError(Exception):
    """
    Base exception for all exifbridge errors.

    All exifbridge exceptions inherit from this class, allowing
    catch-all error handling for any translation-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class CatalogError(ExifBridgeError):
    """
    Raised when the tag catalog is inconsistent.

    This exception is raised at import time when:
    - A source attribute name appears in more than one group
    - A group table lists the same source attribute twice
    """
    pass


class InvalidTagError(ExifBridgeError):
    """
    Raised when a directory is asked to store an unusable value.

    This exception is raised when:
    - A None value is written into a directory tag
    - A tag identifier is not a non-negative integer
    """
    pass


class SourceStoreError(ExifBridgeError):
    """
    Raised when a source attribute document cannot be turned into a store.

    This exception is raised when:
    - The document is not valid JSON
    - The document is not a flat object of attribute names to values
    """
    pass
