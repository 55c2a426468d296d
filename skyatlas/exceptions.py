"""
Custom exceptions for SkyAtlas.

This module defines domain-specific exceptions used throughout the catalog
builder to provide clear error context and enable precise error handling.
"""


class SkyAtlasError(Exception):
    """Base exception for all SkyAtlas-specific errors."""
    pass


class SourceUnavailableError(SkyAtlasError):
    """Raised when an input catalog cannot be opened. Aborts the build."""
    pass


class UnrecognizedRecordError(SkyAtlasError):
    """Raised when a record's type or identifier cannot be classified."""
    pass


class SimbadQueryError(SkyAtlasError):
    """Raised when the remote SIMBAD query fails."""
    pass


class StoreError(SkyAtlasError):
    """Raised when the output database cannot be created or written."""
    pass


class CatalogBuildError(SkyAtlasError):
    """Raised when the catalog build process fails."""
    pass


__all__ = [
    'SkyAtlasError',
    'SourceUnavailableError',
    'UnrecognizedRecordError',
    'SimbadQueryError',
    'StoreError',
    'CatalogBuildError'
]
