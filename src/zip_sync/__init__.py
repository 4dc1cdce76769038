"""Synchronize directory trees with ZIP archives."""

from zip_sync.core import (CompressionError, CompressionLevel, ConflictError,
                           ExistingArchiveAction, ExtractionError,
                           OverwritePolicy, ZipSyncError, compress,
                           flatten_error, translate_path, uncompress)

__version__ = "1.0.0"

__all__ = [
    "CompressionError",
    "CompressionLevel",
    "ConflictError",
    "ExistingArchiveAction",
    "ExtractionError",
    "OverwritePolicy",
    "ZipSyncError",
    "__version__",
    "compress",
    "flatten_error",
    "translate_path",
    "uncompress",
]
