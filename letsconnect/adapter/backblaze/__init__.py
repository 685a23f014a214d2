"""Backblaze B2 blob store adapter."""

from .client import BackblazeError, MockBlobStore, RealBackblazeBlobStore

__all__ = ["BackblazeError", "MockBlobStore", "RealBackblazeBlobStore"]
