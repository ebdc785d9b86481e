"""Kernel layer - the capability contract and the resource transactions built on it."""

from .context import FileSystemContext, WriteOptions
from .codec import JsonResourceCodec, ResourceCodec

__all__ = ["FileSystemContext", "WriteOptions", "JsonResourceCodec", "ResourceCodec"]
