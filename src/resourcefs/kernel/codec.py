"""Encode/decode contract for stored resources.

Any object with ``encode`` / ``decode`` satisfying ``ResourceCodec`` can be
handed to the operation utilities. The default is JSON via pydantic.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, TypeVar

from pydantic import PydanticUserError, TypeAdapter

from resourcefs.config import settings

T = TypeVar("T")


class ResourceCodec(Protocol):
    """Bytes in, value out; value in, bytes out. Raise on malformed input."""

    def encode(self, resource: Any) -> bytes:
        ...

    def decode(self, data: bytes, resource_type: type[T]) -> T:
        ...


class JsonResourceCodec:
    """JSON codec built on pydantic ``TypeAdapter``.

    Handles dataclasses, pydantic models, typed dicts, builtin containers and
    scalars. Encoding raises ``TypeError``/``ValueError``; decoding raises
    ``ValueError`` (``pydantic.ValidationError``). A type pydantic cannot
    describe is reported the same way instead of as ``PydanticUserError``.
    """

    def __init__(self, indent: Optional[int] = None):
        self._indent = indent

    @property
    def indent(self) -> Optional[int]:
        indent = settings.json_indent if self._indent is None else self._indent
        return indent or None

    def encode(self, resource: Any) -> bytes:
        try:
            adapter = TypeAdapter(type(resource))
        except PydanticUserError as e:
            raise TypeError(f"cannot encode {type(resource).__name__}: {e}") from e
        return adapter.dump_json(resource, indent=self.indent)

    def decode(self, data: bytes, resource_type: type[T]) -> T:
        try:
            adapter = TypeAdapter(resource_type)
        except PydanticUserError as e:
            raise ValueError(f"cannot decode into {resource_type!r}: {e}") from e
        return adapter.validate_json(data)
