"""Tests for UpdateResource (load, modify, save)."""

import json
from dataclasses import dataclass
from pathlib import Path

import pytest

from mock_context import Endpoint, InMemoryContext, MockContext
from resourcefs.domain.errors import (
    EmptyFile,
    EncodingFailed,
    ReadFailed,
    UpdateLoadFailed,
    UpdateSaveFailed,
    UpdateUnexpected,
    WriteFailed,
)
from resourcefs.domain.location import Folder
from resourcefs.kernel.operations import UpdateResource


FOLDER = Folder(Path("/mock"))
COUNTER = Path("/mock/counter")


@dataclass
class Counter:
    value: int


def _increment(counter: Counter) -> None:
    counter.value += 1


def test_update_applies_mutation_and_saves():
    context = InMemoryContext()
    context.folders.add(FOLDER.location)
    context.files[COUNTER] = json.dumps({"value": 10}).encode()

    result = UpdateResource(context).update_resource("counter", FOLDER, Counter, _increment)

    assert result == Counter(11)
    assert json.loads(context.files[COUNTER]) == {"value": 11}
    assert context.called.count(Endpoint.READ) == 1
    assert context.called.count(Endpoint.WRITE) == 1
    assert context.called == [Endpoint.READ, Endpoint.FOLDER_EXISTS, Endpoint.WRITE]


def test_update_uses_returned_value_for_immutable_resources():
    context = InMemoryContext()
    context.folders.add(FOLDER.location)
    context.files[COUNTER] = b"41"

    result = UpdateResource(context).update_resource("counter", FOLDER, int, lambda n: n + 1)

    assert result == 42
    assert context.files[COUNTER] == b"42"


def test_load_phase_failure_is_wrapped():
    def fail(_):
        raise FileNotFoundError("missing")

    context = MockContext(read_handler=fail)
    with pytest.raises(UpdateLoadFailed) as exc_info:
        UpdateResource(context).update_resource("counter", FOLDER, Counter, _increment)

    assert exc_info.value == UpdateLoadFailed("counter", ReadFailed("counter"))
    assert Endpoint.WRITE not in context.called


def test_empty_file_during_update_is_load_phase_failure():
    context = MockContext(read_handler=lambda _: b"")
    with pytest.raises(UpdateLoadFailed) as exc_info:
        UpdateResource(context).update_resource("counter", FOLDER, Counter, _increment)
    assert exc_info.value.underlying_error == EmptyFile("counter")


def test_save_phase_failure_is_wrapped():
    def fail(data, loc, opts):
        raise OSError("disk full")

    context = MockContext(
        folder_exists_handler=lambda _: True,
        read_handler=lambda _: b'{"value": 1}',
        write_handler=fail,
    )
    with pytest.raises(UpdateSaveFailed) as exc_info:
        UpdateResource(context).update_resource("counter", FOLDER, Counter, _increment)

    assert exc_info.value == UpdateSaveFailed("counter", WriteFailed("counter"))
    assert exc_info.value != UpdateLoadFailed("counter", ReadFailed("counter"))


def test_unencodable_replacement_is_save_phase_failure():
    class Opaque:
        pass

    context = MockContext(read_handler=lambda _: b'{"value": 1}')
    with pytest.raises(UpdateSaveFailed) as exc_info:
        UpdateResource(context).update_resource("counter", FOLDER, Counter, lambda _: Opaque())

    assert exc_info.value == UpdateSaveFailed("counter", EncodingFailed("counter"))
    assert context.called == [Endpoint.READ]


def test_mutation_exception_is_unexpected():
    def explode(counter: Counter) -> None:
        raise RuntimeError("boom")

    context = MockContext(read_handler=lambda _: b'{"value": 1}')
    with pytest.raises(UpdateUnexpected) as exc_info:
        UpdateResource(context).update_resource("counter", FOLDER, Counter, explode)

    assert exc_info.value == UpdateUnexpected("counter", RuntimeError("boom"))
    assert Endpoint.WRITE not in context.called


def test_update_is_last_writer_wins():
    """A write landing between load and save is overwritten."""
    context = InMemoryContext()
    context.folders.add(FOLDER.location)
    context.files[COUNTER] = b'{"value": 1}'

    def concurrent_writer(counter: Counter) -> None:
        context.files[COUNTER] = b'{"value": 100}'
        counter.value += 1

    UpdateResource(context).update_resource("counter", FOLDER, Counter, concurrent_writer)
    assert json.loads(context.files[COUNTER]) == {"value": 2}
