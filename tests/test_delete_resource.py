"""Tests for DeleteResource."""

from pathlib import Path

import pytest

from mock_context import Endpoint, MockContext
from resourcefs.domain.errors import DeleteFailed
from resourcefs.domain.location import Folder
from resourcefs.kernel.operations import DeleteResource


FOLDER = Folder(Path("/mock"))


def test_delete_resource_deletes_derived_location():
    deleted = []
    context = MockContext(delete_location_handler=deleted.append)

    DeleteResource(context).delete_resource("old.json", FOLDER)

    assert deleted == [Path("/mock/old.json")]
    assert context.called == [Endpoint.DELETE_LOCATION]


def test_delete_failure_is_wrapped():
    cause = FileNotFoundError("gone")

    def fail(_):
        raise cause

    context = MockContext(delete_location_handler=fail)
    with pytest.raises(DeleteFailed) as exc_info:
        DeleteResource(context).delete_resource("old.json", FOLDER)

    assert exc_info.value == DeleteFailed("old.json")
    assert exc_info.value.underlying_error is cause


def test_repeated_deletes_use_fresh_handles():
    context = MockContext()
    deleter = DeleteResource(context)
    deleter.delete_resource("a.json", FOLDER)
    deleter.delete_resource("a.json", FOLDER)
    assert context.called == [Endpoint.DELETE_LOCATION, Endpoint.DELETE_LOCATION]
