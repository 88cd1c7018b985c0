# tests/unit/provider/test_resource_lifecycle.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from tests.unit.provider.provider_mocks import MockResource
from toolbox.errors import IllegalStateError
from toolbox.provider import NotEnoughResourceError, OperationTimeoutError, ProviderError, Resource


def test_open_and_close():
    resource = MockResource()
    assert isinstance(resource, Resource)
    assert resource.is_open is False
    resource.open()
    assert resource.is_open
    resource.close()
    assert resource.is_open is False
    assert resource.is_closing
    assert (resource.open_calls, resource.close_calls) == (1, 1)


def test_double_open_raises():
    resource = MockResource()
    resource.open()
    with pytest.raises(IllegalStateError, match="already open"):
        resource.open()
    assert resource.open_calls == 1


@pytest.mark.parametrize("error", [OperationTimeoutError("slow"), NotEnoughResourceError("full"), ValueError("bad")])
def test_open_failure_passes_known_errors_and_rolls_back(error):
    resource = MockResource(fail_open=error)
    with pytest.raises(type(error)):
        resource.open()
    assert resource.is_open is False


def test_open_failure_wraps_unknown_errors():
    resource = MockResource(fail_open=OSError("socket"))
    with pytest.raises(ProviderError, match="Cannot open this resource") as exc_info:
        resource.open()
    assert isinstance(exc_info.value.__cause__, OSError)
    assert resource.is_open is False

    resource.fail_open = None
    resource.open()
    assert resource.is_open


def test_close_is_idempotent():
    resource = MockResource()
    resource.open()
    resource.close()
    resource.close()
    assert resource.close_calls == 1


def test_close_failure_still_leaves_resource_closed():
    resource = MockResource(fail_close=OSError("flush"))
    resource.open()
    with pytest.raises(ProviderError, match="Cannot close this resource"):
        resource.close()
    assert resource.is_open is False
    resource.close()
    assert resource.close_calls == 1


def test_close_failure_keeps_provider_error():
    error = ProviderError("already reported")
    resource = MockResource(fail_close=error)
    resource.open()
    with pytest.raises(ProviderError) as exc_info:
        resource.close()
    assert exc_info.value is error


def test_open_after_close_is_refused():
    resource = MockResource()
    resource.open()
    resource.close()
    with pytest.raises(IllegalStateError, match="closing"):
        resource.open()


def test_context_manager_closes():
    with MockResource() as resource:
        resource.open()
        assert resource.is_open
    assert resource.is_open is False


def test_context_manager_closes_on_error():
    resource = MockResource()
    with pytest.raises(KeyError):
        with resource:
            resource.open()
            raise KeyError("boom")
    assert resource.is_open is False
    assert resource.close_calls == 1


def test_check_open():
    resource = MockResource()
    with pytest.raises(IllegalStateError):
        resource._check_open()
    resource.open()
    resource._check_open()
