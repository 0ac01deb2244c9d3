import pytest
from unittest.mock import AsyncMock, MagicMock

from safemesh.domain.entities import Principal
from tests.fixtures.clock import FakeClock
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.audit_logs.append = AsyncMock(side_effect=lambda entry: entry)
    return uow


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def principal():
    return Principal(**TestDataLoader.get_copy("admin_principal"))


@pytest.fixture
def mock_storage():
    storage = MagicMock()
    storage.get = AsyncMock(return_value=None)
    storage.set = AsyncMock()
    storage.delete = AsyncMock()
    return storage
