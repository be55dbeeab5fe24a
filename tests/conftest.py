"""
Shared test configuration.
"""

import random

import pytest

from parcel_tracker.db import Base, init_db, make_engine, make_session_factory
from parcel_tracker.models import Parcel, ParcelStatus
from parcel_tracker.service import ParcelService
from parcel_tracker.store import ParcelStore
from parcel_tracker.utils import format_created_at

# In-memory database, one per test
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    """Create tables before each test and drop after."""
    engine = make_engine(TEST_DATABASE_URL)
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def store(session_factory):
    return ParcelStore(session_factory)


@pytest.fixture
def service(store):
    return ParcelService(store)


@pytest.fixture
def rng():
    return random.Random()


@pytest.fixture
def make_parcel():
    """Factory for a fresh, unsaved registered parcel."""
    def _make(client: int = 1000, address: str = "test") -> Parcel:
        return Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=format_created_at(),
        )
    return _make
