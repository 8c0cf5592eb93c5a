import pytest
import numpy as np
from unittest.mock import MagicMock, patch


@pytest.fixture
def rng():
    """Seeded generator so failures are reproducible"""
    return np.random.default_rng(12345)


@pytest.fixture
def mock_mongo():
    """Patch MongoClient; yields (client_cls, client, db, collection)"""
    with patch('pzem_seeder.telemetry_store.MongoClient') as client_cls:
        client = client_cls.return_value
        db = MagicMock(name='db')
        collection = MagicMock(name='collection')
        client.__getitem__.return_value = db
        db.__getitem__.return_value = collection
        yield client_cls, client, db, collection


@pytest.fixture
def fake_store():
    """Stand-in for PzemDataStore used as a context manager"""
    store = MagicMock(name='store')
    store.__enter__.return_value = store
    store.__exit__.return_value = False
    store.collection_name = 'pzemdatas1'
    store.collection_exists.return_value = True
    factory = MagicMock(name='store_factory', return_value=store)
    return factory, store


@pytest.fixture
def answers():
    """Build an input() replacement that replays the given answers"""
    def _answers(*values):
        replies = iter(values)
        return lambda prompt: next(replies)
    return _answers
