import pytest

from rtime.tables.tables import DEFAULT_TABLES


@pytest.fixture(autouse=True)
def restore_default_tables():
    # Preserve the process-wide tables so tests can safely replace them.
    saved = dict(DEFAULT_TABLES._tables)
    yield
    DEFAULT_TABLES._tables.clear()
    DEFAULT_TABLES._tables.update(saved)
