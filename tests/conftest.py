import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    # the CLI configures structlog globally; keep tests independent of each other
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
