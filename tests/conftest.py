from collections.abc import Iterator

import pytest
from starlette.testclient import TestClient


@pytest.fixture(scope="session")
def client() -> Iterator[TestClient]:
    from accept_match.main import app

    with TestClient(app) as client:
        yield client
