import pytest
from masthead_client import MastheadClient

from payloads import BASE_URL, TOKEN


@pytest.fixture
def client():
    c = MastheadClient(token=TOKEN, base_url=BASE_URL)
    yield c
    c.close()
