import pytest

from payloads import JENKINS_URL


@pytest.fixture
def jenkins_url() -> str:
    return JENKINS_URL
