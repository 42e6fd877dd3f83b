import pytest

from redd import Client


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "REDD_ENDPOINT",
        "REDD_USER_AGENT",
        "SSL_CERT_FILE",
        "SSL_CERT_DIR",
        "REQUESTS_CA_BUNDLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def endpoint() -> str:
    return "https://api.example.com"


@pytest.fixture
def user_agent() -> str:
    return "Python:TestApp:v1.0.0 (by tester)"


@pytest.fixture
def client(endpoint: str, user_agent: str) -> Client:
    return Client(endpoint=endpoint, user_agent=user_agent)
