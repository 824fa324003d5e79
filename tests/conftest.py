import pytest

from dnsbl_lists import BlacklistStore

ENV_VARS = (
    "DNSBL_LISTS_PATH",
    "DNSBL_LISTS_CANDIDATES",
    "DNSBL_LISTS_FILE",
    "DNSBL_LIVENESS_TIMEOUT",
    "DNSBL_LIVENESS_WORKERS",
    "DNSBL_DNS_SERVER",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding a small master list."""
    directory = tmp_path / "lists"
    directory.mkdir()
    (directory / "blacklists.txt").write_text("a.com\n\nb.com\n")
    return directory


@pytest.fixture
def store(data_dir):
    return BlacklistStore(path=data_dir)
