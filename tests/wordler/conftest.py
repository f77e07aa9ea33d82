import pytest

from wordler.consts import SECRET_ENV_VAR


@pytest.fixture(autouse=True)
def clear_secret(monkeypatch) -> None:
    monkeypatch.delenv(SECRET_ENV_VAR, raising=False)
