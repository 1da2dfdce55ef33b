import pytest
from pydantic import ValidationError

from jwtgate.core.config import Settings, get_settings

REQUIRED_ENV = {
    "JWT_SECRET_KEY": "a-very-long-signing-key-used-in-settings-tests",
    "JWT_ISSUER": "https://auth.test",
    "JWT_AUDIENCE": "https://api.test",
    "PASSWORD_RESET_SUBJECT": "Reset",
    "PASSWORD_RESET_TEXT_BODY": "Code: {{ code }}",
    "PASSWORD_RESET_HTML_BODY": "<p>{{ code }}</p>",
}


@pytest.fixture
def env(monkeypatch):
    for name, value in REQUIRED_ENV.items():
        monkeypatch.setenv(name, value)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_defaults(env):
    settings = Settings(_env_file=None)

    assert settings.JWT_ALGORITHM == "HS256"
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
    assert settings.PASSWORD_RESET_CODE_EXPIRE_MINUTES == 60
    assert settings.BCRYPT_WORK_FACTOR == 12
    assert settings.DATABASE_URL.startswith("sqlite+aiosqlite://")
    assert settings.EMAIL_TEST_MODE is False


def test_secret_key_is_not_rendered(env):
    settings = Settings(_env_file=None)

    assert REQUIRED_ENV["JWT_SECRET_KEY"] not in repr(settings)
    assert settings.JWT_SECRET_KEY.get_secret_value() == REQUIRED_ENV["JWT_SECRET_KEY"]


@pytest.mark.parametrize("name", sorted(REQUIRED_ENV))
def test_missing_required_value_fails(env, name):
    env.delenv(name)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("name", ["JWT_SECRET_KEY", "JWT_ISSUER", "PASSWORD_RESET_SUBJECT"])
def test_empty_required_value_fails(env, name):
    env.setenv(name, "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_rejects_asymmetric_algorithm(env):
    env.setenv("JWT_ALGORITHM", "RS256")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached(env):
    env.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")

    first = get_settings()

    assert first is get_settings()
    assert first.ACCESS_TOKEN_EXPIRE_MINUTES == 15
