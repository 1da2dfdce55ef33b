from datetime import timedelta

import pytest

from jwtgate.core.config import Settings
from jwtgate.domain.services.authentication_workflow import AuthenticationWorkflow
from jwtgate.infrastructure.dependency_injection import auth_dependencies as deps
from jwtgate.infrastructure.repositories import CredentialStore
from jwtgate.infrastructure.services import FastMailSender


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        JWT_SECRET_KEY="dependency-test-signing-key-long-enough",
        JWT_ISSUER="https://auth.test",
        JWT_AUDIENCE="https://api.test",
        ACCESS_TOKEN_EXPIRE_MINUTES=15,
        PASSWORD_MIN_LENGTH=10,
        PASSWORD_RESET_SUBJECT="Reset",
        PASSWORD_RESET_TEXT_BODY="{{ code }}",
        PASSWORD_RESET_HTML_BODY="<p>{{ code }}</p>",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'deps.db'}",
        EMAIL_TEST_MODE=True,
    )


def test_token_builder_uses_settings(settings):
    builder = deps.get_token_builder(settings)

    assert builder.issuer == "https://auth.test"
    assert builder.audience == "https://api.test"
    assert builder.validity == timedelta(minutes=15)


def test_password_policy_uses_minimum_length(settings):
    assert deps.get_password_policy(settings).min_length == 10


def test_reset_mail_template_uses_settings(settings):
    template = deps.get_reset_mail_template(settings)

    assert (template.subject, template.text_body) == ("Reset", "{{ code }}")


def test_mail_sender_from_settings(settings):
    assert isinstance(FastMailSender.from_settings(settings), FastMailSender)


def test_workflow_is_assembled(settings, monkeypatch):
    monkeypatch.setattr(deps, "get_settings", lambda: settings)
    for cached in (deps.get_engine, deps.get_session_factory, deps.get_password_context):
        cached.cache_clear()

    credential_store = deps.get_credential_store(deps.get_password_policy(settings))
    workflow = deps.get_authentication_workflow(
        settings,
        credential_store,
        deps.get_role_store(),
        deps.get_profile_store(),
        FastMailSender.from_settings(settings),
        deps.get_token_builder(settings),
        deps.get_reset_mail_template(settings),
        deps.get_event_publisher(),
    )

    assert isinstance(credential_store, CredentialStore)
    assert isinstance(workflow, AuthenticationWorkflow)
    for cached in (deps.get_engine, deps.get_session_factory, deps.get_password_context):
        cached.cache_clear()
