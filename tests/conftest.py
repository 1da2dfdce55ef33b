from datetime import timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from jwtgate.core.application import create_application
from jwtgate.domain.services.authentication_workflow import AuthenticationWorkflow
from jwtgate.domain.services.password_policy import PasswordPolicy
from jwtgate.domain.services.token_builder import TokenBuilder
from jwtgate.domain.value_objects import PasswordResetMailTemplate
from jwtgate.infrastructure.database import (
    create_db_and_tables,
    create_engine,
    create_session_factory,
)
from jwtgate.infrastructure.dependency_injection.auth_dependencies import (
    get_authentication_workflow,
)
from jwtgate.utils.security import create_password_context
from tests.fakes import (
    AUDIENCE,
    ISSUER,
    SIGNING_KEY,
    InMemoryCredentialStore,
    InMemoryProfileStore,
    InMemoryRoleStore,
    RecordingEventPublisher,
    RecordingMailSender,
)


@pytest.fixture(scope="session")
def pwd_context():
    # Minimum bcrypt cost keeps the suite fast.
    return create_password_context(rounds=4)


@pytest.fixture
def password_policy():
    return PasswordPolicy()


@pytest.fixture
def credential_store(password_policy, pwd_context):
    return InMemoryCredentialStore(password_policy, pwd_context)


@pytest.fixture
def role_store():
    return InMemoryRoleStore()


@pytest.fixture
def profile_store():
    return InMemoryProfileStore()


@pytest.fixture
def mail_sender():
    return RecordingMailSender()


@pytest.fixture
def event_publisher():
    return RecordingEventPublisher()


@pytest.fixture
def token_builder():
    return TokenBuilder(
        signing_key=SIGNING_KEY,
        issuer=ISSUER,
        audience=AUDIENCE,
        validity=timedelta(minutes=30),
    )


@pytest.fixture
def reset_mail_template():
    return PasswordResetMailTemplate(
        subject="Reset your password",
        text_body="Your reset code is {{ code }}",
        html_body="<p>Your reset code is <b>{{ code }}</b></p>",
    )


@pytest.fixture
def code_generator():
    """Returns reset codes in order; tests may append to ``codes``."""

    class _Codes:
        def __init__(self):
            self.codes = ["abc123", "def456", "ghi789"]

        def __call__(self) -> str:
            return self.codes.pop(0)

    return _Codes()


@pytest.fixture
def workflow(
    credential_store,
    role_store,
    profile_store,
    mail_sender,
    token_builder,
    reset_mail_template,
    event_publisher,
    code_generator,
):
    return AuthenticationWorkflow(
        credential_store=credential_store,
        role_store=role_store,
        profile_store=profile_store,
        mail_sender=mail_sender,
        token_builder=token_builder,
        reset_mail_template=reset_mail_template,
        event_publisher=event_publisher,
        code_generator=code_generator,
    )


@pytest.fixture
def app(workflow):
    application = create_application()
    application.dependency_overrides[get_authentication_workflow] = lambda: workflow
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def sql_engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'jwtgate.db'}")
    await create_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(sql_engine):
    return create_session_factory(sql_engine)
