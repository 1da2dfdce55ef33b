"""Password reset journey through the HTTP API with SQL-backed stores.

Alice forgets her password, requests a reset, receives ticket ``abc123`` by
mail, picks a new password and logs in with it. Replaying the ticket fails.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from jwtgate.core.application import create_application
from jwtgate.domain.entities import AccountStatus, Person, Role, User, UserRoleLink
from jwtgate.domain.services.authentication_workflow import AuthenticationWorkflow
from jwtgate.domain.services.password_policy import PasswordPolicy
from jwtgate.infrastructure.dependency_injection.auth_dependencies import (
    get_authentication_workflow,
)
from jwtgate.infrastructure.repositories import CredentialStore, ProfileStore, RoleStore
from jwtgate.infrastructure.services import LoggingEventPublisher
from tests.fakes import RecordingMailSender

BASE = "/api/v1/auth"
OLD_PASSWORD = "0ldP@ssword"
NEW_PASSWORD = "N3wP@ss!"


@pytest_asyncio.fixture
async def alice(session_factory, pwd_context):
    async with session_factory() as session:
        person = Person(first_name="Alice", last_name="Liddell")
        session.add(person)
        await session.flush()
        user = User(
            email="alice@example.com",
            person_id=person.id,
            hashed_password=pwd_context.hash(OLD_PASSWORD),
            status=AccountStatus.ACTIVE,
        )
        role = Role(name="customer", claims=["orders:read"])
        session.add_all([user, role])
        await session.flush()
        session.add(UserRoleLink(user_id=user.id, role_id=role.id))
        await session.commit()
        return user


@pytest.fixture
def mailbox():
    return RecordingMailSender()


@pytest_asyncio.fixture
async def client(session_factory, pwd_context, token_builder, reset_mail_template, mailbox):
    workflow = AuthenticationWorkflow(
        credential_store=CredentialStore(session_factory, PasswordPolicy(), pwd_context),
        role_store=RoleStore(session_factory),
        profile_store=ProfileStore(session_factory),
        mail_sender=mailbox,
        token_builder=token_builder,
        reset_mail_template=reset_mail_template,
        event_publisher=LoggingEventPublisher(),
        code_generator=lambda: "abc123",
    )
    app = create_application()
    app.dependency_overrides[get_authentication_workflow] = lambda: workflow
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


async def _login(client, password):
    return await client.post(
        f"{BASE}/token", json={"username": "alice@example.com", "password": password}
    )


@pytest.mark.asyncio
async def test_forgotten_password_is_reset_with_mailed_ticket(client, alice, mailbox, token_builder):
    response = await client.post(
        f"{BASE}/request-password-reset", json={"email": "alice@example.com"}
    )
    assert response.status_code == 200
    [mail] = mailbox.sent
    assert mail["destination"] == "alice@example.com"
    assert mail["code"] == "abc123"

    rejected = await client.post(
        f"{BASE}/reset-password", json={"ticketCode": "abc123", "password": "password"}
    )
    assert rejected.status_code == 422
    assert (await _login(client, OLD_PASSWORD)).status_code == 200

    completed = await client.post(
        f"{BASE}/reset-password", json={"ticketCode": "abc123", "password": NEW_PASSWORD}
    )
    assert completed.status_code == 200

    replayed = await client.post(
        f"{BASE}/reset-password", json={"ticketCode": "abc123", "password": NEW_PASSWORD}
    )
    assert replayed.status_code == 404

    assert (await _login(client, OLD_PASSWORD)).status_code == 401
    login = await _login(client, NEW_PASSWORD)
    assert login.status_code == 200
    claims = token_builder.decode(login.json()["token"])
    assert claims["sub"] == str(alice.id)
    assert claims["given_name"] == "Alice"
    assert claims["roles"] == ["orders:read"]


@pytest.mark.asyncio
async def test_unknown_email_gets_same_answer_and_no_mail(client, alice, mailbox):
    response = await client.post(
        f"{BASE}/request-password-reset", json={"email": "mallory@example.com"}
    )

    assert response.status_code == 200
    assert response.content == b""
    assert mailbox.sent == []
