"""Dependency injection for the authentication workflow.

Each factory builds one collaborator from settings. Process-wide resources
(the database engine, the session factory, the password context and the mail
client) are created once and cached; the workflow itself is stateless and is
assembled per request from those shared pieces.

Tests replace any of these factories through ``app.dependency_overrides``.
"""

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from jwtgate.core.config import Settings, get_settings
from jwtgate.domain.interfaces import (
    ICredentialStore,
    IEventPublisher,
    IMailSender,
    IProfileStore,
    IRoleStore,
)
from jwtgate.domain.services.authentication_workflow import AuthenticationWorkflow
from jwtgate.domain.services.password_policy import PasswordPolicy
from jwtgate.domain.services.token_builder import TokenBuilder
from jwtgate.domain.value_objects import PasswordResetMailTemplate
from jwtgate.infrastructure.database import create_engine, create_session_factory
from jwtgate.infrastructure.repositories import CredentialStore, ProfileStore, RoleStore
from jwtgate.infrastructure.services import FastMailSender, LoggingEventPublisher
from jwtgate.utils.security import create_password_context

SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def get_engine() -> AsyncEngine:
    settings = get_settings()
    return create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return create_session_factory(get_engine())


@lru_cache
def get_password_context() -> CryptContext:
    return create_password_context(rounds=get_settings().BCRYPT_WORK_FACTOR)


@lru_cache
def _mail_sender() -> FastMailSender:
    return FastMailSender.from_settings(get_settings())


def get_password_policy(settings: SettingsDep) -> PasswordPolicy:
    return PasswordPolicy(min_length=settings.PASSWORD_MIN_LENGTH)


def get_credential_store(
    policy: Annotated[PasswordPolicy, Depends(get_password_policy)],
) -> ICredentialStore:
    return CredentialStore(get_session_factory(), policy, get_password_context())


def get_role_store() -> IRoleStore:
    return RoleStore(get_session_factory())


def get_profile_store() -> IProfileStore:
    return ProfileStore(get_session_factory())


def get_mail_sender() -> IMailSender:
    return _mail_sender()


def get_event_publisher() -> IEventPublisher:
    return LoggingEventPublisher()


def get_token_builder(settings: SettingsDep) -> TokenBuilder:
    return TokenBuilder(
        signing_key=settings.JWT_SECRET_KEY.get_secret_value(),
        issuer=settings.JWT_ISSUER,
        audience=settings.JWT_AUDIENCE,
        validity=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        algorithm=settings.JWT_ALGORITHM,
    )


def get_reset_mail_template(settings: SettingsDep) -> PasswordResetMailTemplate:
    return PasswordResetMailTemplate(
        subject=settings.PASSWORD_RESET_SUBJECT,
        text_body=settings.PASSWORD_RESET_TEXT_BODY,
        html_body=settings.PASSWORD_RESET_HTML_BODY,
    )


def get_authentication_workflow(
    settings: SettingsDep,
    credential_store: Annotated[ICredentialStore, Depends(get_credential_store)],
    role_store: Annotated[IRoleStore, Depends(get_role_store)],
    profile_store: Annotated[IProfileStore, Depends(get_profile_store)],
    mail_sender: Annotated[IMailSender, Depends(get_mail_sender)],
    token_builder: Annotated[TokenBuilder, Depends(get_token_builder)],
    reset_mail_template: Annotated[PasswordResetMailTemplate, Depends(get_reset_mail_template)],
    event_publisher: Annotated[IEventPublisher, Depends(get_event_publisher)],
) -> AuthenticationWorkflow:
    return AuthenticationWorkflow(
        credential_store=credential_store,
        role_store=role_store,
        profile_store=profile_store,
        mail_sender=mail_sender,
        token_builder=token_builder,
        reset_mail_template=reset_mail_template,
        event_publisher=event_publisher,
        reset_code_ttl=timedelta(minutes=settings.PASSWORD_RESET_CODE_EXPIRE_MINUTES),
    )


WorkflowDep = Annotated[AuthenticationWorkflow, Depends(get_authentication_workflow)]
