"""Authentication Workflow Domain Service.

This service drives the four credential-lifecycle operations of the identity
service: account activation, token issuance at login, password reset request
and password reset completion. It composes the credential, role and profile
stores, the mail sender and the token builder, all injected as abstractions.

Security properties enforced here:
- An unknown username and a wrong password yield the same `UnauthorizedError`.
- A reset request for an unknown email is indistinguishable from one for a
  registered email.
- One-time codes are consumed through single atomic store calls, so a code
  can never be redeemed twice.
- Collaborator failures are never swallowed: anything that is not already a
  domain error surfaces as `InternalError`. The one exception is event
  publishing, which runs after the store has committed; a publishing failure
  is logged and the committed outcome is reported as is.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import structlog

from jwtgate.core.exceptions import (
    ConfigurationError,
    ForbiddenError,
    InternalError,
    JwtGateError,
    NotFoundError,
    PasswordValidationError,
    UnauthorizedError,
)
from jwtgate.core.logging import mask_code, mask_email
from jwtgate.domain.entities import AccountStatus, User
from jwtgate.domain.events import (
    AccountActivatedEvent,
    ActivationFailedEvent,
    AuthenticationFailedEvent,
    PasswordResetCompletedEvent,
    PasswordResetFailedEvent,
    PasswordResetRequestedEvent,
    TokenIssuedEvent,
)
from jwtgate.domain.interfaces import (
    ICredentialStore,
    IEventPublisher,
    IMailSender,
    IProfileStore,
    IRoleStore,
)
from jwtgate.domain.services.token_builder import TokenBuilder
from jwtgate.domain.value_objects import PasswordResetMailTemplate, ResetCode, TokenGrant
from jwtgate.utils.security import generate_reset_code

logger = structlog.get_logger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class AuthenticationWorkflow:
    """Orchestrates activation, login and password reset.

    The workflow holds no mutable state: every collaborator and every piece of
    configuration is fixed at construction, so one instance can serve
    concurrent requests. Construction fails fast with `ConfigurationError`
    when a collaborator or the mail template is missing.
    """

    def __init__(
        self,
        credential_store: ICredentialStore,
        role_store: IRoleStore,
        profile_store: IProfileStore,
        mail_sender: IMailSender,
        token_builder: TokenBuilder,
        reset_mail_template: PasswordResetMailTemplate,
        event_publisher: IEventPublisher,
        reset_code_ttl: timedelta = timedelta(minutes=ResetCode.DEFAULT_EXPIRY_MINUTES),
        code_generator: Callable[[], str] = generate_reset_code,
    ):
        dependencies = {
            "credential_store": credential_store,
            "role_store": role_store,
            "profile_store": profile_store,
            "mail_sender": mail_sender,
            "token_builder": token_builder,
            "reset_mail_template": reset_mail_template,
            "event_publisher": event_publisher,
        }
        missing = [name for name, value in dependencies.items() if value is None]
        if missing:
            raise ConfigurationError(missing)

        self._credential_store = credential_store
        self._role_store = role_store
        self._profile_store = profile_store
        self._mail_sender = mail_sender
        self._token_builder = token_builder
        self._reset_mail_template = reset_mail_template
        self._event_publisher = event_publisher
        self._reset_code_ttl = reset_code_ttl
        self._code_generator = code_generator

    # ------------------------------------------------------------------
    # Activate
    # ------------------------------------------------------------------

    async def activate(
        self,
        activation_code: str,
        password: str,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Redeem an activation code, setting the account's first password.

        Raises:
            NotFoundError: If the code does not match a pending account.
            PasswordValidationError: If the password violates the policy; the
                code remains redeemable.
            InternalError: If a collaborator fails.
        """
        log = logger.bind(operation="activate", correlation_id=correlation_id)
        try:
            try:
                user = await self._credential_store.activate(activation_code, password)
            except PasswordValidationError:
                log.info("Activation rejected by password policy", code=mask_code(activation_code))
                await self._publish(
                    ActivationFailedEvent(
                        occurred_at=_now(),
                        correlation_id=correlation_id,
                        code_prefix=mask_code(activation_code),
                        failure_reason="weak_password",
                    )
                )
                raise

            if user is None:
                log.info("Activation attempt with an invalid code", code=mask_code(activation_code))
                await self._publish(
                    ActivationFailedEvent(
                        occurred_at=_now(),
                        correlation_id=correlation_id,
                        code_prefix=mask_code(activation_code),
                        failure_reason="unknown_code",
                    )
                )
                raise NotFoundError("Activation code not found")

            log.info("User activated", user_id=user.id, email=mask_email(user.email))
            await self._publish(
                AccountActivatedEvent(
                    occurred_at=_now(),
                    correlation_id=correlation_id,
                    user_id=user.id,
                    email=user.email,
                )
            )
        except JwtGateError:
            raise
        except Exception as e:
            log.error("Activation failed unexpectedly", error=str(e), error_type=type(e).__name__)
            raise InternalError() from e

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    async def create_token(
        self,
        username: str,
        password: str,
        correlation_id: Optional[str] = None,
    ) -> TokenGrant:
        """Authenticate a user and issue a full and a lightweight token.

        Returns:
            TokenGrant: Both tokens, sharing one expiry.

        Raises:
            UnauthorizedError: If the credentials are invalid (unknown user or
                wrong password alike).
            ForbiddenError: If the account is pending or locked.
            InternalError: If a collaborator fails.
        """
        log = logger.bind(
            operation="create_token",
            correlation_id=correlation_id,
            username=mask_email(username),
        )
        log.info("Token requested")
        try:
            user = await self._credential_store.validate_credentials(username, password)
            if user is None:
                log.info("Invalid credentials")
                await self._publish(
                    AuthenticationFailedEvent(
                        occurred_at=_now(),
                        correlation_id=correlation_id,
                        username=mask_email(username),
                        failure_reason="invalid_credentials",
                    )
                )
                raise UnauthorizedError()

            if not await self._credential_store.is_active(user):
                reason = "account_locked" if user.status == AccountStatus.LOCKED else "account_pending"
                log.info("User is inactive or locked out", user_id=user.id, reason=reason)
                await self._publish(
                    AuthenticationFailedEvent(
                        occurred_at=_now(),
                        correlation_id=correlation_id,
                        username=mask_email(username),
                        failure_reason=reason,
                        user_id=user.id,
                    )
                )
                raise ForbiddenError()

            grant = await self._issue_tokens(user)
            log.info(
                "Tokens created",
                user_id=user.id,
                claim_count=len(grant.token.claims),
                expires_at=grant.expires_at.isoformat(),
            )
            await self._publish(
                TokenIssuedEvent(
                    occurred_at=_now(),
                    correlation_id=correlation_id,
                    user_id=user.id,
                    expires_at=grant.expires_at,
                    claim_count=len(grant.token.claims),
                )
            )
            return grant
        except JwtGateError:
            raise
        except Exception as e:
            log.error("Token creation failed unexpectedly", error=str(e), error_type=type(e).__name__)
            raise InternalError() from e

    async def _issue_tokens(self, user: User) -> TokenGrant:
        roles = await self._role_store.get_by_user_id(user.id)
        claims = tuple(dict.fromkeys(claim for role in roles for claim in role.claims))
        person = await self._profile_store.get_by_id(user.person_id)

        issued_at = _now()
        token = self._token_builder.build(user, person, claims, issued_at=issued_at)
        lightweight_token = self._token_builder.build(user, person, (), issued_at=issued_at)
        return TokenGrant(token=token, lightweight_token=lightweight_token)

    # ------------------------------------------------------------------
    # Password reset
    # ------------------------------------------------------------------

    async def request_password_reset(
        self,
        email: str,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Issue a reset code and mail it, if ``email`` belongs to a user.

        The outcome is identical whether or not the email is registered.

        Raises:
            InternalError: If storing the code or sending the email fails for a
                registered email.
        """
        log = logger.bind(
            operation="request_password_reset",
            correlation_id=correlation_id,
            email=mask_email(email),
        )
        try:
            reset_code = ResetCode.generate(ttl=self._reset_code_ttl, generator=self._code_generator)
            user = await self._credential_store.assign_reset_code(
                email, reset_code.digest, reset_code.expires_at
            )
            if user is None:
                # Same outcome as the found branch; the caller must not learn
                # whether the email is registered.
                log.info("Attempted to reset password for non existing user")
                return

            log.info("Password reset code set", user_id=user.id, code=reset_code.mask_for_logging())

            template = self._reset_mail_template
            await self._mail_sender.send_password_recovery_mail(
                user.email,
                reset_code.value,
                template.subject,
                template.text_body,
                template.html_body,
            )
            log.info("Reset password email sent", user_id=user.id)

            await self._publish(
                PasswordResetRequestedEvent(
                    occurred_at=_now(),
                    correlation_id=correlation_id,
                    user_id=user.id,
                    email=user.email,
                    code_expires_at=reset_code.expires_at,
                )
            )
        except JwtGateError:
            raise
        except Exception as e:
            log.error("Password reset request failed", error=str(e), error_type=type(e).__name__)
            raise InternalError() from e

    async def complete_password_reset(
        self,
        reset_code: str,
        password: str,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Consume a reset code and replace the user's password.

        Raises:
            NotFoundError: If the code is unknown, expired or already used.
            PasswordValidationError: If the new password violates the policy.
            InternalError: If a collaborator fails.
        """
        log = logger.bind(
            operation="complete_password_reset",
            correlation_id=correlation_id,
            code=mask_code(reset_code),
        )
        try:
            try:
                user = await self._credential_store.complete_password_reset(reset_code, password)
            except PasswordValidationError as e:
                log.info("Invalid user input", failures=e.failures)
                await self._publish(
                    PasswordResetFailedEvent(
                        occurred_at=_now(),
                        correlation_id=correlation_id,
                        code_prefix=mask_code(reset_code),
                        failure_reason="weak_password",
                    )
                )
                raise

            if user is None:
                log.info("No user found with matching password reset code")
                await self._publish(
                    PasswordResetFailedEvent(
                        occurred_at=_now(),
                        correlation_id=correlation_id,
                        code_prefix=mask_code(reset_code),
                        failure_reason="unknown_code",
                    )
                )
                raise NotFoundError("Password reset code not found")

            log.info("Password reset completed", user_id=user.id)
            await self._publish(
                PasswordResetCompletedEvent(
                    occurred_at=_now(),
                    correlation_id=correlation_id,
                    user_id=user.id,
                    email=user.email,
                )
            )
        except JwtGateError:
            raise
        except Exception as e:
            log.error("Password reset failed unexpectedly", error=str(e), error_type=type(e).__name__)
            raise InternalError() from e

    async def _publish(self, event) -> None:
        try:
            await self._event_publisher.publish(event)
        except Exception as e:
            logger.error(
                "Failed to publish domain event",
                event_type=type(event).__name__,
                correlation_id=event.correlation_id,
                error=str(e),
                error_type=type(e).__name__,
            )
