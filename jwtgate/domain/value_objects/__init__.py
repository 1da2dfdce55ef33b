from .auth_token import AuthToken, TokenGrant
from .mail_template import PasswordResetMailTemplate
from .reset_code import ResetCode

__all__ = ["AuthToken", "PasswordResetMailTemplate", "ResetCode", "TokenGrant"]
