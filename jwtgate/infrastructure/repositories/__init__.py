from .credential_store import CredentialStore
from .profile_store import ProfileStore
from .role_store import RoleStore

__all__ = ["CredentialStore", "ProfileStore", "RoleStore"]
