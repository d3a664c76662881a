import enum
from functools import lru_cache
import bcrypt
from config import DEFAULT_ACCOUNTS


class Role(enum.Enum):
    ADMIN = 'admin'
    STANDARD_USER = 'standard_user'
    REJECTED = 'rejected'


def hash_password(password):
    """
    Hash a password for storage in a credential table.

    Args:
        password (str): Plain text password.

    Returns:
        str: Salted bcrypt hash.
    """
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def verify_password(password, password_hash):
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # bcrypt refuses passwords longer than 72 bytes
        return False


class CredentialChecker:
    """
    Base class for credential verification. Subclasses decide how a
    username/password pair maps to a role.
    """

    def check(self, username, password):
        """
        Verify a username/password pair.

        Args:
            username (str): Submitted username.
            password (str): Submitted password.

        Returns:
            Role: The role granted, or Role.REJECTED.
        """
        raise NotImplementedError


class StaticCredentialChecker(CredentialChecker):
    def __init__(self, accounts):
        """
        Initialize the checker with a plain text account table.

        Args:
            accounts (dict): Maps username to a (password, role name) tuple.
        """
        self.accounts = {user: (pw, Role(role)) for user, (pw, role) in accounts.items()}

    def check(self, username, password):
        entry = self.accounts.get(username)
        if entry is None or entry[0] != password:
            return Role.REJECTED
        return entry[1]


class HashedCredentialChecker(CredentialChecker):
    def __init__(self, hashed_accounts):
        """
        Initialize the checker with bcrypt hashed passwords.

        Args:
            hashed_accounts (dict): Maps username to a (password hash, role name) tuple.
        """
        self.accounts = {user: (pw_hash, Role(role)) for user, (pw_hash, role) in hashed_accounts.items()}

    @classmethod
    def from_plaintext(cls, accounts):
        return cls({user: (hash_password(pw), role) for user, (pw, role) in accounts.items()})

    def check(self, username, password):
        entry = self.accounts.get(username)
        if entry is None or not verify_password(password, entry[0]):
            return Role.REJECTED
        return entry[1]


@lru_cache(maxsize=None)
def default_checker():
    """Checker used by the application: the built-in accounts, compared by hash."""
    return HashedCredentialChecker.from_plaintext(DEFAULT_ACCOUNTS)


def check_credentials(username, password):
    """
    Check a pair against the built-in account table.

    Args:
        username (str): Submitted username.
        password (str): Submitted password.

    Returns:
        Role: ADMIN, STANDARD_USER or REJECTED.
    """
    return default_checker().check(username, password)
