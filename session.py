import enum
import logging
from dataclasses import dataclass
from auth import Role

VIEW_RESOURCES = "View Resources"
INSERT_RESOURCE = "Insert Resource"
DELETE_RESOURCE = "Delete Resource"
VIEW_REQUESTS = "View Requests"
REQUEST_ACCESS = "Request Access"


class ShellState(enum.Enum):
    LOGGED_OUT = 'logged_out'
    LOGGED_IN = 'logged_in'


@dataclass(frozen=True)
class Session:
    username: str
    role: Role

    @property
    def is_admin(self):
        return self.role is Role.ADMIN


def actions_for(role):
    """
    Dashboard actions available to a role, in display order. Logout is always available and not listed.

    Args:
        role (Role): Role of the logged in user.

    Returns:
        list: Action labels.
    """
    if role is Role.ADMIN:
        return [VIEW_RESOURCES, INSERT_RESOURCE, DELETE_RESOURCE, VIEW_REQUESTS]
    if role is Role.STANDARD_USER:
        return [VIEW_RESOURCES, REQUEST_ACCESS]
    return []


class SessionShell:
    """
    Application state: which screen is active and who is logged in.
    """

    def __init__(self, checker):
        self.checker = checker
        self.state = ShellState.LOGGED_OUT
        self.session = None

    def login(self, username, password):
        if self.state is ShellState.LOGGED_IN:
            raise RuntimeError(f'Already logged in as {self.session.username}')
        role = self.checker.check(username, password)
        if role is Role.REJECTED:
            logging.warning(f'Rejected login for user: {username}')
            return None
        self.session = Session(username, role)
        self.state = ShellState.LOGGED_IN
        logging.info(f'User logged in: {username} ({role.value})')
        return self.session

    def logout(self):
        if self.session is not None:
            logging.info(f'User logged out: {self.session.username}')
        self.session = None
        self.state = ShellState.LOGGED_OUT
