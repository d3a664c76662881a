import pytest
from auth import Role, StaticCredentialChecker
from config import DEFAULT_ACCOUNTS
from session import (SessionShell, ShellState, Session, actions_for, VIEW_RESOURCES, INSERT_RESOURCE,
                     DELETE_RESOURCE, VIEW_REQUESTS, REQUEST_ACCESS)


@pytest.fixture
def shell():
    return SessionShell(StaticCredentialChecker(DEFAULT_ACCOUNTS))


def test_starts_logged_out(shell):
    assert shell.state is ShellState.LOGGED_OUT
    assert shell.session is None


def test_rejected_login_stays_logged_out(shell):
    assert shell.login("root", "wrong") is None
    assert shell.state is ShellState.LOGGED_OUT
    assert shell.session is None


def test_admin_login(shell):
    session = shell.login("root", "1234")
    assert session == Session("root", Role.ADMIN)
    assert session.is_admin
    assert shell.state is ShellState.LOGGED_IN


def test_logout_is_restartable(shell):
    shell.login("user1", "1234")
    shell.logout()
    assert shell.state is ShellState.LOGGED_OUT
    assert shell.session is None
    session = shell.login("user2", "12345")
    assert session.role is Role.STANDARD_USER
    assert not session.is_admin


def test_second_login_requires_logout(shell):
    shell.login("user1", "1234")
    with pytest.raises(RuntimeError):
        shell.login("root", "1234")
    assert shell.session.username == "user1"


def test_actions_for_admin():
    assert actions_for(Role.ADMIN) == [VIEW_RESOURCES, INSERT_RESOURCE, DELETE_RESOURCE, VIEW_REQUESTS]


def test_actions_for_standard_user():
    actions = actions_for(Role.STANDARD_USER)
    assert actions == [VIEW_RESOURCES, REQUEST_ACCESS]
    assert INSERT_RESOURCE not in actions
    assert DELETE_RESOURCE not in actions


def test_actions_for_rejected():
    assert actions_for(Role.REJECTED) == []
