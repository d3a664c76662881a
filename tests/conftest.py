import sqlite3
import pytest
import mysql.connector
from decimal import Decimal

SCHEMA = """
CREATE TABLE resource (
    resource_id INTEGER PRIMARY KEY AUTOINCREMENT,
    resource_name TEXT,
    timeline TEXT,
    quantity INTEGER,
    cost NUMERIC
);
CREATE TABLE access_requests (
    username TEXT,
    request_time TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class FakeCursor:
    """Translates the MySQL driver's %s placeholders onto a sqlite cursor."""

    def __init__(self, cursor):
        self._cursor = cursor

    def execute(self, query, params=()):
        params = tuple(float(p) if isinstance(p, Decimal) else p for p in params)
        try:
            self._cursor.execute(query.replace('%s', '?'), params)
        except sqlite3.Error as err:
            raise mysql.connector.Error(msg=str(err)) from err

    def fetchall(self):
        return self._cursor.fetchall()

    @property
    def description(self):
        return self._cursor.description

    @property
    def lastrowid(self):
        return self._cursor.lastrowid

    @property
    def rowcount(self):
        return self._cursor.rowcount

    def close(self):
        self._cursor.close()


class FakeConnection:
    def __init__(self, database, cursor_error=None):
        self.database = database
        self.cursor_error = cursor_error
        self.closed = False

    def cursor(self):
        if self.cursor_error is not None:
            raise self.cursor_error
        return FakeCursor(self.database.cursor())

    def commit(self):
        self.database.commit()

    def close(self):
        self.closed = True


class FakeServer:
    def __init__(self):
        self.database = sqlite3.connect(':memory:')
        self.database.executescript(SCHEMA)
        self.connections = []
        self.available = True
        self.cursor_error = None

    def connect(self, **kwargs):
        if not self.available:
            raise mysql.connector.Error(msg="Can't connect to MySQL server")
        connection = FakeConnection(self.database, self.cursor_error)
        self.connections.append(connection)
        return connection


@pytest.fixture
def fake_server(monkeypatch):
    server = FakeServer()
    monkeypatch.setattr(mysql.connector, 'connect', server.connect)
    yield server
    server.database.close()


@pytest.fixture
def db_config():
    return {'host': 'localhost', 'user': 'test', 'password': '', 'database': 'company_db', 'port': 3306}
