import logging
import re
from contextlib import contextmanager
from decimal import Decimal
import pandas as pd
import mysql.connector
from config import RESOURCE_COLUMNS, REQUEST_COLUMNS


class InventoryError(Exception):
    pass


class ParseError(InventoryError, ValueError):
    pass


class DataAccessError(InventoryError):
    pass


class StoreConnectionError(DataAccessError):
    pass


@contextmanager
def open_cursor(db_config):
    """
    Open a connection and a cursor for a single statement. Both are closed on
    every exit path.

    Args:
        db_config (dict): Database configuration parameters.

    Yields:
        tuple: The (connection, cursor) pair.
    """
    try:
        connection = mysql.connector.connect(**db_config)
    except mysql.connector.Error as err:
        logging.error(f'Database connection failed: {err}')
        raise StoreConnectionError(f'Database unavailable: {err}') from err
    cursor = None
    try:
        cursor = connection.cursor()
        yield connection, cursor
    except mysql.connector.Error as err:
        logging.error(f'Error: {err}')
        raise DataAccessError(str(err)) from err
    finally:
        if cursor is not None:
            cursor.close()
        connection.close()


INT_PATTERN = re.compile(r'[+-]?[0-9]+')
DECIMAL_PATTERN = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')
INT_MIN, INT_MAX = -2**31, 2**31 - 1


def _parse_int(text, label):
    text = str(text).strip()
    if not INT_PATTERN.fullmatch(text):
        raise ParseError(f'{label} must be a whole number, got {text!r}')
    value = int(text)
    # MySQL INT column range
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f'{label} is out of range: {text}')
    return value


def parse_quantity(text):
    """
    Parse the quantity field of the insert form.

    Args:
        text (str): User input, ASCII digits with an optional sign.

    Returns:
        int: The parsed quantity. Negative values are accepted.
    """
    return _parse_int(text, 'Quantity')


def parse_cost(text):
    """
    Parse the cost field of the insert form.

    Args:
        text (str): User input, plain decimal notation such as 999.99.

    Returns:
        Decimal: The parsed cost.
    """
    text = str(text).strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise ParseError(f'Cost must be a decimal number, got {text!r}')
    return Decimal(text)


def parse_resource_id(text):
    return _parse_int(text, 'Resource ID')


class ResourceStore:
    def __init__(self, db_config):
        """
        Initialize the store with the database configuration.

        Args:
            db_config (dict): Database configuration parameters.
        """
        self.db_config = db_config

    def list_all(self):
        """
        Fetch every resource in the database's scan order.

        Returns:
            DataFrame: One row per resource with the columns ID, Name, Timeline, Quantity and Cost.
        """
        with open_cursor(self.db_config) as (connection, cursor):
            cursor.execute("SELECT * FROM resource")
            names = [column[0] for column in cursor.description]
            rows = cursor.fetchall()
        frame = pd.DataFrame(rows, columns=names)
        frame = frame.rename(columns={
            'resource_id': 'ID',
            'resource_name': 'Name',
            'timeline': 'Timeline',
            'quantity': 'Quantity',
            'cost': 'Cost',
        })
        logging.info(f'Fetched {len(frame)} resources')
        return frame.reindex(columns=RESOURCE_COLUMNS)

    def insert(self, name, timeline, quantity, cost):
        """
        Insert a resource. Numeric fields are parsed before the database is contacted.

        Args:
            name (str): Resource name.
            timeline (str): Free-form timeline.
            quantity (str): Quantity as entered by the user.
            cost (str): Cost as entered by the user.

        Returns:
            int: The identifier assigned by the database.
        """
        quantity_value = parse_quantity(quantity)
        cost_value = parse_cost(cost)
        with open_cursor(self.db_config) as (connection, cursor):
            cursor.execute(
                "INSERT INTO resource (resource_name, timeline, quantity, cost) VALUES (%s, %s, %s, %s)",
                (name, timeline, quantity_value, cost_value),
            )
            connection.commit()
            resource_id = cursor.lastrowid
        logging.info(f'Resource inserted: {resource_id} ({name})')
        return resource_id

    def delete_by_id(self, resource_id):
        """
        Delete a resource by identifier.

        Args:
            resource_id (str): Identifier as entered by the user.

        Returns:
            int: Number of rows removed; 0 when no resource has that identifier.
        """
        resource_id = parse_resource_id(resource_id)
        with open_cursor(self.db_config) as (connection, cursor):
            cursor.execute("DELETE FROM resource WHERE resource_id = %s", (resource_id,))
            connection.commit()
            removed = cursor.rowcount
        if removed:
            logging.info(f'Resource deleted: {resource_id}')
        else:
            logging.info(f'Resource not found for deletion: {resource_id}')
        return removed


class AccessRequestLog:
    def __init__(self, db_config):
        self.db_config = db_config

    def submit(self, username):
        """
        Record an access request for a user. Failures are logged, never raised.

        Args:
            username (str): Requesting user.

        Returns:
            bool: True when the row was written.
        """
        try:
            with open_cursor(self.db_config) as (connection, cursor):
                cursor.execute("INSERT INTO access_requests (username) VALUES (%s)", (username,))
                connection.commit()
        except DataAccessError as err:
            logging.error(f'Access request for {username} not recorded: {err}')
            return False
        logging.info(f'Access request recorded for {username}')
        return True

    def list_requests(self):
        """
        Fetch all access requests, most recent first.

        Returns:
            DataFrame: Columns Username and Time.
        """
        with open_cursor(self.db_config) as (connection, cursor):
            cursor.execute("SELECT * FROM access_requests ORDER BY request_time DESC")
            names = [column[0] for column in cursor.description]
            rows = cursor.fetchall()
        frame = pd.DataFrame(rows, columns=names)
        frame = frame.rename(columns={'username': 'Username', 'request_time': 'Time'})
        return frame.reindex(columns=REQUEST_COLUMNS)


def format_requests(frame):
    if frame.empty:
        return "No requests."
    return "\n".join(f"User: {row['Username']} | Time: {row['Time']}" for _, row in frame.iterrows())
