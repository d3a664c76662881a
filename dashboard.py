import logging
from collections import namedtuple
from backend import InventoryError, format_requests
from session import actions_for

# kind is one of 'info', 'warning', 'error'
Notice = namedtuple('Notice', ['kind', 'title', 'message'])


def error_notice(err):
    return Notice('error', "Error", f"Error: {err}")


class DashboardModel:
    """
    State and actions behind one dashboard: the last good resource snapshot,
    the name filter and the sort order. Every action returns the Notice the
    view should show, or None when there is nothing to show.
    """

    def __init__(self, session, store, request_log):
        self.session = session
        self.store = store
        self.request_log = request_log
        self.data = None
        self.filter_text = ''
        self.sort_column = None
        self.sort_reverse = False

    @property
    def actions(self):
        return actions_for(self.session.role)

    def refresh(self):
        # Fetch first; the snapshot is only replaced on success
        try:
            data = self.store.list_all()
        except InventoryError as e:
            return [error_notice(e)]
        self.data = data
        return []

    def set_filter(self, text):
        self.filter_text = text

    def sort_by(self, column):
        """
        Sort on a column. Selecting the current sort column again flips the direction.

        Args:
            column (str): Column header.
        """
        if column == self.sort_column:
            self.sort_reverse = not self.sort_reverse
        else:
            self.sort_column = column
            self.sort_reverse = False

    def visible_rows(self):
        """
        Rows to display: the snapshot filtered by name and ordered by the current sort.

        Returns:
            DataFrame: Possibly empty; None before the first successful refresh.
        """
        if self.data is None:
            return None
        names = self.data['Name'].fillna('').astype(str).str.lower()
        rows = self.data[names.str.contains(self.filter_text.lower(), regex=False)]
        if self.sort_column is not None:
            rows = rows.sort_values(self.sort_column, ascending=not self.sort_reverse, kind='stable')
        return rows

    def insert(self, values):
        if values is None:
            return []
        try:
            self.store.insert(*values)
        except InventoryError as e:
            return [error_notice(e)]
        return [Notice('info', "Insert Resource", "Resource added.")] + self.refresh()

    def delete(self, text):
        if text is None or not text.strip():
            return []
        try:
            removed = self.store.delete_by_id(text)
        except InventoryError as e:
            return [error_notice(e)]
        message = "Deleted." if removed > 0 else "ID not found."
        return [Notice('info', "Delete Resource", message)] + self.refresh()

    def view_requests(self):
        try:
            requests = self.request_log.list_requests()
        except InventoryError as e:
            return [error_notice(e)]
        return [Notice('info', "Access Requests", format_requests(requests))]

    def request_access(self):
        if self.request_log.submit(self.session.username):
            return [Notice('info', "Request Access", "Request sent to admin.")]
        logging.warning(f'Access request failure shown to {self.session.username}')
        return [Notice('warning', "Request Access", "Request could not be recorded. Please try again later.")]
