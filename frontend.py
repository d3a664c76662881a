import tkinter as tk
from tkinter import ttk, messagebox, simpledialog
import logging
from screeninfo import get_monitors, ScreenInfoError
from backend import ResourceStore, AccessRequestLog
from dashboard import DashboardModel
from session import (SessionShell, VIEW_RESOURCES, INSERT_RESOURCE, DELETE_RESOURCE,
                     VIEW_REQUESTS, REQUEST_ACCESS)
from config import RESOURCE_COLUMNS, DASHBOARD_SIZE, LOGIN_SIZE


def center_on_main_monitor(window, width, height):
    try:
        monitors = get_monitors()
    except ScreenInfoError as e:
        logging.warning(f'Could not query monitors: {e}')
        monitors = []
    if monitors:
        main_monitor = min(monitors, key=lambda monitor: monitor.x)
        x = main_monitor.x + (main_monitor.width - width) // 2
        y = main_monitor.y + (main_monitor.height - height) // 2
        window.geometry(f'{width}x{height}+{x}+{y}')
    else:
        window.geometry(f'{width}x{height}')


class ApplicationGUI:
    def __init__(self, root, db_config, checker):
        self.root = root
        self.shell = SessionShell(checker)
        self.store = ResourceStore(db_config)
        self.request_log = AccessRequestLog(db_config)
        self.screen = None
        self.root.protocol("WM_DELETE_WINDOW", self.root.destroy)
        self.show_login()

    def _swap_screen(self, screen):
        if self.screen is not None:
            self.screen.destroy()
        self.screen = screen
        self.screen.pack(fill=tk.BOTH, expand=True)

    def show_login(self):
        self.root.title("Login")
        center_on_main_monitor(self.root, *LOGIN_SIZE)
        self._swap_screen(LoginFrame(self.root, on_submit=self.attempt_login))

    def attempt_login(self, username, password):
        session = self.shell.login(username, password)
        if session is None:
            messagebox.showerror("Login", "Invalid credentials.", parent=self.root)
            return
        self.show_dashboard(session)

    def show_dashboard(self, session):
        self.root.title("Admin Dashboard" if session.is_admin else "User Dashboard")
        center_on_main_monitor(self.root, *DASHBOARD_SIZE)
        self._swap_screen(DashboardFrame(self.root, session, self.store, self.request_log, on_logout=self.logout))

    def logout(self):
        self.shell.logout()
        self.show_login()


class LoginFrame(ttk.Frame):
    def __init__(self, parent, on_submit):
        super().__init__(parent, padding=10)
        self.on_submit = on_submit
        self.username_var = tk.StringVar()
        self.password_var = tk.StringVar()

        ttk.Label(self, text="Username:").grid(row=0, column=0, sticky='w', pady=5)
        username_entry = ttk.Entry(self, textvariable=self.username_var)
        username_entry.grid(row=0, column=1, sticky='we', pady=5)
        ttk.Label(self, text="Password:").grid(row=1, column=0, sticky='w', pady=5)
        password_entry = ttk.Entry(self, textvariable=self.password_var, show='*')
        password_entry.grid(row=1, column=1, sticky='we', pady=5)
        ttk.Button(self, text="Login", command=self.submit).grid(row=2, column=1, sticky='e', pady=10)
        self.grid_columnconfigure(1, weight=1)

        password_entry.bind('<Return>', lambda e: self.submit())
        username_entry.focus_set()

    def submit(self):
        self.on_submit(self.username_var.get(), self.password_var.get())


class DashboardFrame(ttk.Frame):
    def __init__(self, parent, session, store, request_log, on_logout):
        super().__init__(parent, padding=10)
        self.model = DashboardModel(session, store, request_log)
        self.on_logout = on_logout
        self.setup_widgets()

    def setup_widgets(self):
        handlers = {
            VIEW_RESOURCES: self.list_resources,
            INSERT_RESOURCE: self.insert_resource,
            DELETE_RESOURCE: self.delete_resource,
            VIEW_REQUESTS: self.view_requests,
            REQUEST_ACCESS: self.request_access,
        }
        top_panel = ttk.Frame(self)
        top_panel.pack(fill=tk.X)
        for action in self.model.actions:
            ttk.Button(top_panel, text=action, command=handlers[action]).pack(side=tk.LEFT, padx=2)

        # Name filter
        filter_container = ttk.Frame(self)
        filter_container.pack(fill=tk.X, pady=5)
        ttk.Label(filter_container, text="Filter by name:").pack(side=tk.LEFT, padx=(0, 10))
        self.filter_var = tk.StringVar()
        ttk.Entry(filter_container, textvariable=self.filter_var).pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.filter_var.trace_add("write", lambda name, index, mode: self.apply_filter())

        tree_frame = ttk.LabelFrame(self, text="Resources")
        tree_frame.pack(fill=tk.BOTH, expand=True)
        self.tree = ttk.Treeview(tree_frame, columns=RESOURCE_COLUMNS, show="headings")
        for col in RESOURCE_COLUMNS:
            self.tree.heading(col, text=col, command=lambda c=col: self.sort_by_column(c))
            self.tree.column(col, anchor='w', minwidth=60)
        self.tree.column('ID', anchor='center', width=60)
        self.tree.column('Quantity', anchor='center', width=80)
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        vsb = ttk.Scrollbar(tree_frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)
        vsb.pack(side='right', fill='y')

        bottom_panel = ttk.Frame(self)
        bottom_panel.pack(fill=tk.X, pady=(5, 0))
        ttk.Button(bottom_panel, text="Logout", command=self.on_logout).pack(side=tk.RIGHT)

    def show_notices(self, notices):
        dialogs = {
            'info': messagebox.showinfo,
            'warning': messagebox.showwarning,
            'error': messagebox.showerror,
        }
        for notice in notices:
            dialogs[notice.kind](notice.title, notice.message, parent=self)

    def display_data_in_table(self):
        rows = self.model.visible_rows()
        if rows is None:
            return
        self.tree.delete(*self.tree.get_children())
        for _, row in rows.iterrows():
            self.tree.insert('', 'end', values=row.tolist())

    def list_resources(self):
        self.show_notices(self.model.refresh())
        self.display_data_in_table()

    def apply_filter(self):
        self.model.set_filter(self.filter_var.get())
        self.display_data_in_table()

    def sort_by_column(self, col):
        self.model.sort_by(col)
        self.display_data_in_table()

    def insert_resource(self):
        dialog = InsertResourceDialog(self)
        self.show_notices(self.model.insert(dialog.result))
        self.display_data_in_table()

    def delete_resource(self):
        text = simpledialog.askstring("Delete Resource", "Enter Resource ID to delete:", parent=self)
        self.show_notices(self.model.delete(text))
        self.display_data_in_table()

    def view_requests(self):
        self.show_notices(self.model.view_requests())

    def request_access(self):
        self.show_notices(self.model.request_access())


class InsertResourceDialog(simpledialog.Dialog):
    fields = ["Name", "Timeline", "Quantity", "Cost"]

    def __init__(self, parent):
        self.result = None
        self.entries = {}
        super().__init__(parent, title="Insert Resource")

    def body(self, master):
        for row, field in enumerate(self.fields):
            ttk.Label(master, text=f"{field}:").grid(row=row, column=0, sticky='w', padx=5, pady=2)
            entry = ttk.Entry(master)
            entry.grid(row=row, column=1, sticky='we', padx=5, pady=2)
            self.entries[field] = entry
        return self.entries["Name"]

    def apply(self):
        self.result = tuple(self.entries[field].get() for field in self.fields)
