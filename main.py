# Description: This module is the entry point for the application. It opens the login screen and runs the Tk main loop.

# Import the required modules
import logging
import tkinter as tk
from frontend import ApplicationGUI
from auth import default_checker
from config import db_config, LOG_FILE, LOG_LEVEL


def main():
    logging.basicConfig(filename=LOG_FILE, level=LOG_LEVEL,
                        format='%(asctime)s %(levelname)s %(message)s')
    try:
        root = tk.Tk()
        app = ApplicationGUI(root, db_config, default_checker())
        app.root.mainloop()
    except Exception as e:
        logging.error(f'Application failed to start: {e}')
        raise


if __name__ == '__main__':
    main()
