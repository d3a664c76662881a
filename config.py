# Description: Runtime configuration for the resource console. Values come from the environment (or a .env file).

import os
from dotenv import load_dotenv

load_dotenv()

#db-connection data
db_config = {
    'host': os.getenv('INVENTORY_DB_HOST', 'localhost'),
    'user': os.getenv('INVENTORY_DB_USER', 'root'),
    'password': os.getenv('INVENTORY_DB_PASSWORD', ''),
    'database': os.getenv('INVENTORY_DB_NAME', 'company_db'),
    'port': int(os.getenv('INVENTORY_DB_PORT', '3306')),
    'connection_timeout': int(os.getenv('INVENTORY_DB_TIMEOUT', '10')),
}

LOG_FILE = os.getenv('INVENTORY_LOG_FILE', 'app.log')
LOG_LEVEL = os.getenv('INVENTORY_LOG_LEVEL', 'INFO')

# username -> (password, role name)
DEFAULT_ACCOUNTS = {
    'root': ('1234', 'admin'),
    'user1': ('1234', 'standard_user'),
    'user2': ('12345', 'standard_user'),
}

RESOURCE_COLUMNS = ['ID', 'Name', 'Timeline', 'Quantity', 'Cost']
REQUEST_COLUMNS = ['Username', 'Time']

DASHBOARD_SIZE = (700, 500)
LOGIN_SIZE = (300, 180)
