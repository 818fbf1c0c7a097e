import os

__version__ = "0.1.0"


USER_DIR = os.path.join(os.path.expanduser('~'), '.finance-dashboard')
CONFIG_PATH = os.path.join(USER_DIR, 'config.yaml')
