"""
This module loads the app configuration. The configuration is stored in a yaml file in the user directory, every
value can be overridden by an environment variable. The structure of the configuration file is as follows:
supabase:
    url: https://<project>.supabase.co
    anon_key: <public anon key>
    timeout: 10
logging:
    level: INFO
"""
import logging
import os
import yaml

from pfd import CONFIG_PATH


ENV_OVERRIDES = {
    'SUPABASE_URL': ('supabase', 'url'),
    'SUPABASE_ANON_KEY': ('supabase', 'anon_key'),
    'SUPABASE_TIMEOUT': ('supabase', 'timeout'),
    'PFD_LOG_LEVEL': ('logging', 'level'),
}

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


class ConfigError(Exception):
    """Raised when a required configuration value is missing"""
    def __init__(self, message="Invalid configuration"):
        self.message = message
        super().__init__(self.message)


def load_config(path: str = CONFIG_PATH) -> dict:
    """
    Load the configuration file and apply the environment variable overrides.

    Parameters
    ----------
    path : str
        The path of the yaml configuration file. A missing file is treated as an empty configuration.

    Returns
    -------
    dict
        The configuration dictionary
    """
    try:
        with open(path, 'r') as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        config = {}

    for env_var, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            config.setdefault(section, {})[key] = value
    return config


def get_supabase_settings(config: dict) -> tuple[str, str, float]:
    """
    Extract the backend url, key and request timeout from the configuration.

    Raises
    ------
    ConfigError
        If the url or the key are missing
    """
    supabase = config.get('supabase') or {}
    url = supabase.get('url')
    key = supabase.get('anon_key')
    if not url or not key:
        raise ConfigError(f"Supabase url and anon key must be set in {CONFIG_PATH} or through the SUPABASE_URL and "
                          f"SUPABASE_ANON_KEY environment variables")
    return url, key, float(supabase.get('timeout', 10))


def configure_logging(config: dict) -> None:
    """Configure the root logger once, according to the logging section of the configuration"""
    level = (config.get('logging') or {}).get('level', 'INFO')
    logging.basicConfig(level=str(level).upper(), format=LOG_FORMAT)
