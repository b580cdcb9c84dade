"""Module for handling configuration and logging setup."""
import json
import logging
from typing import Dict, Any
from .constants import CONFIG_FILE, CONFIG_KEYS, DEFAULT_OPTIONS
from .validation import OPTION_VALIDATORS

def configure_logging(debug: bool) -> None:
    """Configure logging based on debug flag.
    
    Args:
        debug: Whether to enable debug logging
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s - %(message)s')
    else:
        logging.basicConfig(level=logging.INFO, format='%(message)s')

def default_config() -> Dict[str, Any]:
    """Return the configuration used when no file overrides it."""
    return {key: DEFAULT_OPTIONS[option] for key, option in CONFIG_KEYS.items()}

def read_config(path: str = CONFIG_FILE) -> Dict[str, Any]:
    """Read and validate configuration from file.
    
    Args:
        path: Path of the JSON configuration file
        
    Returns:
        Configuration dictionary with defaults applied
    """
    logging.debug(f"Reading configuration from {path}")
    config = default_config()
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            try:
                user_config = json.load(f)
            except json.JSONDecodeError:
                logging.warning("Invalid JSON in config file. Using default configuration.")
                return config
    except FileNotFoundError:
        logging.debug("Configuration file not found. Using default configuration.")
        return config
        
    if not isinstance(user_config, dict):
        logging.warning("Config file must contain a JSON object. Using default configuration.")
        return config
        
    for key, value in user_config.items():
        if key in CONFIG_KEYS:
            predicate, expected = OPTION_VALIDATORS[CONFIG_KEYS[key]]
            if predicate(value):
                config[key] = value
            else:
                logging.warning(f"Invalid '{key}' in config (expected {expected}). Using default.")
        else:
            logging.warning(f"Unknown key '{key}' in config. Ignoring.")
            
    return config

def options_from_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase configuration keys to ProgressIndicator keyword options."""
    return {option: config[key] for key, option in CONFIG_KEYS.items() if key in config}
