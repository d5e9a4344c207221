import os
import json

TRUTHY = {'1', 'true', 'yes', 'on'}


def get_testing_mode():
    """Check if testing mode is enabled"""
    env_value = os.environ.get('MOVEMENT_TESTING')
    if env_value is not None:
        return env_value.strip().lower() in TRUTHY

    config_file = os.path.join(os.path.dirname(__file__), 'config.json')
    try:
        with open(config_file, 'r') as f:
            config = json.load(f)
            return bool(config.get('testing_mode', False))
    except (OSError, ValueError, AttributeError):
        return False
