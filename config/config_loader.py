import json
import os
from datetime import datetime

DEFAULT_CONFIG = {
    "step_limit": None,
    "verbose": False,
    "log_runs": False,
    "batch_size": 1024,
    "output_directory": "logs/",
    "log_file_prefix": "trmsim_",
    "results_directory": "results/"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "step_limit": (int, type(None)),
    "verbose": bool,
    "log_runs": bool,
    "batch_size": int,
    "output_directory": str,
    "log_file_prefix": str,
    "results_directory": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        value = config[key]
        # bool is an int subclass; only accept it where bool is expected
        if not isinstance(value, expected_type) or (isinstance(value, bool) and expected_type is not bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    if config["step_limit"] is not None and config["step_limit"] < 0:
        raise ValueError("step_limit must be null or a non-negative integer.")
    if config["batch_size"] <= 0:
        raise ValueError("batch_size must be a positive integer.")

def load_config(path=None, echo=False):
    config = DEFAULT_CONFIG.copy()

    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found at: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        # Merge defaults with overrides
        config.update(user_config)

    # Validate schema
    validate_config(config)

    # Validate output directory
    if path is not None and config["log_runs"]:
        os.makedirs(config["output_directory"], exist_ok=True)

    if echo:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
