import json
import os
from datetime import datetime

DEFAULT_CONFIG = {
    "blank_symbol": "_",
    "accept_state": "halt",
    "reject_state": "reject",
    "default_example": "flip_first",
    "initial_input": "010",
    "speed_ms": 300,
    "min_speed_ms": 50,
    "max_speed_ms": 2000,
    "max_steps": 10_000,
    "max_symbols": 5,
    "max_state_label": 8,
    "trace_enabled": False,
    "output_directory": "logs/",
    "log_file_prefix": "tm_run_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "blank_symbol": str,
    "accept_state": str,
    "reject_state": str,
    "default_example": str,
    "initial_input": str,
    "speed_ms": int,
    "min_speed_ms": int,
    "max_speed_ms": int,
    "max_steps": int,
    "max_symbols": int,
    "max_state_label": int,
    "trace_enabled": bool,
    "output_directory": str,
    "log_file_prefix": str
}


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is an int subclass; don't let True pass as a step count
        if expected_type is int and isinstance(config[key], bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if len(config["blank_symbol"]) != 1:
        raise ValueError("blank_symbol must be a single character.")
    if config["accept_state"] == config["reject_state"]:
        raise ValueError("accept_state and reject_state must differ.")
    if not 0 < config["min_speed_ms"] <= config["max_speed_ms"]:
        raise ValueError("Speed bounds must satisfy 0 < min_speed_ms <= max_speed_ms.")
    if not config["min_speed_ms"] <= config["speed_ms"] <= config["max_speed_ms"]:
        raise ValueError("speed_ms must lie between min_speed_ms and max_speed_ms.")
    if config["max_steps"] < 1:
        raise ValueError("max_steps must be at least 1.")


def load_config(path="config/runtime_config.json", verbose=True):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    # Validate schema
    validate_config(config)

    # Validate output directory
    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config


def save_config(config, path="config/runtime_config.json"):
    validate_config(config)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
