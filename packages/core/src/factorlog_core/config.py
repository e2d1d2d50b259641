import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "store": "json",  # json | sqlite | memory
    "store_path": None,  # None = backend default (.factorlog/ or .factorlog.db)
    "history_limit": 200,
}

STORE_BACKENDS = ("json", "sqlite", "memory")


def load_config(config_path: str = ".factorlog.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .factorlog.yml in the current directory
      3. CLI argument overrides
      4. FACTORLOG_STORE / FACTORLOG_STORE_PATH environment variables
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        if not isinstance(file_config, dict):
            raise ValueError(f"{config_path} must contain a mapping, got {type(file_config).__name__}")
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    if os.environ.get("FACTORLOG_STORE"):
        config["store"] = os.environ["FACTORLOG_STORE"]
    if os.environ.get("FACTORLOG_STORE_PATH"):
        config["store_path"] = os.environ["FACTORLOG_STORE_PATH"]

    limit = config["history_limit"]
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"history_limit must be a positive integer, got {limit!r}")

    return config
