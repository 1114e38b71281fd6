# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "NATHANBOT_APP_NAME": "App display name (default: NathanBot).",
    "NATHANBOT_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths
    "NATHANBOT_DATA_DIR": "Storage directory (default: data).",
    "NATHANBOT_TASKS_TEXT_PATH": "Human-readable task log (default: <data_dir>/nathanbot.txt).",
    "NATHANBOT_TASKS_SNAPSHOT_PATH": "JSON snapshot used for reload (default: <data_dir>/nathanbot.json).",
    "NATHANBOT_LOG_DIR": "Log directory (default: <data_dir>/logs).",
}
