# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "Console logging level (default: INFO).",
    # Behaviour
    "TASKBOARD_SEED_ON_FIRST_RUN": "Seed the initial dataset into an empty store (true/false).",
    "TASKBOARD_CONSOLE_ENABLED": "Run the interactive console (true/false).",
    # Paths (gitignored)
    "TASKBOARD_DATA_DIR": "Local data directory (default: .local/taskboard).",
    "TASKBOARD_STORE_PATH": "Key/value SQLite path (default: <data_dir>/board.sqlite3).",
}
