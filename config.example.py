# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: task-board).",
    "TASKBOARD_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKBOARD_DATA_DIR": "Local data directory (default: .local/task-board).",
    "TASKBOARD_STORAGE_DB_PATH": (
        "LocalStorage SQLite path (default: <data_dir>/local_storage.sqlite3)."
    ),
    "TASKBOARD_STORAGE_KEY": "Slot name holding the task list (default: tasks).",
    # Behaviour
    "TASKBOARD_ALLOW_EMPTY_TITLES": "Accept blank task titles (true/false, default: false).",
}
