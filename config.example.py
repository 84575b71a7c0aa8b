# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKTRACK_APP_NAME": "App name used in log lines (default: tasktrack).",
    "TASKTRACK_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TASKTRACK_LOG_FILE": "Optional path of a full DEBUG log file (default: no file).",
    # Storage
    "TASKTRACK_STORE_PATH": (
        "Task store used by create/list/remove when --file is not given (default: tasks.json)."
    ),
}
