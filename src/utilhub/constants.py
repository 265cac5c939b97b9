"""User-facing text, icons and classification keywords."""

from __future__ import annotations

from typing import Tuple

APP_NAME = "UTIL HUB"
APP_SUBTITLE = "Launcher for file-based utilities (.NET 10)"

UTILITIES_FOLDER_NAME = "Utilities"
FILE_PATTERN = "*.csx"
HEADER_LINES_TO_SCAN = 60

# Header directives
DIRECTIVE_MARKER = "// @"
KEY_ID = "@id"
KEY_TITLE = "@title"
KEY_DESC = "@desc"
KEY_TAGS = "@tags"

# Environment
ENV_NO_EMOJI = "UTILHUB_NO_EMOJI"
ENV_VERBOSE = "UTILHUB_VERBOSE"

# Actions
ACTION_RUN = "Run"
ACTION_RELOAD = "Reload List"
ACTION_OPEN_FOLDER = "Open Utilities Folder"
ACTION_EXIT = "Exit"

# Headers and labels
HEADER_ACTION = "Action"
HEADER_UTILITIES = "Utilities"
LABEL_ID = "Id:"
LABEL_FILE = "File:"
LABEL_DESCRIPTION = "Description:"
LABEL_TAGS = "Tags:"

# Status
STATUS_LOADING = "Loading utilities..."
STATUS_BUILDING = "Building..."
STATUS_RUNNING = "Running:"

KEYBOARD_HINTS = "↑/↓ move • PgUp/PgDn • Enter select • Esc exit"

# Messages
MESSAGE_FOLDER_NOT_FOUND = "Folder not found:"
MESSAGE_NO_UTILITIES = "No .csx utilities found in /Utilities"
MESSAGE_PRESS_KEY_TO_EXIT = "Press any key to exit..."
MESSAGE_PRESS_KEY_TO_RETURN = "Press any key to return to menu..."
MESSAGE_DONE = "Done."
MESSAGE_FINISHED_WITH_EXIT_CODE = "Finished with exit code:"
MESSAGE_EXIT_CODE = "Exit code:"
MESSAGE_BUILD_FAILED = "Build failed"
MESSAGE_FAILED_TO_START = "Failed to start process."
MESSAGE_COULD_NOT_OPEN_FOLDER = "Could not open folder automatically. Path:"
MESSAGE_SKIPPED_FILES = "Skipped unreadable utilities:"

FORMAT_ITEM_COUNT = "({0}/{1})"
FORMAT_EXIT_CODE = "(exit code {0})"

PLACEHOLDER = "-"

# Icons
ICON_DEFAULT = "🔹"
ICON_PLAIN = "•"
ICON_DATABASE = "🗄️"
ICON_MEDIA = "🎬"
ICON_NETWORK = "🌐"
ICON_DEVELOPMENT = "🔧"
ICON_FILE = "📁"

# Checked in order; the first category with a matching keyword wins.
ICON_CATEGORIES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (ICON_DATABASE, ("db", "sql", "backup")),
    (ICON_MEDIA, ("media", "video", "audio", "convert")),
    (ICON_NETWORK, ("net", "http", "api", "gcp", "azure")),
    (ICON_DEVELOPMENT, ("dev", "build", "ci", "test")),
    (ICON_FILE, ("file", "fs", "io")),
)
