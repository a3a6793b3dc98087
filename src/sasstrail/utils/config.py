"""
Configuration constants to replace magic strings throughout sasstrail
"""

import re

# Partial file convention ("_name.scss" is importable as "name")
PARTIAL_PREFIX = "_"

# Path libsass reports as `prev` for the top-level document compiled from a string
STDIN_PATH = "stdin"

# Import argument patterns
GLOB_PATTERN = re.compile(r"\*|\[.+\]")
UNSAFE_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_.-]")

# Stylesheet extensions handled by the engine
SASS_EXTENSION = ".sass"
SCSS_EXTENSION = ".scss"
CSS_EXTENSION = ".css"
STYLESHEET_EXTENSIONS = (SCSS_EXTENSION, SASS_EXTENSION)

# Output
DEFAULT_OUTPUT_STYLE = "nested"
DEFAULT_MIME_TYPE = "text/css"

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"

# Dependency tree display
CIRCULAR_LABEL_SUFFIX = " (circular)"

# Environment variables
COLOR_ENV_VAR = "SASSTRAIL_COLOR"
