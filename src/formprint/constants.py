# topmark:header:start
#
#   project      : FormPrint
#   file         : constants.py
#   file_relpath : src/formprint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormPrint Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FORMPRINT_VERSION: str = get_version("formprint")
except PackageNotFoundError:  # running from a source checkout
    FORMPRINT_VERSION = "0.0.0"

# Environment variables
ENV_CONFIG_PATH: str = "FORMPRINT_CONFIG"
ENV_LOG_LEVEL: str = "FORMPRINT_LOG_LEVEL"

# Configuration file looked up in the home directory (and, when enabled, the CWD)
CONFIG_FILE_NAME: str = ".formprint.toml"

# Source file suffixes searched when extracting a definition by name
SOURCE_SUFFIXES: tuple[str, ...] = (".clj", ".cljc", ".cljs", ".edn")
