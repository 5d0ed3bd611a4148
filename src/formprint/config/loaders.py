# topmark:header:start
#
#   project      : FormPrint
#   file         : loaders.py
#   file_relpath : src/formprint/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration files.

FormPrint reads its external configuration from ``.formprint.toml`` files
(or the file named by ``$FORMPRINT_CONFIG``). Parsing is done with `tomlkit`
and returned as plain `dict` structures.

Loading never raises: problems are returned as error strings so the caller
can report them together with other configuration errors.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from formprint.config.logging import get_logger
from formprint.constants import CONFIG_FILE_NAME, ENV_CONFIG_PATH

if TYPE_CHECKING:
    from formprint.config.logging import FormprintLogger
    from formprint.config.merge import OptionMap

logger: FormprintLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> tuple[OptionMap, list[str]]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        tuple[OptionMap, list[str]]: The parsed content (empty on failure) and
            the errors encountered. A missing file is not an error.

    Notes:
        Encoding is assumed to be UTF-8.
    """
    if not path.is_file():
        logger.debug("No configuration file at %s", path)
        return {}, []
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}, [f"cannot read {path}: {e}"]
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}, [f"invalid TOML in {path}: {e}"]
    except UnicodeDecodeError as e:
        logger.error("Error decoding %s as UTF-8: %s", path, e)
        return {}, [f"cannot decode {path} as UTF-8: {e}"]

    data: Any = doc.unwrap()
    logger.debug("Loaded configuration from %s: %s", path, data)
    return (data if isinstance(data, dict) else {}), []


def user_config_path() -> Path:
    """Return the user configuration file path.

    ``$FORMPRINT_CONFIG`` wins when set; otherwise ``~/.formprint.toml``.
    """
    override = os.environ.get(ENV_CONFIG_PATH)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILE_NAME


def cwd_config_path() -> Path:
    """Return the configuration file path in the current working directory."""
    return Path.cwd() / CONFIG_FILE_NAME
