# topmark:header:start
#
#   project      : FormPrint
#   file         : store.py
#   file_relpath : src/formprint/config/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide committed configuration.

`ConfigStore` owns the options that every print call starts from. Its
lifecycle is explicit:

1. *Unconfigured*: holds the built-in defaults.
2. *Configured*: `configure_all` has run the external configuration loader
   once (idempotent; later calls are no-ops).
3. *Mutated*: `set_options` has deep-merged validated options into it.

The store is never reset implicitly. Every read-modify-write happens under a
single re-entrant lock held only while merging and validating; readers get
deep copies, so no caller ever observes a partial write.

The store also records, per dotted option key, *where* the current value was
set (``"default"``, a config file path, or a `set_options` call). That
provenance backs the ``explain`` special flags.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from threading import RLock
from typing import TYPE_CHECKING, Any

from formprint.config.defaults import get_default_options
from formprint.config.keys import Opt
from formprint.config.loaders import cwd_config_path, load_toml_dict, user_config_path
from formprint.config.logging import get_logger
from formprint.config.merge import iter_leaves, merge_deep, set_path
from formprint.config.schema import validate_options
from formprint.config.styles import apply_style, style_overlay
from formprint.core.diagnostics import DiagnosticLog, DiagnosticOrigin
from formprint.core.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from formprint.config.logging import FormprintLogger
    from formprint.config.merge import OptionMap

logger: FormprintLogger = get_logger(__name__)

DEFAULT_SOURCE: str = "default"


@dataclass(frozen=True)
class ConfigSource:
    """Options read from one external configuration source.

    Attributes:
        label (str): Where the options came from (typically a file path).
        options (OptionMap): The options read; empty when nothing was found.
        errors (list[str]): Problems encountered while reading.
    """

    label: str
    options: OptionMap = field(default_factory=lambda: {})
    errors: list[str] = field(default_factory=lambda: [])


def load_external_config() -> list[ConfigSource]:
    """Read the user configuration file and, when it asks for it, the CWD one.

    The CWD file (``./.formprint.toml``) is only consulted when the user file
    sets ``cwd_config = true``.
    """
    user_path = user_config_path()
    user_options, user_errors = load_toml_dict(user_path)
    sources = [ConfigSource(str(user_path), user_options, user_errors)]
    if user_options.get(Opt.KEY_CWD_CONFIG) is True:
        cwd_path = cwd_config_path()
        cwd_options, cwd_errors = load_toml_dict(cwd_path)
        sources.append(ConfigSource(str(cwd_path), cwd_options, cwd_errors))
    return sources


class ConfigStore:
    """The committed, process-wide option store.

    Args:
        loader (Callable[[], list[ConfigSource]] | None): External configuration
            loader run once by `configure_all`. Defaults to
            `load_external_config`.
    """

    def __init__(self, loader: Callable[[], list[ConfigSource]] | None = None) -> None:
        self._lock = RLock()
        self._loader = loader or load_external_config
        self._options: OptionMap = get_default_options()
        self._set_by: dict[str, str] = {
            key: DEFAULT_SOURCE for key, _ in iter_leaves(self._options)
        }
        self._configured = False

    @property
    def configured(self) -> bool:
        """Return True once `configure_all` has run."""
        return self._configured

    def configure_all(self) -> list[str]:
        """Run the external configuration loader if it has not run yet.

        Sources that load and validate cleanly are merged into the store;
        sources with errors are skipped.

        Returns:
            list[str]: Errors from loading or validating external configuration;
                empty on success and on every call after the first.
        """
        with self._lock:
            if self._configured:
                return []
            self._configured = True
            errors: list[str] = []
            for source in self._loader():
                errors.extend(f"{source.label}: {e}" for e in source.errors)
                if not source.options:
                    continue
                merged, style_errors = apply_style(self._options, source.options)
                problems = validate_options(source.options, base=self._options) + style_errors
                if problems:
                    errors.extend(f"{source.label}: {p}" for p in problems)
                    continue
                self._commit(merged, source.options, source.label)
                logger.info("Applied configuration from %s", source.label)
            if errors:
                logger.warning("Global configuration errors: %s", errors)
            return errors

    def set_options(self, new_options: Mapping[str, Any], doc: str | None = None) -> None:
        """Validate ``new_options`` and deep-merge them into the store.

        Args:
            new_options (Mapping[str, Any]): Options to commit.
            doc (str | None): Provenance label recorded for ``explain`` output.

        Raises:
            ConfigurationError: If external configuration or ``new_options`` is invalid.
                Nothing is committed in that case.
        """
        with self._lock:
            log = DiagnosticLog()
            log.add_errors(DiagnosticOrigin.GLOBAL, self.configure_all())
            log.add_errors(
                DiagnosticOrigin.CALL, validate_options(new_options, base=self._options)
            )
            if not log.has_errors():
                merged, style_errors = apply_style(self._options, new_options)
                log.add_errors(DiagnosticOrigin.CALL, style_errors)
                if not log.has_errors():
                    self._commit(merged, new_options, doc or "set_options")
                    return
            raise ConfigurationError(log.render(), log)

    def _commit(self, merged: OptionMap, layer: Mapping[str, Any], label: str) -> None:
        """Replace the committed options and record provenance (lock held)."""
        overlay, _ = style_overlay(layer.get(Opt.KEY_STYLE))
        set_by = dict(self._set_by)
        for key, _ in iter_leaves(merge_deep(layer, overlay)):
            set_by[key] = label
        self._options = merged
        self._set_by = set_by
        logger.debug("Committed options from %s", label)

    def get_options(self) -> OptionMap:
        """Return a deep copy of the committed options."""
        with self._lock:
            return copy.deepcopy(self._options)

    def get_explained_options(self, *, include_defaults: bool = False) -> OptionMap:
        """Return the committed options annotated with where each was set.

        Args:
            include_defaults (bool): When False (the default), only options
                whose value was set somewhere other than the built-in defaults
                are listed.

        Returns:
            OptionMap: Nested map whose leaves are ``{"value": ..., "set_by": ...}``.
        """
        with self._lock:
            explained: OptionMap = {}
            for key, value in iter_leaves(self._options):
                source = self._set_by.get(key, DEFAULT_SOURCE)
                if source == DEFAULT_SOURCE and not include_defaults:
                    continue
                set_path(explained, key, {"value": copy.deepcopy(value), "set_by": source})
            return explained

    def get_explained_all_options(self) -> OptionMap:
        """Return every committed option annotated with where it was set, defaults included."""
        return self.get_explained_options(include_defaults=True)


_store_lock = RLock()
_default_store: ConfigStore | None = None


def default_store() -> ConfigStore:
    """Return the process-wide default store, creating it on first use."""
    global _default_store
    with _store_lock:
        if _default_store is None:
            _default_store = ConfigStore()
        return _default_store


def set_default_store(store: ConfigStore | None) -> ConfigStore | None:
    """Install ``store`` as the process-wide default and return the previous one.

    Passing ``None`` makes the next `default_store` call create a fresh store.
    """
    global _default_store
    with _store_lock:
        previous, _default_store = _default_store, store
        return previous
