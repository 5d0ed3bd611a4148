# topmark:header:start
#
#   project      : FormPrint
#   file         : resolver.py
#   file_relpath : src/formprint/config/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-call option resolution with error aggregation.

Every print call resolves its options the same way:

1. The store is configured on first use; loading errors are captured.
2. Special flags (``"explain"``, ``"help"``, ...) short-circuit into a
   `SpecialRequest`; nothing is merged or validated for them, and loading
   errors are logged as a warning instead of raised.
3. A bare numeric width is folded into the call's option map; internal
   options (set by the entry point, e.g. ``parse_string`` for source
   extraction) are merged last and cannot be overridden by the caller.
4. If no width was given and ``auto_width`` is on, the terminal width is
   probed and used in place of the committed width.
5. Call options are validated; rules spanning several keys see the call
   options merged over the committed ones.
6. Layers merge in order: built-in defaults, committed options, call
   options, named-style overlay; then calculated options are added.

Loading, validation and style errors are combined into one
`ConfigurationError` whose message tells global errors from errors in this
call.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from formprint.config.defaults import HELP_TEXT, get_default_options
from formprint.config.keys import Opt
from formprint.config.logging import get_logger
from formprint.config.merge import merge_deep
from formprint.config.model import ResolvedOptions, add_calculated_options
from formprint.config.schema import validate_options
from formprint.config.styles import apply_style
from formprint.core.diagnostics import DiagnosticLog, DiagnosticOrigin
from formprint.core.errors import ConfigurationError
from formprint.utils.terminal import detect_terminal_width

if TYPE_CHECKING:
    from collections.abc import Callable

    from formprint.config.logging import FormprintLogger
    from formprint.config.merge import OptionMap
    from formprint.config.store import ConfigStore

logger: FormprintLogger = get_logger(__name__)


class SpecialFlag(str, Enum):
    """Special values accepted in place of a width or option map."""

    DEFAULT = "default"
    EXPLAIN = "explain"
    EXPLAIN_JUSTIFIED = "explain-justified"
    EXPLAIN_ALL = "explain-all"
    HELP = "help"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text: str) -> SpecialFlag:
        """Return the flag named ``text``, or `UNKNOWN`."""
        for flag in cls:
            if flag is not cls.UNKNOWN and flag.value == text:
                return flag
        return cls.UNKNOWN


@dataclass(frozen=True)
class SpecialRequest:
    """Outcome of resolving a special flag instead of normal options.

    Attributes:
        flag (SpecialFlag): The parsed flag.
        raw (str): The string the caller passed.
        options (ResolvedOptions): Options to print with.
        subject (Any): What to print instead of the caller's input (explain flags).
        text (str | None): Literal output that bypasses rendering (the help text for
            ``help``, empty for unknown flags).
    """

    flag: SpecialFlag
    raw: str
    options: ResolvedOptions
    subject: Any = None
    text: str | None = None

    @property
    def uses_input(self) -> bool:
        """Return True if the caller's own input should be printed."""
        return self.flag is SpecialFlag.DEFAULT


def _resolve_special(
    store: ConfigStore, raw: str, internal_options: Mapping[str, Any] | None
) -> SpecialRequest:
    flag = SpecialFlag.parse(raw)
    logger.debug("Special flag %r resolved to %s", raw, flag.name)
    defaults = get_default_options()

    if flag is SpecialFlag.DEFAULT:
        return SpecialRequest(
            flag, raw, options=add_calculated_options(merge_deep(defaults, internal_options))
        )
    if flag is SpecialFlag.EXPLAIN:
        return SpecialRequest(
            flag,
            raw,
            options=add_calculated_options(defaults),
            subject=store.get_explained_options(),
        )
    if flag is SpecialFlag.EXPLAIN_JUSTIFIED:
        justified = merge_deep(defaults, {Opt.SECTION_MAP: {Opt.KEY_JUSTIFY: True}})
        return SpecialRequest(
            flag,
            raw,
            options=add_calculated_options(justified),
            subject=store.get_explained_options(),
        )
    if flag is SpecialFlag.EXPLAIN_ALL:
        return SpecialRequest(
            flag,
            raw,
            options=add_calculated_options(defaults),
            subject=store.get_explained_all_options(),
        )
    if flag is SpecialFlag.HELP:
        return SpecialRequest(flag, raw, options=add_calculated_options(defaults), text=HELP_TEXT)

    logger.warning("Unknown special option: %r", raw)
    return SpecialRequest(flag, raw, options=add_calculated_options(defaults), text="")


def _split_call_arguments(
    width_or_options: Any, options: Any, log: DiagnosticLog
) -> tuple[int | None, Mapping[str, Any]]:
    """Return the explicit width and the call's option map."""
    width: int | None = None
    call_options: Mapping[str, Any] = {}

    if isinstance(width_or_options, bool):
        log.add_errors(
            DiagnosticOrigin.CALL, [f"width must be an integer, got {width_or_options!r}"]
        )
    elif isinstance(width_or_options, int):
        width = width_or_options
    elif isinstance(width_or_options, Mapping):
        call_options = width_or_options
        if options is not None:
            log.add_errors(
                DiagnosticOrigin.CALL,
                ["an options map was given both as width_or_options and as options"],
            )
    elif width_or_options is not None:
        log.add_errors(
            DiagnosticOrigin.CALL,
            [
                "width_or_options must be a width, an options map or a special flag, "
                f"got {type(width_or_options).__name__} {width_or_options!r}"
            ],
        )

    if options is not None and not isinstance(width_or_options, Mapping):
        if isinstance(options, Mapping):
            call_options = options
        else:
            log.add_errors(
                DiagnosticOrigin.CALL,
                [f"options must be a map, got {type(options).__name__} {options!r}"],
            )
    return width, call_options


def resolve_options(
    store: ConfigStore,
    internal_options: Mapping[str, Any] | None = None,
    width_or_options: Any = None,
    options: Any = None,
    *,
    width_probe: Callable[[], int | None] = detect_terminal_width,
) -> ResolvedOptions | SpecialRequest:
    """Resolve the options for one print call.

    Args:
        store (ConfigStore): The committed configuration to start from.
        internal_options (Mapping[str, Any] | None): Options forced by the entry
            point; they override the caller's options.
        width_or_options (Any): A width (``int``), an options map, a special flag
            (``str``) or ``None``.
        options (Any): An options map when ``width_or_options`` is a width or ``None``.
        width_probe (Callable[[], int | None]): Terminal-width probe used for ``auto_width``.

    Returns:
        ResolvedOptions | SpecialRequest: The resolved options, or the request
            for a special flag.

    Raises:
        ConfigurationError: If configuration loading, validation or style
            application reported errors.
    """
    global_errors = store.configure_all()
    if isinstance(width_or_options, str):
        if global_errors:
            logger.warning(
                "Configuration errors ignored for special flag %r: %s",
                width_or_options,
                "; ".join(global_errors),
            )
        return _resolve_special(store, width_or_options, internal_options)

    log = DiagnosticLog()
    log.add_errors(DiagnosticOrigin.GLOBAL, global_errors)
    committed: OptionMap = store.get_options()

    width, call_options = _split_call_arguments(width_or_options, options, log)
    width_map = {Opt.KEY_WIDTH: width} if width is not None else {}
    new_options = merge_deep(call_options, width_map, internal_options)

    auto_width = new_options.get(Opt.KEY_AUTO_WIDTH, committed.get(Opt.KEY_AUTO_WIDTH))
    if Opt.KEY_WIDTH not in new_options and auto_width is True:
        actual_width = width_probe()
        if isinstance(actual_width, int) and actual_width > 0:
            logger.debug("Using detected terminal width %d", actual_width)
            new_options = merge_deep(new_options, {Opt.KEY_WIDTH: actual_width})

    log.add_errors(DiagnosticOrigin.CALL, validate_options(new_options, base=committed))
    updated, style_errors = apply_style(committed, new_options)
    log.add_errors(DiagnosticOrigin.CALL, style_errors)

    if log.has_errors():
        message = log.render()
        logger.error("%s", message)
        raise ConfigurationError(message, log)

    resolved = add_calculated_options(updated)
    logger.trace("Resolved options: %s", dict(resolved.values))
    return resolved
