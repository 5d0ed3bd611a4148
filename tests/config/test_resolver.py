# topmark:header:start
#
#   project      : FormPrint
#   file         : test_resolver.py
#   file_relpath : tests/config/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for per-call option resolution in `formprint.config.resolver`."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from formprint.config.defaults import HELP_TEXT
from formprint.config.model import ResolvedOptions
from formprint.config.resolver import SpecialFlag, SpecialRequest, resolve_options
from formprint.config.store import ConfigSource, ConfigStore
from formprint.core.diagnostics import DiagnosticOrigin
from formprint.core.errors import ConfigurationError
from tests.conftest import StaticLoader, parametrize


def _store(*sources: ConfigSource, committed: dict[str, Any] | None = None) -> ConfigStore:
    store = ConfigStore(loader=StaticLoader(*sources))
    if committed:
        store.set_options(committed)
    return store


def _resolve(store: ConfigStore, *args: Any, **kwargs: Any) -> ResolvedOptions:
    result = resolve_options(store, *args, width_probe=lambda: None, **kwargs)
    assert isinstance(result, ResolvedOptions)
    return result


def test_bare_width_overrides_committed_width() -> None:
    """A numeric width alone becomes the call's width."""
    store = _store(committed={"width": 100})

    assert _resolve(store, None, 40).width == 40
    assert _resolve(store).width == 100


def test_call_options_override_committed_options_key_wise() -> None:
    """Call options win per key; untouched keys keep their committed value."""
    store = _store(committed={"list": {"indent": 1, "hang": False}})

    options = _resolve(store, None, {"list": {"indent": 4}})

    assert options.list_indent == 4
    assert options.list_hang is False


def test_width_and_map_are_combined() -> None:
    """A width and an options map may be given together; the width wins."""
    options = _resolve(_store(), None, 40, {"width": 90, "map": {"justify": True}})

    assert options.width == 40
    assert options.map_justify is True


def test_internal_options_override_call_options() -> None:
    """Options forced by the entry point win over the caller's."""
    options = _resolve(_store(), {"parse_string": True}, {"parse_string": False})

    assert options.parse_string is True


def test_style_overlay_wins_over_call_options() -> None:
    """A style named in the call is applied after the call's own options."""
    options = _resolve(_store(), None, {"style": "community", "list": {"indent": 5}})

    assert options.list_indent == 1


def test_resolution_triggers_configuration_loading() -> None:
    """The first resolution runs the external loader."""
    store = _store(ConfigSource("user.toml", {"width": 70}))

    assert _resolve(store).width == 70
    assert store.configured


def test_loader_and_validation_errors_are_aggregated() -> None:
    """Errors from the loader ("A") and the call ("B") end up in one error."""
    store = _store(ConfigSource("user.toml", {}, ["A"]))

    with pytest.raises(ConfigurationError) as excinfo:
        _resolve(store, None, {"B": 1})

    message = str(excinfo.value)
    assert "Global configuration errors: user.toml: A" in message
    assert "Option errors in this call: unknown option 'B'" in message
    by_origin = {d.origin: d.message for d in excinfo.value.diagnostics}
    assert by_origin == {
        DiagnosticOrigin.GLOBAL: "user.toml: A",
        DiagnosticOrigin.CALL: "unknown option 'B'",
    }


def test_loader_errors_alone_fail_the_first_call_only() -> None:
    """Configuration loading errors are reported once, when loading happens."""
    store = _store(ConfigSource("user.toml", {}, ["A"]))

    with pytest.raises(ConfigurationError, match="user.toml: A"):
        _resolve(store)
    assert _resolve(store).width == 80


@parametrize(
    "width_or_options, options, fragment",
    [
        (True, None, "width must be an integer, got True"),
        (2.5, None, "width_or_options must be a width"),
        ({"width": 10}, {"width": 20}, "both as width_or_options and as options"),
        (40, "wide", "options must be a map"),
        (None, {"style": "fancy"}, "unknown style 'fancy'"),
        (0, None, "'width' must be at least 1"),
    ],
)
def test_bad_call_arguments_are_configuration_errors(
    width_or_options: Any, options: Any, fragment: str
) -> None:
    """Malformed call arguments are reported as call-local errors."""
    with pytest.raises(ConfigurationError) as excinfo:
        _resolve(_store(), None, width_or_options, options)

    assert fragment in str(excinfo.value)
    assert all(d.origin is DiagnosticOrigin.CALL for d in excinfo.value.diagnostics)


def test_auto_width_uses_the_terminal_probe() -> None:
    """With ``auto_width`` the probed width replaces the committed width."""
    store = _store(committed={"auto_width": True})

    options = resolve_options(store, width_probe=lambda: 132)

    assert isinstance(options, ResolvedOptions)
    assert options.width == 132


def test_auto_width_never_overrides_an_explicit_width() -> None:
    """An explicit width, bare or in the map, beats the probe."""
    store = _store(committed={"auto_width": True})

    bare = resolve_options(store, None, 40, width_probe=lambda: 132)
    mapped = resolve_options(store, None, {"width": 50}, width_probe=lambda: 132)

    assert isinstance(bare, ResolvedOptions) and bare.width == 40
    assert isinstance(mapped, ResolvedOptions) and mapped.width == 50


def test_unusable_probe_result_keeps_the_configured_width() -> None:
    """A probe that finds no terminal changes nothing."""
    store = _store(committed={"auto_width": True, "width": 66})

    options = resolve_options(store, width_probe=lambda: None)

    assert isinstance(options, ResolvedOptions)
    assert options.width == 66


def test_auto_width_is_off_by_default() -> None:
    """Without ``auto_width`` the probe is never consulted."""

    def probe() -> int:
        raise AssertionError("probe must not be called")

    options = resolve_options(_store(), width_probe=probe)

    assert isinstance(options, ResolvedOptions)
    assert options.width == 80


@parametrize(
    "raw, flag",
    [
        ("default", SpecialFlag.DEFAULT),
        ("explain", SpecialFlag.EXPLAIN),
        ("explain-justified", SpecialFlag.EXPLAIN_JUSTIFIED),
        ("explain-all", SpecialFlag.EXPLAIN_ALL),
        ("help", SpecialFlag.HELP),
        ("unknown", SpecialFlag.UNKNOWN),
        ("explain_all", SpecialFlag.UNKNOWN),
    ],
)
def test_special_flag_parsing(raw: str, flag: SpecialFlag) -> None:
    """Flags are matched by exact name; anything else is `UNKNOWN`."""
    assert SpecialFlag.parse(raw) is flag


def test_explain_bypasses_merge_and_validation() -> None:
    """A special flag never raises, even when the configuration is broken."""
    store = _store(ConfigSource("user.toml", {}, ["A"]), committed=None)
    store.configure_all()
    store.set_options({"width": 120}, "tests")

    request = resolve_options(store, None, "explain")

    assert isinstance(request, SpecialRequest)
    assert request.flag is SpecialFlag.EXPLAIN
    assert request.subject == {"width": {"value": 120, "set_by": "tests"}}
    assert request.options.width == 80
    assert not request.uses_input


def test_explain_justified_prints_with_justified_maps() -> None:
    """``explain-justified`` renders its snapshot with justified maps."""
    request = resolve_options(_store(), None, "explain-justified")

    assert isinstance(request, SpecialRequest)
    assert request.options.map_justify is True


def test_explain_all_includes_defaults() -> None:
    """``explain-all`` lists every option with its origin."""
    request = resolve_options(_store(), None, "explain-all")

    assert isinstance(request, SpecialRequest)
    assert request.subject["width"] == {"value": 80, "set_by": "default"}


def test_default_flag_prints_the_input_with_default_options() -> None:
    """``default`` ignores committed options but keeps the entry point's."""
    store = _store(committed={"width": 30})

    request = resolve_options(store, {"parse_string": True}, "default")

    assert isinstance(request, SpecialRequest)
    assert request.uses_input
    assert request.options.width == 80
    assert request.options.parse_string is True


def test_help_flag_carries_the_help_text() -> None:
    """``help`` yields the help text."""
    request = resolve_options(_store(), None, "help")

    assert isinstance(request, SpecialRequest)
    assert request.text == HELP_TEXT


def test_unknown_flag_warns_instead_of_failing(caplog: pytest.LogCaptureFixture) -> None:
    """An unknown flag logs a warning and produces empty output."""
    with caplog.at_level(logging.WARNING):
        request = resolve_options(_store(), None, "explian")

    assert isinstance(request, SpecialRequest)
    assert request.flag is SpecialFlag.UNKNOWN
    assert request.text == ""
    assert any("explian" in r.getMessage() for r in caplog.records)


def test_explain_loads_the_configuration_files_first() -> None:
    """A special flag on a fresh store still reflects the configuration files."""
    store = _store(ConfigSource("user.toml", {"width": 70}))

    request = resolve_options(store, None, "explain")

    assert isinstance(request, SpecialRequest)
    assert request.subject == {"width": {"value": 70, "set_by": "user.toml"}}


def test_special_flag_logs_loading_errors(caplog: pytest.LogCaptureFixture) -> None:
    """Loading errors met by a special flag are logged, not raised."""
    store = _store(ConfigSource("user.toml", {}, ["A"]))

    with caplog.at_level(logging.WARNING):
        request = resolve_options(store, None, "explain")

    assert isinstance(request, SpecialRequest)
    assert store.configured
    assert any("user.toml: A" in r.getMessage() for r in caplog.records)


def test_input_kinds_conflicting_across_layers_are_configuration_errors() -> None:
    """``zipper`` committed and ``parse_string`` in the call are caught after merging."""
    store = _store(committed={"zipper": True})

    with pytest.raises(ConfigurationError, match="cannot both be true"):
        _resolve(store, None, {"parse_string": True})

    assert _resolve(store, None, {"parse_string": True, "zipper": False}).parse_string is True
