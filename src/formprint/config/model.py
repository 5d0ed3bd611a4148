# topmark:header:start
#
#   project      : FormPrint
#   file         : model.py
#   file_relpath : src/formprint/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved options: the immutable snapshot used for one print call.

`ResolvedOptions` is produced by the resolver after all layers are merged
and validated. Besides the merged map it carries *calculated* options
(typed accessors, the color map resolved to `DisplayColor` members) and,
once the dispatcher has classified the input, the representation tag with
its bound navigator.

Invariant:
    ``navigator`` is only ever set together with ``representation`` through
    `ResolvedOptions.bind`, which looks the navigator up from the tag. The two
    can therefore never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from formprint.config.defaults import get_default_options
from formprint.config.keys import ColorTag, Opt
from formprint.config.merge import get_path, merge_deep
from formprint.finish.colors import DisplayColor
from formprint.render.navigation import Representation, navigator_for

if TYPE_CHECKING:
    from collections.abc import Mapping

    from formprint.render.navigation import Navigator


@dataclass(frozen=True)
class ResolvedOptions:
    """Fully merged, validated and calculated options for one print call.

    Attributes:
        values (Mapping[str, Any]): The merged option map (read-only view).
        width (int): Target line width.
        list_indent (int): Body indent of broken lists.
        list_hang (bool): Keep the first argument on a broken list's head line.
        vector_wrap (bool): Fill broken vectors several elements per line.
        map_justify (bool): Align the values of broken maps.
        map_comma (bool): Put commas between broken map pairs (document mode).
        tab_expand (bool): Expand tabs before parsing text.
        tab_size (int): Tab stop width.
        color_map (Mapping[str, DisplayColor]): Semantic tag to display color.
        representation (Representation | None): Bound representation, if any.
        navigator (Navigator | None): Capability set matching ``representation``.
    """

    values: Mapping[str, Any]
    width: int
    list_indent: int
    list_hang: bool
    vector_wrap: bool
    map_justify: bool
    map_comma: bool
    tab_expand: bool
    tab_size: int
    color_map: Mapping[str, DisplayColor]
    representation: Representation | None = None
    navigator: Navigator | None = field(default=None, compare=False)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> ResolvedOptions:
        """Compute calculated options from a validated option map.

        Keys missing from ``options`` fall back to the built-in defaults, so a
        partial map is accepted.
        """
        merged = merge_deep(get_default_options(), options)
        color_map = {
            tag: DisplayColor.from_name(get_path(merged, f"{Opt.SECTION_COLOR_MAP}.{tag}"))
            for tag in ColorTag.ALL
        }
        return cls(
            values=MappingProxyType(merged),
            width=merged[Opt.KEY_WIDTH],
            list_indent=get_path(merged, f"{Opt.SECTION_LIST}.{Opt.KEY_INDENT}"),
            list_hang=get_path(merged, f"{Opt.SECTION_LIST}.{Opt.KEY_HANG}"),
            vector_wrap=get_path(merged, f"{Opt.SECTION_VECTOR}.{Opt.KEY_WRAP}"),
            map_justify=get_path(merged, f"{Opt.SECTION_MAP}.{Opt.KEY_JUSTIFY}"),
            map_comma=get_path(merged, f"{Opt.SECTION_MAP}.{Opt.KEY_COMMA}"),
            tab_expand=get_path(merged, f"{Opt.SECTION_TAB}.{Opt.KEY_EXPAND}"),
            tab_size=get_path(merged, f"{Opt.SECTION_TAB}.{Opt.KEY_SIZE}"),
            color_map=MappingProxyType(color_map),
        )

    @property
    def parse_string(self) -> bool:
        """Return True if the input must be text that is parsed."""
        return bool(self.values.get(Opt.KEY_PARSE_STRING))

    @property
    def zipper(self) -> bool:
        """Return True if the input must already be a structural document."""
        return bool(self.values.get(Opt.KEY_ZIPPER))

    def get(self, dotted_key: str, default: Any = None) -> Any:
        """Return the merged value stored under ``dotted_key``."""
        return get_path(self.values, dotted_key, default)

    def bind(self, representation: Representation) -> ResolvedOptions:
        """Return a copy bound to ``representation`` and its navigator."""
        return replace(
            self,
            representation=representation,
            navigator=navigator_for(representation),
        )


def add_calculated_options(options: Mapping[str, Any]) -> ResolvedOptions:
    """Return `ResolvedOptions` computed from a validated option map."""
    return ResolvedOptions.from_options(options)
