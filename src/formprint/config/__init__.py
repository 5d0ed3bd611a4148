# topmark:header:start
#
#   project      : FormPrint
#   file         : __init__.py
#   file_relpath : src/formprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormPrint configuration layer.

Submodules:
    - `keys`: canonical option names.
    - `defaults`: built-in defaults and help text.
    - `merge`: recursive structural merge of option maps.
    - `schema`: validation against the recognized-option schema.
    - `styles`: named style presets.
    - `loaders`: TOML configuration file loading.
    - `store`: the process-wide committed configuration.
    - `resolver`: per-call option resolution with error aggregation.
    - `model`: `ResolvedOptions`, the immutable snapshot used for one print call.
    - `logging`: TRACE-aware, chalk-colored logging.

This package module deliberately imports nothing so that low-level modules
(e.g. `formprint.config.keys`) stay cheap to import.
"""

from __future__ import annotations
