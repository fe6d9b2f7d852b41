from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the template syntax markers to reduce cross-module coupling.
"""

# Escape introducer.
BACKSLASH: str = '\\'

# Interpolation delimiters: "#{ expression }".
INTERP_SIGIL: str = '#'
INTERP_OPEN: str = '#{'
BRACE_OPEN: str = '{'
BRACE_CLOSE: str = '}'

# Percent-letter aliases accepted by RenderMode.from_name and the CLI.
MODE_ALIASES: tuple[str, ...] = ('q', 'qq', 'w', 'ww')
DEFAULT_MODE: str = 'qq'
