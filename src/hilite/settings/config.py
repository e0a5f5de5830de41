# hilite/settings/config.py
"""
Runtime configuration for hilite.

There is no configuration file: everything comes from command-line flags,
with two environment variables (NO_COLOR, FORCE_COLOR) consulted when the
color mode is left on "auto".
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

APP_NAME = "hilite"
APP_VERSION = "0.1.0"


class ColorChoice(Enum):
    """When to emit ANSI escape sequences on stdout."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True, slots=True)
class ColorizeOptions:
    """Per-run rendering options, fixed for every line."""

    whole_line: bool = False
    case_sensitive: bool = False
    background: bool = False


def resolve_color_choice(
    choice: ColorChoice,
    is_tty: bool,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """
    Decide whether colors are emitted.

    An explicit "always" or "never" wins. In "auto" mode a non-empty
    NO_COLOR disables color, a non-empty FORCE_COLOR enables it, and
    otherwise color follows whether stdout is a terminal.
    """
    if choice is ColorChoice.ALWAYS:
        return True
    if choice is ColorChoice.NEVER:
        return False

    env = os.environ if environ is None else environ
    if env.get("NO_COLOR"):
        return False
    if env.get("FORCE_COLOR"):
        return True
    return is_tty
