#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for grab.

This module centralizes the default values and fixed display settings used
across the search engine, the renderer and the CLI.

Constants are organized by category:
1. Type Definitions - Literal types
2. Context Windows - Default window and separator settings
3. Highlighting - Colors used for each highlight category
4. Input Handling - Line source defaults
5. Configuration Files - Names searched during config discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HighlightCategoryName = Literal["match", "line-number", "separator"]
DecodeErrorMode = Literal["replace", "strict"]

# =============================================================================
# Context Windows
# =============================================================================

DEFAULT_GROUP_SEPARATOR = "---"
DEFAULT_CONTEXT_LENGTH = 0

# Separator between a line number and the line text ("12: text")
LINE_NUMBER_SEPARATOR = ": "

# =============================================================================
# Highlighting
# =============================================================================

MATCH_COLOR = "red"
LINE_NUMBER_COLOR = "green"
SEPARATOR_COLOR = "blue"

HIGHLIGHT_COLORS: dict[HighlightCategoryName, str] = {
    "match": MATCH_COLOR,
    "line-number": LINE_NUMBER_COLOR,
    "separator": SEPARATOR_COLOR,
}

# =============================================================================
# Input Handling
# =============================================================================

STDIN_DESIGNATOR = "-"
DEFAULT_ENCODING = "utf-8"

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_ENV_VAR = "GRAB_CONFIG"
CONFIG_FILENAMES = [".grab.toml", ".grab.yaml", ".grab.yml", ".grab.json"]
PYPROJECT_TOOL_SECTION = "grab"
