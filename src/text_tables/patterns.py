"""Border characters and line patterns for the supported table dialects.

Used by the dialect parsers, stringifiers and locators.
"""

import re

# ─── Shared ───────────────────────────────────────────────────────────────────

# Cell delimiter common to every dialect
VERTICAL_SEPARATOR = "|"

# Fill character of plain border and separator lines
HORIZONTAL_SEPARATOR = "-"

# Column boundary on grid and Org separator lines
INTERSECTION = "+"


# ─── reStructuredText ─────────────────────────────────────────────────────────

# Fill character of the line under the header row
HEADING_SEPARATOR = "="

# First characters of lines belonging to a grid table
RST_TABLE_CHARS = (INTERSECTION, VERTICAL_SEPARATOR)


# ─── Markdown ─────────────────────────────────────────────────────────────────

# Alignment marker inside a separator cell, e.g. ":---:"
ALIGNMENT_MARKER = ":"

# Separator line such as "|---|:--:|": only dashes, colons, spaces and bars
MARKDOWN_SEPARATOR_RE = re.compile(r"^\|[-:|\s]*-[-:|\s]*$")

MARKDOWN_TABLE_CHARS = (VERTICAL_SEPARATOR,)


# ─── Org ──────────────────────────────────────────────────────────────────────

ORG_TABLE_CHARS = (VERTICAL_SEPARATOR,)
