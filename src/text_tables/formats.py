"""Selects the Parser / Stringifier / Locator triad for a dialect."""

import logging
from typing import NamedTuple

from text_tables.configuration import Mode
from text_tables.markdown import MarkdownLocator, MarkdownParser, MarkdownStringifier
from text_tables.org import OrgLocator, OrgParser, OrgStringifier
from text_tables.restructuredtext import ReStructuredTextLocator, ReStructuredTextParser, ReStructuredTextStringifier
from text_tables.table import Locator, Parser, Stringifier

logger = logging.getLogger(__name__)


class TableFormat(NamedTuple):
    """The three capabilities of one dialect."""

    parser: Parser
    stringifier: Stringifier
    locator: Locator


_FORMATS = {
    Mode.ORG: (OrgParser, OrgStringifier, OrgLocator),
    Mode.MARKDOWN: (MarkdownParser, MarkdownStringifier, MarkdownLocator),
    Mode.RESTRUCTUREDTEXT: (ReStructuredTextParser, ReStructuredTextStringifier, ReStructuredTextLocator),
}


def get_format(mode: Mode | str) -> TableFormat:
    """Return fresh dialect instances for *mode*.  Raises ValueError for unknown modes."""
    try:
        mode = Mode(mode)
    except ValueError as exc:
        valid = ", ".join(m.value for m in Mode)
        raise ValueError(f"Unknown table mode {mode!r} (expected one of: {valid})") from exc

    parser_cls, stringifier_cls, locator_cls = _FORMATS[mode]
    logger.debug("Using %s table format", mode.value)
    return TableFormat(parser_cls(), stringifier_cls(), locator_cls())
