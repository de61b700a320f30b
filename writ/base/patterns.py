import logging
import re
from typing import NamedTuple, Optional, Pattern


log = logging.getLogger(__name__)


COMMENT_SYMBOLS = {
    **dict.fromkeys(("js", "c", "h", "cpp", "cs", "php", "m", "java", "scala"), "//"),
    **dict.fromkeys(("coffee", "litcoffee", "ls", "rb", "py"), "#"),
    **dict.fromkeys(("hs", "lua"), "--"),
    **dict.fromkeys(("erl", "hrl"), "%"),
}

DEFAULT_COMMENT_SYMBOL = "//"

SECTION_MARKER = "=="
IGNORE_MARKER = "!!"

# `{comment}` is replaced by the escaped comment symbol of the document's language.
SECTION_DEFINITION_TEMPLATE = r"""
    \A
    {comment} [ ]* (?P<marker>==|!!) [ ]*
    (?P<name>[^\n]*?)
    (?: [ ]* (?P=marker) [ ]* {comment} )?  # the marker may be repeated to close the line
    [ ]* \n \n?                             # the blank line after the marker is optional
    (?P<body>.*)
    \Z
"""

SECTION_REFERENCE_TEMPLATE = r"""
    ^
    (?P<indent>[ \t]*)                      # re-applied to every line of the substituted section
    {comment} [ ]* :: [ ]*
    (?P<name>[^\n]*?)
    (?: [ ]* :: [ ]* {comment} )?
    [ \t]* $
"""

HEADING_MARKER_PATTERN = re.compile(r"^(?P<marker>==|!!)[ ]*(?P<name>.*?)(?:[ ]*(?P=marker))?[ ]*$")

NON_BLANK_LINE_PATTERN = re.compile(r"^.*\S.*$", re.MULTILINE)

MARKDOWN_SUFFIX_PATTERN = re.compile(r"\.(?:md|markdown)$")


class SourcePatterns(NamedTuple):
    section: Pattern
    heading: Pattern
    reference: Pattern


def comment_symbol(lang: Optional[str]) -> str:
    symbol = COMMENT_SYMBOLS.get(lang) if lang else None
    if symbol is None:
        log.debug('No comment symbol known for language "%s"; using "%s".', lang, DEFAULT_COMMENT_SYMBOL)
        return DEFAULT_COMMENT_SYMBOL
    return symbol


def compile_patterns(lang: Optional[str]) -> SourcePatterns:
    """
    Build the section-definition, heading-marker, and reference patterns for one document.  Only the first and last
    depend on the language: its comment symbol is escaped and substituted into the templates above.
    """
    comment = re.escape(comment_symbol(lang))
    return SourcePatterns(
        section=re.compile(SECTION_DEFINITION_TEMPLATE.format(comment=comment), re.VERBOSE | re.DOTALL),
        heading=HEADING_MARKER_PATTERN,
        reference=re.compile(SECTION_REFERENCE_TEMPLATE.format(comment=comment), re.VERBOSE | re.MULTILINE),
    )
