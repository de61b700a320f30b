"""
Compile a literate markdown document into plain source code.

Every code block in a document lands in a section.  Most blocks go to whichever section is open: the default section,
which is what ends up in the output file, or a named section opened by a level-2 heading like `## == helpers`.  Any
other heading closes the named section again.  A block can also name its own section on its first line, e.g.
`//== helpers` followed by a blank line and the code; that leaves the open section alone.  Sections with the same name
are concatenated in the order they appear.

Code blocks can be left out, too.  A level-2 heading like `## !! scratch` drops every code block up to the next heading,
and a block whose first line is `//!!` drops just itself.

Once every block is placed, the default section is assembled: each reference like `//:: helpers` standing alone on a
line is replaced by the text of that section, indented to match the reference.  Sections can reference sections, so
this is repeated until the text stops changing.  References to sections that were never defined are left as they are.
The comment symbol (`//` above) depends on the language of the document.
"""

import logging
from typing import Dict, List, Optional

from writ import errors
from writ.base import patterns
from writ.reader import Block, CodeBlock, Document, HeadingBlock, tokenize


log = logging.getLogger(__name__)


MARKER_HEADING_DEPTH = 2
MAX_EXPANSION_ROUNDS = 50
FRAGMENT_SEPARATOR = "\n"


def indent(text: str, leading: str) -> str:
    # blank lines stay blank
    if not leading:
        return text
    return patterns.NON_BLANK_LINE_PATTERN.sub(lambda match: leading + match.group(0), text)


class Source:
    def __init__(self, lang: Optional[str] = None):
        self.patterns = patterns.compile_patterns(lang)
        self.ignore = False
        self.open_section: Optional[str] = None  # None means the default section
        self.code: List[str] = []
        self.sections: Dict[str, List[str]] = {}

    def section(self, name: Optional[str]) -> List[str]:
        if name is None:
            return self.code
        return self.sections.setdefault(name, [])

    def push(self, block: Block):
        if isinstance(block, HeadingBlock):
            self.heading(block)
        elif isinstance(block, CodeBlock):
            self.code_block(block)

    def heading(self, block: HeadingBlock):
        self.ignore = False
        self.open_section = None
        if block.depth != MARKER_HEADING_DEPTH:
            return
        match = self.patterns.heading.match(block.text)
        if match is None:
            return
        marker = match.group("marker")
        if marker == patterns.IGNORE_MARKER:
            log.debug('Ignoring code blocks under heading "%s".', block.text)
            self.ignore = True
        elif marker == patterns.SECTION_MARKER and (name := match.group("name").strip()):
            log.debug('Opening section "%s".', name)
            self.open_section = name
            self.section(name)

    def code_block(self, block: CodeBlock):
        if self.ignore:
            return
        match = self.patterns.section.match(block.text)
        if match is None:
            self.section(self.open_section).append(block.text)
            return
        if match.group("marker") == patterns.IGNORE_MARKER:
            return
        name = match.group("name").strip()
        if match.group("marker") != patterns.SECTION_MARKER or not name:
            self.section(self.open_section).append(block.text)
            return
        self.section(name).append(match.group("body"))

    def resolve_references(self, code: str) -> str:
        """Run one expansion round: replace every reference to a defined section with that section's text."""

        def expand(match):
            name = match.group("name").strip()
            if name not in self.sections:
                return match.group(0)
            return indent(FRAGMENT_SEPARATOR.join(self.sections[name]), match.group("indent"))

        return self.patterns.reference.sub(expand, code)

    def assemble(self) -> str:
        code = FRAGMENT_SEPARATOR.join(self.code)
        for expansion_round in range(1, MAX_EXPANSION_ROUNDS + 1):
            expanded = self.resolve_references(code)
            if expanded == code:
                log.debug("References resolved after %d round(s).", expansion_round)
                break
            code = expanded
        else:
            raise errors.RecursionLimitExceededError("Recursion limit exceeded")
        # An output file should end with exactly one newline.
        return code.rstrip("\n") + "\n"


def compile_source(text: str, lang: Optional[str] = None) -> str:
    source = Source(lang)
    for block in tokenize(text):
        source.push(block)
    return source.assemble()


def compile_document(document: Document) -> str:
    log.debug('Compiling "%s" as "%s".', document.path, document.lang)
    return compile_source(document.text, document.lang)
