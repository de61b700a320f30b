"""
Read a literate markdown document and break it into the blocks that matter for compiling it: headings and code.

The target language of a document is named by the extension in front of the markdown extension, so `server.js.md`
holds JavaScript and compiles to `server.js`.  Everything else about the document, prose, lists, tables, and the
language tag on a fenced code block, is of no interest here.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from markdown_it import MarkdownIt


CODE_TOKEN_TYPES = ("fence", "code_block")


@dataclass(frozen=True)
class Document:
    path: Path
    lang: Optional[str]
    text: str


@dataclass(frozen=True)
class HeadingBlock:
    depth: int
    text: str


@dataclass(frozen=True)
class CodeBlock:
    text: str


Block = Union[HeadingBlock, CodeBlock]


def _make_parser() -> MarkdownIt:
    return MarkdownIt("commonmark")


def document_language(path: Union[str, Path]) -> Optional[str]:
    parts = Path(path).name.split(".")
    if len(parts) < 3:
        return None
    return parts[-2] or None


def read_document(path: Union[str, Path]) -> Document:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return Document(path=path, lang=document_language(path), text=text)


def tokenize(text: str) -> List[Block]:
    """
    Turn markdown text into the ordered list of heading and code blocks it contains.  Heading text is the inline content
    of the heading (no leading `#`s); code text is the raw content of the block without its trailing newlines.
    """
    tokens = _make_parser().parse(text)
    blocks: List[Block] = []
    for index, token in enumerate(tokens):
        if token.type == "heading_open":
            # a heading_open is always followed by the inline token holding its text
            blocks.append(HeadingBlock(depth=int(token.tag[1:]), text=tokens[index + 1].content.strip()))
        elif token.type in CODE_TOKEN_TYPES:
            blocks.append(CodeBlock(text=token.content.rstrip("\n")))
    return blocks


def code_blocks(text: str) -> List[str]:
    return [block.text for block in tokenize(text) if isinstance(block, CodeBlock)]
