from pathlib import Path

from writ.reader import CodeBlock, HeadingBlock, code_blocks, document_language, read_document, tokenize


DATA = Path(__file__).parent / "data"


def test_language_comes_from_the_inner_extension():
    assert document_language("src/server.js.md") == "js"
    assert document_language(Path("lib/parse.hs.markdown")) == "hs"
    assert document_language("README.md") is None


def test_read_document():
    document = read_document(DATA / "hello.js.md")
    assert document.lang == "js"
    assert document.path == DATA / "hello.js.md"
    assert document.text.startswith("# Hello")


def test_tokenize_keeps_headings_and_code_in_order():
    text = "# Title\n\nSome prose.\n\n## == helper ==\n\n```js\nh();\n```\n\n    indented();\n"
    assert tokenize(text) == [
        HeadingBlock(depth=1, text="Title"),
        HeadingBlock(depth=2, text="== helper =="),
        CodeBlock(text="h();"),
        CodeBlock(text="indented();"),
    ]


def test_setext_headings_have_a_depth():
    assert tokenize("!! scratch\n----------\n") == [HeadingBlock(depth=2, text="!! scratch")]


def test_code_blocks():
    assert code_blocks((DATA / "hello.js.md").read_text()) == ["a();\n//:: helper\nb();", "h();"]
