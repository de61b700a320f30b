from pathlib import Path

import pytest

from writ import errors
from writ.code_writer import output_path, write_code_file


def test_output_goes_beside_the_source():
    assert output_path(Path("src/server.js.md")) == Path("src/server.js")
    assert output_path("lib/parse.hs.markdown") == Path("lib/parse.hs")


def test_output_goes_into_the_supplied_directory():
    assert output_path("src/server.js.md", "build") == Path("build/server.js")
    assert output_path("server.js.md", Path("/tmp/out")) == Path("/tmp/out/server.js")


def test_only_a_trailing_markdown_extension_is_removed():
    assert output_path("docs.md.py.md") == Path("docs.md.py")


def test_refuses_to_overwrite_the_source():
    with pytest.raises(errors.OutputPathCollisionError):
        output_path("notes.txt")


def test_writes_file(tmp_path):
    path = tmp_path / "hello.js"
    write_code_file(path, "a();\n")
    assert path.read_text() == "a();\n"


def test_writes_utf8_regardless_of_locale(tmp_path):
    path = tmp_path / "greeting.py"
    write_code_file(path, 'print("héllo, wörld ✓")\n')
    assert path.read_bytes() == 'print("héllo, wörld ✓")\n'.encode("utf-8")
