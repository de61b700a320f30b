import logging
from pathlib import Path
from typing import Optional, Union

from writ import errors
from writ.base import patterns


log = logging.getLogger(__name__)


def output_path(source_path: Union[str, Path], output_directory: Optional[Union[str, Path]] = None) -> Path:
    source_path = Path(source_path)
    file_name = patterns.MARKDOWN_SUFFIX_PATTERN.sub("", source_path.name)
    if file_name == source_path.name:
        raise errors.OutputPathCollisionError(
            f'The file "{source_path}" has no markdown extension, so compiling it would overwrite it.'
        )
    base_directory = source_path.parent if output_directory is None else Path(output_directory)
    return base_directory / file_name


def write_code_file(path: Path, code: str):
    log.debug('Writing "%s".', path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(code)
