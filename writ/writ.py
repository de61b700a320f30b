import glob
import logging
from pathlib import Path
from typing import Iterable, List, Optional

import click

from writ import errors
from writ.code_writer import output_path, write_code_file
from writ.reader import read_document
from writ.scanner import compile_document


log = logging.getLogger(__name__)


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(debug: bool, verbose: bool):
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")


def expand_globs(file_globs: Iterable[str]) -> List[Path]:
    source_paths = {}
    for file_glob in file_globs:
        for file_name in sorted(glob.glob(file_glob, recursive=True)):
            path = Path(file_name)
            if path.is_file():
                source_paths.setdefault(path, None)
    if not source_paths:
        raise errors.NoInputFilesError("Globs didn't match any source files")
    return list(source_paths)


def check_output_directory(output_directory: Optional[str]):
    if output_directory is not None and not Path(output_directory).is_dir():
        raise errors.OutputDirectoryNotFoundError(f'Directory does not exist: "{output_directory}"')


def writ_file(source_path: Path, output_directory: Optional[str] = None) -> Path:
    try:
        document = read_document(source_path)
    except (OSError, UnicodeDecodeError) as e:
        raise errors.SourceReadError(f"Could not read the file: {e}") from e
    code = compile_document(document)
    destination = output_path(source_path, output_directory)
    try:
        write_code_file(destination, code)
    except OSError as e:
        raise errors.OutputWriteError(f'Could not write "{destination}": {e}') from e
    return destination


@click.command()
@click.option("--dir", "-d", "output_directory", type=str, help="Write the compiled files into this directory.")
@click.option("--debug/--no-debug", default=False)
@click.option("--verbose/--quiet", default=False)
@click.option(
    "--fail-fast/--keep-going", default=False, help="Stop at the first file that fails to compile.",
)
@click.argument("file_globs", type=str, nargs=-1)
@click.pass_context
def writ(ctx, output_directory, debug, verbose, fail_fast, file_globs):
    """Compile literate markdown files, e.g. `server.js.md`, into source files, e.g. `server.js`."""
    ctx.ensure_object(dict)
    ctx.obj["DEBUG"] = debug
    ctx.obj["VERBOSE"] = verbose
    ctx.obj["OUTPUT_DIR"] = output_directory
    ctx.obj["FAIL_FAST"] = fail_fast
    configure_logging(debug, verbose)

    if not file_globs:
        raise click.UsageError("No input files given.", ctx)
    try:
        source_paths = expand_globs(file_globs)
        check_output_directory(output_directory)
    except errors.ConfigurationError as e:
        raise click.ClickException(e.message)
    log.info("Compiling %d file(s).", len(source_paths))

    failures = []
    for source_path in source_paths:
        try:
            destination = writ_file(source_path, output_directory)
        except errors.WritError as e:
            click.echo(f'Error while processing "{source_path}": {e.message}', err=True)
            if ctx.obj["FAIL_FAST"]:
                ctx.exit(1)
            failures.append(source_path)
            continue
        log.info('Compiled "%s" into "%s".', source_path, destination)
        if ctx.obj["VERBOSE"]:
            click.echo(f"wrote {destination}")

    if failures:
        click.echo(f"{len(failures)} of {len(source_paths)} file(s) failed to compile.", err=True)
        ctx.exit(1)


if __name__ == "__main__":
    writ(obj={})
