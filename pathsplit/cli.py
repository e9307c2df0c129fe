# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.
import sys

import click


@click.command()
@click.argument("paths", nargs=-1)
@click.option(
    "--input",
    "-i",
    "input_uri",
    metavar="INPUT",
    help=(
        "File path or URI of a text file that provides"
        " further paths, one per line."
    ),
)
@click.option(
    "--config",
    "-c",
    metavar="CONFIG",
    multiple=True,
    help=(
        "Configuration JSON or YAML file."
        " If multiple are passed, subsequent configurations"
        " are incremental to the previous ones."
    ),
)
@click.option(
    "--flavor",
    type=click.Choice(["posix", "windows"]),
    help=(
        "Separator convention of the paths."
        " Overrides the 'flavor' configuration field."
    ),
)
@click.option(
    "--strategy",
    type=click.Choice(["reference", "native"]),
    help="Splitting strategy. Overrides the 'strategy' configuration field.",
)
@click.option(
    "--last",
    "-l",
    is_flag=True,
    help="Print the last component instead of the directory name.",
)
@click.option(
    "--both",
    "-b",
    is_flag=True,
    help="Print directory name and last component, separated by a tab.",
)
@click.option(
    "--traceback",
    is_flag=True,
    help="Show Python traceback on error.",
)
@click.option(
    "--version",
    is_flag=True,
    help="Show version and exit.",
)
@click.option(
    "--help-config",
    metavar="json|md",
    type=click.Choice(["json", "md"]),
    help="Show configuration help and exit.",
)
def pathsplit(
    paths: tuple[str, ...],
    input_uri: str | None,
    config: tuple[str, ...],
    flavor: str | None,
    strategy: str | None,
    last: bool,
    both: bool,
    traceback: bool,
    version: bool,
    help_config: str | None,
):
    """Print the directory names of the given PATHS.

    Like the POSIX tools dirname and basename, the pathsplit command
    strips trailing separators and splits each path into its directory
    name and its last component. Separators are normalized to the native
    separator of the path flavor. A path without separator has the
    directory name ".", a root path is its own directory name.
    """
    if version:
        from pathsplit import __version__

        return click.echo(f"{__version__}")

    if help_config:
        return _show_config_help(help_config)

    from pathsplit.api import PathSplitter
    from pathsplit.fsutil import FileObj

    # noinspection PyBroadException
    try:
        paths = list(paths)
        if input_uri:
            paths.extend(_read_paths(FileObj(input_uri)))
        if not paths:
            click.echo("No paths given.")
            return

        splitter = PathSplitter(config, flavor=flavor, strategy=strategy)
        for path in paths:
            if both:
                dir_name, component = splitter.split_path(path)
                click.echo(f"{dir_name}\t{component}")
            elif last:
                click.echo(splitter.last_component(path))
            else:
                click.echo(splitter.directory_name(path))
    except BaseException as e:
        if traceback:
            import traceback as tb

            tb.print_exc(file=sys.stderr)
        raise click.ClickException(f"{e}") from e


def _read_paths(input_file) -> list[str]:
    text = input_file.read(mode="r")
    return [line for line in text.splitlines() if line]


def _show_config_help(config_help_format):
    from pathsplit.config import get_config_schema

    text = get_config_schema(format=config_help_format)
    click.echo(text + "\n")


if __name__ == "__main__":
    pathsplit()
