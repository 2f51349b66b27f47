"""Inspection commands: match, files."""

from __future__ import annotations

import click

from ..exceptions import ParseError
from ..file import ConfigFiles
from ..glob import Alternation, Glob, Program
from ._helpers import main, _filename_option, _status


def _program_lines(program: Program, indent: int = 0) -> list[str]:
    """Render a program one node per line, nesting alternation branches."""
    pad = "  " * indent
    lines = []
    for node in program:
        if isinstance(node, Alternation):
            lines.append(f"{pad}Alternation")
            for branch in node.branches:
                lines.append(f"{pad}  |")
                lines.extend(_program_lines(branch, indent + 2))
        else:
            lines.append(f"{pad}{node!r}")
    return lines


# ---------------------------------------------------------------------------
# match
# ---------------------------------------------------------------------------

@main.command()
@click.option("--program", "show_program", is_flag=True,
              help="Print the compiled program to stderr first.")
@click.argument("pattern")
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def match(ctx, show_program, pattern, paths):
    """Print each of PATHS that PATTERN matches.

    PATTERN is a section header without the brackets.  Paths are matched
    as given and never looked up on disk.  Exits with status 1 if no path
    matches.

    \b
    Examples:
      ecconfig match '*.py' setup.py docs/conf.py
      ecconfig match '/src/**/*.{c,h}' /src/lib/a.c
    """
    glob = Glob(pattern)
    if show_program:
        for line in _program_lines(glob.program):
            click.echo(line, err=True)
    matched = 0
    for path in paths:
        if glob.matches(path):
            click.echo(path)
            matched += 1
    _status(ctx, f"{matched} of {len(paths)} paths matched")
    if not matched:
        ctx.exit(1)


# ---------------------------------------------------------------------------
# files
# ---------------------------------------------------------------------------

@main.command()
@_filename_option
@click.argument("path", type=click.Path())
@click.pass_context
def files(ctx, config_name, path):
    """List the config files that apply to PATH, farthest first.

    Files with ``root = true`` are marked ``(root)``.
    """
    try:
        found = ConfigFiles.open(path, config_name)
    except (ParseError, OSError) as exc:
        raise click.ClickException(str(exc))
    if not len(found):
        _status(ctx, "No config files found")
    for config in found:
        suffix = " (root)" if config.is_root else ""
        click.echo(f"{config.path}{suffix}")
