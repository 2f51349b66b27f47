"""The parse command."""

from __future__ import annotations

import click

from ._helpers import main, _echo_config, _filename_option, _legacy_for, _status


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------

@main.command()
@_filename_option
@click.option("-b", "--ec-version", "spec_version", default=None, metavar="VERSION",
              help="Behave like this EditorConfig version (e.g. 0.9.0).")
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.pass_context
def parse(ctx, config_name, spec_version, files):
    """Print the EditorConfig properties that apply to FILES.

    Output is one ``key=value`` line per property.  With more than one
    file, each file's lines follow a ``[path]`` header.

    \b
    Examples:
      ecconfig parse src/main.c
      ecconfig parse -f .myconfig a.txt b.txt
      ecconfig parse -b 0.9.0 Makefile
    """
    legacy = _legacy_for(spec_version)
    if legacy:
        _status(ctx, "Using fallbacks from before EditorConfig 0.10.0")
    _echo_config(files, config_name, legacy)
