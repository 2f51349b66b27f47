"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import logging

import click

from .. import __version__, config_for, version as ec_version
from ..exceptions import ParseError
from ..property import STANDARD_KEYS


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj and ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _filename_option(f):
    """Shared -f/--filename option naming the config files to look for."""
    return click.option(
        "-f", "--filename", "config_name", default=None,
        envvar="ECCONFIG_FILENAME",
        help="Config file name to look for (default: .editorconfig, "
             "or set ECCONFIG_FILENAME).",
    )(f)


def _legacy_for(spec_version: str | None) -> bool:
    """Map a ``-b`` version to the legacy-fallback flag."""
    if spec_version is None:
        return False
    try:
        parsed = ec_version.parse_version(spec_version)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'-b'")
    return parsed < ec_version.LEGACY_BEFORE


def _format_props(props) -> list[str]:
    """Lines of ``key=value`` in EditorConfig core output format.

    Values of the standard properties are lowercased; properties set to
    ``unset`` are left out.
    """
    lines = []
    for key, value in props.iter_set():
        if value.is_unset_keyword():
            continue
        text = value.value
        if key in STANDARD_KEYS:
            text = text.lower()
        lines.append(f"{key}={text}")
    return lines


def _echo_config(files, config_name, legacy):
    """Print the properties for each of *files*, with headers if several."""
    for path in files:
        if len(files) > 1:
            click.echo(f"[{path}]")
        try:
            props = config_for(path, config_name, legacy=legacy)
        except (ParseError, OSError) as exc:
            raise click.ClickException(str(exc))
        for line in _format_props(props):
            click.echo(line)


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.version_option(version=__version__, prog_name="ecconfig")
@click.pass_context
def main(ctx, verbose):
    """ecconfig: EditorConfig files and glob patterns.

    \b
    Quick start:
      ecconfig parse src/main.c
      ecconfig match '*.{c,h}' src/main.c include/util.h
      ecconfig files src/main.c

    \b
    Set ECCONFIG_FILENAME to look for config files under another name.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s:%(levelname)s: %(message)s",
        )


def _print_core_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(
        f"EditorConfig (ecconfig-parse {__version__}) Version {ec_version.STRING}"
    )
    ctx.exit()


@click.command()
@_filename_option
@click.option("-b", "spec_version", default=None, metavar="VERSION",
              help="Behave like this EditorConfig version (e.g. 0.9.0).")
@click.option("-v", "--version", is_flag=True, expose_value=False, is_eager=True,
              callback=_print_core_version,
              help="Print version information and exit.")
@click.argument("files", nargs=-1, required=True, type=click.Path())
def parse_main(config_name, spec_version, files):
    """Print the EditorConfig properties for FILES.

    A stand-alone equivalent of ``ecconfig parse`` with the command line
    of the EditorConfig core tools.
    """
    _echo_config(files, config_name, _legacy_for(spec_version))
