"""Command-line interface for prettyjson."""

import json
import logging
import sys
from pathlib import Path
from typing import Tuple

import click

from . import __version__
from .config import FormatterConfig
from .formatter import Formatter
from .types import KeyOrder


@click.command()
@click.argument('files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--indent', '-i', default=2, show_default=True, help='Spaces per nesting level')
@click.option('--compact', is_flag=True, help='Print each document on a single line')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.option('--force-color', is_flag=True, help='Color output even when not writing to a terminal')
@click.option('--sort-keys', is_flag=True, help='Sort object keys instead of keeping document order')
@click.option('--max-string-length', '-m', default=0, show_default=True,
              help='Truncate string values to this many characters (0 = no limit)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.version_option(version=__version__)
def main(files: Tuple[Path, ...], indent: int, compact: bool, no_color: bool, force_color: bool,
         sort_keys: bool, max_string_length: int, verbose: bool):
    """Pretty-print JSON FILES with colors."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    base = FormatterConfig.compact() if compact else FormatterConfig(indent=indent)
    config = base.copy(
        disabled_color=no_color,
        force_color=force_color,
        string_max_length=max_string_length,
    )
    formatter = Formatter(config, key_order=KeyOrder.SORTED if sort_keys else KeyOrder.INSERTION)

    failed = False
    for path in files:
        click.echo(f"Show `{path}` file:")
        try:
            output = formatter.format(path.read_bytes())
        except OSError as e:
            click.echo(f"Error: cannot read {path}: {e}", err=True)
            failed = True
            continue
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            click.echo(f"Error: invalid JSON in {path}: {e}", err=True)
            failed = True
            continue
        except RecursionError:
            click.echo(f"Error: {path} is nested too deeply to decode", err=True)
            failed = True
            continue

        click.echo(output, color=True if force_color else None)

    if failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
