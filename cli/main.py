"""
Main CLI entry point for mdchunker.
"""

from pathlib import Path

import click

from mdchunker.config.settings import Config
from mdchunker.chunking.detection import (
    MAX_HEADING_LEVEL, MIN_HEADING_LEVEL, count_headings,
    detect_heading_level, detect_numbered_items, find_any_heading_level
)
from mdchunker.utils.logging import setup_logging
from .chunk import chunk_cmd
from .build import build_cmd


@click.group()
@click.option('--data-dir', '-d', help='Data directory path')
@click.option('--log-level', '-l', default=None, help='Logging level')
@click.option('--log-file', help='Log file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, data_dir, log_level, log_file, verbose):
    """mdchunker - Structure-preserving document chunking"""
    config = Config(data_dir=data_dir)

    if verbose:
        log_level = 'DEBUG'

    setup_logging(log_level=log_level or config.log_level, log_file=log_file)

    # Store config in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj['config'] = config


@cli.command()
def version():
    """Show version information."""
    from mdchunker import __version__

    click.echo(f"mdchunker version {__version__}")


@cli.command()
@click.pass_context
def status(ctx):
    """Show configuration and data status."""
    config = ctx.obj['config']

    click.echo("mdchunker Status:")
    click.echo(f"  Data directory: {config.data_dir}")
    click.echo(f"  Raw data: {config.raw_data_dir}")
    click.echo(f"  Chunks: {config.chunks_dir}")
    click.echo(f"  Strategy: {config.chunk_strategy}")
    click.echo(f"  Markdown max size: {config.markdown_max_size}")
    click.echo(f"  Plain max size: {config.plain_max_size}")
    click.echo()

    click.echo("Data Status:")
    raw_files = set()
    for pattern in config.file_patterns:
        raw_files.update(config.raw_data_dir.glob(pattern))
    click.echo(f"  Raw documents: {len(raw_files)}")

    if config.chunks_file.exists():
        click.echo(f"  Chunks file: ✓ {config.chunks_file}")
    else:
        click.echo("  Chunks file: ✗ Not found")


@cli.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def detect(path):
    """Show the markdown structure detected in a document."""
    text = path.read_text(encoding='utf-8')

    primary = detect_heading_level(text)
    single = find_any_heading_level(text)

    click.echo(f"Structure of {path.name}:")
    for level in range(MIN_HEADING_LEVEL, MAX_HEADING_LEVEL + 1):
        click.echo(f"  Level {level} headings: {count_headings(text, level)}")

    if primary is not None:
        click.echo(f"  Primary heading level: {primary}")
    elif single is not None:
        click.echo(f"  Primary heading level: {single} (single heading)")
    else:
        click.echo("  Primary heading level: none (plain text)")

    click.echo(f"  Numbered items: {'yes' if detect_numbered_items(text) else 'no'}")


cli.add_command(chunk_cmd, name='chunk')
cli.add_command(build_cmd, name='build')


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
