"""
Batch chunking commands for mdchunker CLI.
"""

from pathlib import Path

import click

from mdchunker.chunking.chunker import DocumentChunker
from mdchunker.chunking.strategies import STRATEGIES
from mdchunker.utils.helpers import Timer


@click.command()
@click.option('--input', '-i', 'input_dir', type=click.Path(file_okay=False), help='Input directory with documents')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output JSON file for chunk records')
@click.option('--strategy', '-s', type=click.Choice(sorted(STRATEGIES)), help='Chunking strategy')
@click.option('--force', is_flag=True, help='Overwrite an existing chunks file without asking')
@click.option('--stats', is_flag=True, help='Show statistics for the existing chunks file')
@click.pass_context
def build_cmd(ctx, input_dir, output, strategy, force, stats):
    """Chunk every document in a directory."""
    config = ctx.obj['config']
    chunker = DocumentChunker(config, strategy=strategy)

    # Handle stats command
    if stats:
        try:
            chunker.load_chunks(output)
        except FileNotFoundError as e:
            raise click.ClickException(str(e))

        summary = chunker.get_stats()
        click.echo("Chunk Statistics:")
        click.echo(f"  Sources: {summary['sources']}")
        click.echo(f"  Total chunks: {summary['total']}")
        click.echo(f"  With section: {summary['sectioned']}")
        click.echo(f"  Without section: {summary['plain']}")
        click.echo(f"  Mean length: {summary['mean_length']:.1f}")
        click.echo(f"  95th percentile length: {summary['p95_length']:.1f}")
        click.echo(f"  Max length: {summary['max_length']}")
        return

    output_file = output or config.chunks_file
    input_dir = input_dir or config.raw_data_dir

    click.echo("Chunking documents...")
    click.echo(f"Input directory: {input_dir}")
    click.echo(f"Output file: {output_file}")
    click.echo(f"Strategy: {chunker.strategy.name}")

    # Check if chunks already exist
    if not force and Path(output_file).exists():
        if not click.confirm(f"Chunks file already exists at {output_file}. Rebuild?"):
            click.echo("Build cancelled.")
            return

    try:
        with Timer("Chunking") as timer:
            records = chunker.process_directory(input_dir)
            saved_to = chunker.save_chunks(output)
    except FileNotFoundError as e:
        raise click.ClickException(str(e))

    chunker.print_stats()

    click.echo("\nChunking completed successfully!")
    click.echo(f"Total chunks: {len(records)}")
    click.echo(f"Chunks file: {saved_to}")
    click.echo(f"Time taken: {timer}")
