"""
Single-document chunking command for mdchunker CLI.
"""

import json
from pathlib import Path

import click

from mdchunker.chunking.chunker import DocumentChunker, EmptyDocumentError
from mdchunker.chunking.strategies import STRATEGIES


@click.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--strategy', '-s', type=click.Choice(sorted(STRATEGIES)), help='Chunking strategy')
@click.option('--max-size', '-m', type=click.IntRange(min=1), help='Maximum markdown chunk size (characters)')
@click.option('--plain-max-size', type=click.IntRange(min=1), help='Maximum plain-text chunk size (characters)')
@click.option('--source-id', help='Source id used to build vector ids')
@click.option('--source-title', help='Source title stored with each chunk')
@click.option('--json', 'as_json', is_flag=True, help='Print chunk records as JSON')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), help='Save chunk records to a JSON file')
@click.option('--max-content', type=int, default=200, help='Maximum content length to display')
@click.pass_context
def chunk_cmd(ctx, path, strategy, max_size, plain_max_size, source_id, source_title,
              as_json, output, max_content):
    """Chunk a single document."""
    config = ctx.obj['config']

    # Override config with command line options
    if max_size:
        config.markdown_max_size = max_size
    if plain_max_size:
        config.plain_max_size = plain_max_size

    chunker = DocumentChunker(config, strategy=strategy)

    try:
        records = chunker.process_file(path, source_id=source_id, source_title=source_title)
    except (OSError, UnicodeDecodeError, EmptyDocumentError) as e:
        raise click.ClickException(str(e))

    if output:
        chunker.save_chunks(output)

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False))
        return

    click.echo(f"{len(records)} chunks from {path.name} ({chunker.strategy.name} strategy)")
    for record in records:
        click.echo()
        click.echo(f"[{record.chunk_index}] {record.id}  {len(record.text)} chars")
        if record.section:
            click.echo(f"    Section: {record.section}")

        content = record.text
        if len(content) > max_content:
            content = content[:max_content] + "..."
        for line in content.splitlines():
            click.echo(f"    {line}")

    if output:
        click.echo(f"\nSaved to {output}")
