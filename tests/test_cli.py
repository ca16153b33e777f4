"""
Tests for the mdchunker command-line interface.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from cli.main import cli


MARKDOWN_DOC = '## Installation\nInstall using the package manager.\n\n## Usage\nRun the command.'


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the handlers installed by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    for name in ("MDCHUNK_MARKDOWN_MAX_SIZE", "MDCHUNK_PLAIN_MAX_SIZE",
                 "MDCHUNK_STRATEGY", "MDCHUNK_FILE_PATTERNS"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "data"


def invoke(runner, data_dir, *args, **kwargs):
    return runner.invoke(cli, ['--data-dir', str(data_dir), '--log-level', 'WARNING', *args], **kwargs)


class TestMainCommands:
    """Test cases for the top-level commands."""

    def test_version(self, cli_runner, data_dir):
        result = invoke(cli_runner, data_dir, 'version')

        assert result.exit_code == 0
        assert "mdchunker version" in result.output

    def test_status(self, cli_runner, data_dir):
        """Test status output for an empty data directory."""
        result = invoke(cli_runner, data_dir, 'status')

        assert result.exit_code == 0
        assert "Strategy: smart" in result.output
        assert "Raw documents: 0" in result.output
        assert "Chunks file: ✗ Not found" in result.output

    def test_detect(self, cli_runner, data_dir, tmp_path):
        """Test structure detection for a file."""
        path = tmp_path / "doc.md"
        path.write_text("### A\n\n1. one\n\n2. two\n\n### B\n\ntext", encoding="utf-8")

        result = invoke(cli_runner, data_dir, 'detect', str(path))

        assert result.exit_code == 0
        assert "Level 3 headings: 2" in result.output
        assert "Primary heading level: 3" in result.output
        assert "Numbered items: yes" in result.output

    def test_detect_plain_text(self, cli_runner, data_dir, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("just text", encoding="utf-8")

        result = invoke(cli_runner, data_dir, 'detect', str(path))

        assert "Primary heading level: none (plain text)" in result.output
        assert "Numbered items: no" in result.output


class TestChunkCommand:
    """Test cases for the chunk command."""

    def test_chunk_file(self, cli_runner, data_dir, tmp_path):
        """Test human-readable chunk output."""
        path = tmp_path / "guide.md"
        path.write_text(MARKDOWN_DOC, encoding="utf-8")

        result = invoke(cli_runner, data_dir, 'chunk', str(path))

        assert result.exit_code == 0
        assert "2 chunks from guide.md (smart strategy)" in result.output
        assert "Section: Installation" in result.output
        assert "guide-chunk-1" in result.output

    def test_chunk_json(self, cli_runner, data_dir, tmp_path):
        """Test JSON output with explicit source and strategy."""
        path = tmp_path / "guide.md"
        path.write_text(MARKDOWN_DOC, encoding="utf-8")

        result = invoke(cli_runner, data_dir, 'chunk', str(path), '--json',
                        '--strategy', 'plain', '--source-id', 'scrum')

        assert result.exit_code == 0
        records = json.loads(result.output)
        assert len(records) == 1
        assert records[0]['id'] == 'scrum-chunk-0'
        assert records[0]['section'] is None

    def test_chunk_max_size_and_output(self, cli_runner, data_dir, tmp_path):
        """Test size override and saving the records."""
        path = tmp_path / "big.md"
        path.write_text(f"## Big\n\n{'A' * 300}\n\n{'B' * 300}", encoding="utf-8")
        output = tmp_path / "big.json"

        result = invoke(cli_runner, data_dir, 'chunk', str(path), '--strategy', 'markdown',
                        '--max-size', '400', '--output', str(output))

        assert result.exit_code == 0
        saved = json.loads(output.read_text(encoding="utf-8"))
        assert len(saved) == 2
        assert saved[1]['text'].startswith("## Big\n\n")

    def test_chunk_empty_file(self, cli_runner, data_dir, tmp_path):
        """Test that an empty document is reported as an error."""
        path = tmp_path / "empty.md"
        path.write_text("   ", encoding="utf-8")

        result = invoke(cli_runner, data_dir, 'chunk', str(path))

        assert result.exit_code != 0
        assert "No chunks generated" in result.output


class TestBuildCommand:
    """Test cases for the build command."""

    def test_build_and_stats(self, cli_runner, data_dir, tmp_path):
        """Test building a chunks file and reading its statistics."""
        docs = tmp_path / "docs"
        docs.mkdir()
        (docs / "guide.md").write_text(MARKDOWN_DOC, encoding="utf-8")
        (docs / "notes.txt").write_text("A note.", encoding="utf-8")

        result = invoke(cli_runner, data_dir, 'build', '--input', str(docs), '--force')

        assert result.exit_code == 0
        assert "Total chunks: 3" in result.output
        assert (data_dir / "chunks" / "chunks.json").exists()

        result = invoke(cli_runner, data_dir, 'build', '--stats')

        assert result.exit_code == 0
        assert "Sources: 2" in result.output
        assert "Total chunks: 3" in result.output

    def test_build_declined(self, cli_runner, data_dir, tmp_path):
        """Test that an existing chunks file is kept when rebuild is declined."""
        docs = tmp_path / "docs"
        docs.mkdir()
        (docs / "guide.md").write_text(MARKDOWN_DOC, encoding="utf-8")
        chunks_file = data_dir / "chunks" / "chunks.json"
        chunks_file.parent.mkdir(parents=True)
        chunks_file.write_text("[]", encoding="utf-8")

        result = invoke(cli_runner, data_dir, 'build', '--input', str(docs), input="n\n")

        assert "Build cancelled." in result.output
        assert chunks_file.read_text(encoding="utf-8") == "[]"

    def test_build_missing_input(self, cli_runner, data_dir, tmp_path):
        result = invoke(cli_runner, data_dir, 'build', '--input', str(tmp_path / "nope"), '--force')

        assert result.exit_code != 0
        assert "Directory not found" in result.output

    def test_stats_without_chunks(self, cli_runner, data_dir):
        result = invoke(cli_runner, data_dir, 'build', '--stats')

        assert result.exit_code != 0
        assert "Chunks file not found" in result.output
