"""
Command-line interface for mdchunker.
"""
