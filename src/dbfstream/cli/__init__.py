"""Command line interface for dbfstream."""
