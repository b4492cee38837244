"""Command line interface for notegraph."""
