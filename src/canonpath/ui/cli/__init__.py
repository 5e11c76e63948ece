"""Command line interface for canonpath."""
