"""Command line interface for LineFilter."""
