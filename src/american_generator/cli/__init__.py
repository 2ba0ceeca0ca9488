"""Command line interface for the American Generator."""
