"""Command-line tools (python -m northnode.tools.<name>)."""
