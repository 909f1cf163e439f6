"""CLI (Typer + Rich) sobre `IsDayOffClient`."""
