"""CLI commands for todopad, one module per verb."""
