"""CLI commands for TodoMatic."""
