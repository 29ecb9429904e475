"""CLI commands for the Tuskers API."""

from .user import user_commands


def register_commands(app):
    """Register all CLI command groups with the Flask app."""
    app.cli.add_command(user_commands)
