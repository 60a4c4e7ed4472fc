"""
Slack Answer Bridge

Answers Slack @mentions with an AI backend over a Socket Mode connection.
"""

__version__ = "0.1.0"
