"""Commands package - modular command modules."""

from toolbridge.cli.commands.chat import chat
from toolbridge.cli.commands.config import config, doctor, models
from toolbridge.cli.commands.serve import serve

__all__ = ["chat", "config", "doctor", "models", "serve"]
