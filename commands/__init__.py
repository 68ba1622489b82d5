"""Command handlers for anilibrix.

- bridge.py: Named-operation dispatch used by a UI shell and the CLI
"""

from commands.bridge import COMMANDS, CommandBridge, CommandResult

__all__ = ["COMMANDS", "CommandBridge", "CommandResult"]
