"""
Command result type for dispatch outcomes.

The wire protocol has no error frame, so a result never reaches a client.
It reports to the caller (session route, tests) whether a command was
applied and what was fanned out because of it.
"""

from dataclasses import dataclass


@dataclass
class CommandResult:
    """
    Result of dispatching one inbound frame.

    Attributes:
        success: True if the command mutated state and was broadcast
        command: Inbound command type, None if the frame never decoded
        message: Reason the frame was dropped (None on success)
        broadcast: Outbound message type that was fanned out
        recipients: Number of connections the broadcast was queued for
    """

    success: bool
    command: str | None = None
    message: str | None = None
    broadcast: str | None = None
    recipients: int = 0

    @classmethod
    def ok(cls, command: str, broadcast: str, recipients: int) -> "CommandResult":
        """
        Create a result for an applied command.

        Args:
            command: Inbound command type
            broadcast: Outbound message type sent to every connection
            recipients: Number of connections the frame was queued for

        Returns:
            CommandResult with success=True
        """
        return cls(
            success=True,
            command=command,
            broadcast=broadcast,
            recipients=recipients,
        )

    @classmethod
    def dropped(cls, reason: str, command: str | None = None) -> "CommandResult":
        """
        Create a result for a frame that was ignored.

        Args:
            reason: Why the frame was dropped
            command: Inbound command type, if it was known

        Returns:
            CommandResult with success=False
        """
        return cls(success=False, command=command, message=reason)
