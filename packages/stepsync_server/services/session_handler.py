"""
Session handler - per-connection lifecycle and command dispatch.

open:   register the connection and queue its initial state_update
frame:  decode, mutate the store, broadcast the resulting message
close:  deregister (no broadcast)

Every outbound message goes to all connections, the sender included, so
each client converges on the server's state instead of its own echo.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from stepsync_core.errors import (
    InvalidCommand,
    MalformedFrame,
    StateError,
    UnknownCommandType,
)
from stepsync_core.protocol import (
    ClearPatternCommand,
    Command,
    MessageCodec,
    OutboundMessage,
    StepUpdateCommand,
    ToggleStepCommand,
    TransportControlCommand,
    UpdateParamsCommand,
    params_update,
    pattern_update,
    state_update,
    step_position,
    transport_update,
)
from stepsync_core.result import CommandResult
from stepsync_core.state import StateStore, normalize_params
from stepsync_server.services.broadcast import Broadcaster
from stepsync_server.services.connection import ClientConnection
from stepsync_server.services.registry import ConnectionRegistry

logger = logging.getLogger(__name__)


class SessionHandler:
    """
    Drives every client session against one shared store.

    None of the methods await: a mutation and the enqueueing of its
    broadcast happen in one step, so broadcast order is mutation order.
    """

    def __init__(
        self,
        store: StateStore,
        registry: ConnectionRegistry,
        broadcaster: Broadcaster,
        codec: MessageCodec,
        strict_params: bool = False,
    ) -> None:
        self._store = store
        self._registry = registry
        self._broadcaster = broadcaster
        self._codec = codec
        self._strict_params = strict_params
        self._handlers: dict[str, Callable[[Command], OutboundMessage]] = {}

        self.register_handler("toggle_step", self._handle_toggle_step)
        self.register_handler("update_params", self._handle_update_params)
        self.register_handler("transport_control", self._handle_transport_control)
        self.register_handler("step_update", self._handle_step_update)
        self.register_handler("clear_pattern", self._handle_clear_pattern)

    def register_handler(
        self, command_type: str, handler: Callable[[Command], OutboundMessage]
    ) -> None:
        """
        Register a handler for a command type

        Args:
            command_type: Inbound command type (e.g., "toggle_step")
            handler: Applies the command to the store and returns the message to broadcast
        """
        self._handlers[command_type] = handler

    # ----------------------------------------------------------
    # Lifecycle
    # ----------------------------------------------------------

    def open(self, conn: ClientConnection) -> None:
        """Register a connection and queue its initial snapshot."""
        snapshot = self._store.snapshot()
        self._registry.register(conn)
        conn.mark_open()
        self._broadcaster.send_to(conn, state_update(snapshot))
        logger.info(f"Client {conn.id} connected. Total clients: {len(self._registry)}")

    def close(self, conn: ClientConnection) -> None:
        """Deregister a connection; safe to call more than once."""
        removed = self._registry.deregister(conn)
        conn.close()
        if removed:
            logger.info(f"Client {conn.id} disconnected. Total clients: {len(self._registry)}")

    # ----------------------------------------------------------
    # Inbound
    # ----------------------------------------------------------

    def handle_frame(self, conn: ClientConnection, frame: str | bytes) -> CommandResult:
        """
        Process one inbound frame.

        Bad frames are logged and dropped; the connection stays open.
        """
        try:
            command = self._codec.decode(frame)
        except MalformedFrame as e:
            logger.warning(f"Invalid frame from client {conn.id}: {e}")
            return CommandResult.dropped(str(e))
        except UnknownCommandType as e:
            logger.debug(f"Ignoring frame from client {conn.id}: {e}")
            return CommandResult.dropped(str(e))
        except InvalidCommand as e:
            logger.debug(f"Ignoring frame from client {conn.id}: {e}")
            return CommandResult.dropped(str(e), command=e.command_type)

        return self.dispatch(command)

    def dispatch(self, command: Command) -> CommandResult:
        """Apply a decoded command and broadcast the result to everyone."""
        handler = self._handlers.get(command.type)
        if handler is None:
            logger.warning(f"No handler for command type: {command.type}")
            return CommandResult.dropped(f"No handler for {command.type}", command=command.type)

        try:
            message = handler(command)
        except StateError as e:
            logger.debug(f"Dropped '{command.type}': {e}")
            return CommandResult.dropped(str(e), command=command.type)

        recipients = self._broadcaster.publish(message)
        return CommandResult.ok(command.type, message.type, recipients)

    # ----------------------------------------------------------
    # Command handlers
    # ----------------------------------------------------------

    def _handle_toggle_step(self, command: ToggleStepCommand) -> OutboundMessage:
        active = self._store.toggle_step(command.track, command.step)
        return pattern_update(command.track, command.step, active)

    def _handle_update_params(self, command: UpdateParamsCommand) -> OutboundMessage:
        kind = self._store.track_kind(command.track)
        accepted = normalize_params(kind, command.params, strict=self._strict_params)
        params = self._store.merge_params(command.track, accepted)
        return params_update(command.track, params)

    def _handle_transport_control(self, command: TransportControlCommand) -> OutboundMessage:
        transport = self._store.set_transport(command.action, command.bpm)
        return transport_update(transport)

    def _handle_step_update(self, command: StepUpdateCommand) -> OutboundMessage:
        return step_position(self._store.set_current_step(command.step))

    def _handle_clear_pattern(self, command: ClearPatternCommand) -> OutboundMessage:
        logger.info("Clearing pattern...")
        snapshot = self._store.clear_all_patterns()
        logger.info(f"Pattern cleared, broadcasting to {len(self._registry)} clients")
        return state_update(snapshot)
