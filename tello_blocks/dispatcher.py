"""
Dispatcher - Pure boundary to transport.
Builds one command string per invocation and hands it over. Nothing more.
"""

import logging
from typing import Dict, Any, Mapping, Optional

from tello_blocks.cast import to_command_arg
from tello_blocks.catalog import parameter_defaults
from tello_blocks.transport import Transport, TransportError

logger = logging.getLogger(__name__)

BARE_VERBS = ('takeoff', 'land')
MOVE_VERBS = ('up', 'down', 'left', 'right', 'forward', 'back', 'cw', 'ccw')


def build_command(verb: str, args: Optional[Dict[str, Any]] = None,
                  defaults: Optional[Dict[str, Any]] = None) -> str:
    """
    Turn one invocation into a command string.

    Does NOT:
    - Localize the verb
    - Range-check the argument
    - Reject malformed input

    Only:
    - Falls back to the declared default when X is absent
    - Casts X to its canonical string
    """
    if verb in BARE_VERBS:
        return verb

    if not isinstance(args, Mapping):
        args = {}
    x = args.get('X')
    if x is None:
        x = (defaults or {}).get('X', 0)
    return f"{verb} {to_command_arg(x)}"


class Dispatcher:
    """
    Forwards invocations to an injected transport.

    Fire-and-forget: the transport owns delivery, retry and acknowledgement.
    Every call returns normally.
    """

    def __init__(self, transport: Transport):
        self.transport = transport
        self._defaults = parameter_defaults()

    def invoke(self, opcode: str, args: Optional[Dict[str, Any]] = None) -> None:
        """Generic entry point used by hosts that route by opcode."""
        if opcode == 'connect':
            self.connect()
        elif opcode in BARE_VERBS or opcode in MOVE_VERBS:
            self._send(opcode, args)
        else:
            logger.warning(f"Ignoring unknown opcode: {opcode!r}")

    def connect(self) -> None:
        logger.info("Dispatching connect request")
        try:
            self.transport.connect()
        except TransportError as e:
            logger.error(f"Connect failed: {e}")
        except Exception as e:
            logger.error(f"Unexpected transport error on connect: {e}", exc_info=True)

    def takeoff(self) -> None:
        self.invoke('takeoff')

    def land(self) -> None:
        self.invoke('land')

    def up(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.invoke('up', args)

    def down(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.invoke('down', args)

    def left(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.invoke('left', args)

    def right(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.invoke('right', args)

    def forward(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.invoke('forward', args)

    def back(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.invoke('back', args)

    def cw(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.invoke('cw', args)

    def ccw(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.invoke('ccw', args)

    def _send(self, opcode: str, args: Optional[Dict[str, Any]]) -> None:
        try:
            command = build_command(opcode, args, self._defaults.get(opcode))
            logger.info(f"Dispatching command: {command}")
            self.transport.send(command)
        except TransportError as e:
            logger.error(f"Dispatch failed: {e}")
        except Exception as e:
            logger.error(f"Unexpected error dispatching {opcode}: {e}", exc_info=True)
