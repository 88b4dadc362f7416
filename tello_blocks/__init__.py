"""Scratch-style command blocks for the Tello drone."""

from tello_blocks.catalog import Operation, Parameter, build_catalog, resolve_locale
from tello_blocks.dispatcher import Dispatcher, build_command
from tello_blocks.extension import TelloExtension
from tello_blocks.transport import Transport, TransportError

__all__ = [
    "Operation",
    "Parameter",
    "build_catalog",
    "resolve_locale",
    "Dispatcher",
    "build_command",
    "TelloExtension",
    "Transport",
    "TransportError",
]
