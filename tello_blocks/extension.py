"""
Block extension facade.

Presents the catalog and the opcode handlers to the host as one object.
"""

import logging
from typing import Dict, Any, Optional

from tello_blocks.catalog import build_catalog
from tello_blocks.dispatcher import Dispatcher
from tello_blocks.transport import Transport

logger = logging.getLogger(__name__)


class TelloExtension:

    def __init__(self, transport: Transport, locale: Optional[str] = None,
                 icon_assets: Optional[Dict[str, str]] = None):
        self.dispatcher = Dispatcher(transport)
        self.locale = locale
        self.icon_assets = icon_assets

    def get_info(self, locale: Optional[str] = None) -> Dict[str, Any]:
        """Metadata for this extension and its blocks."""
        return build_catalog(locale if locale is not None else self.locale, self.icon_assets)

    def invoke(self, opcode: str, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.invoke(opcode, args)

    def connect(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.connect()

    def takeoff(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.takeoff()

    def land(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.land()

    def up(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.up(args)

    def down(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.down(args)

    def left(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.left(args)

    def right(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.right(args)

    def forward(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.forward(args)

    def back(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.back(args)

    def cw(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.cw(args)

    def ccw(self, args: Optional[Dict[str, Any]] = None) -> None:
        self.dispatcher.ccw(args)
