"""
Catalog builder - what the host renders.

Builds the block list fresh on every call.
Does NOT:
- Cache descriptors
- Read ambient locale state
- Validate arguments

Only:
- Resolves the requested locale
- Looks up labels
- Declares parameter schemas
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple

from tello_blocks.messages import (
    MESSAGES, DEFAULT_LOCALE, SUPPORTED_LOCALES, message_for
)

logger = logging.getLogger(__name__)

EXTENSION_ID = 'tello'
EXTENSION_NAME = 'Tello'

BLOCK_TYPE_COMMAND = 'command'
ARGUMENT_TYPE_NUMBER = 'number'

# Distance in cm for translation moves, degrees for rotation
DEFAULT_DISTANCE = 50
DEFAULT_ANGLE = 90


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str
    default: Any

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "defaultValue": self.default
        }


@dataclass(frozen=True)
class Operation:
    """
    One invocable block.

    `opcode` is stable across locales and doubles as the command verb
    for everything except connect.
    """
    opcode: str
    texts: Dict[str, str]
    parameters: Tuple[Parameter, ...] = field(default_factory=tuple)

    def display_text(self, locale: str) -> str:
        return self.texts.get(locale) or self.texts[DEFAULT_LOCALE]

    def to_block(self, locale: str) -> Dict[str, Any]:
        """Serialize to the block shape the host renders."""
        block = {
            "opcode": self.opcode,
            "displayText": self.display_text(locale),
            "kind": BLOCK_TYPE_COMMAND
        }
        if self.parameters:
            block["parameters"] = {p.name: p.to_dict() for p in self.parameters}
        return block


def resolve_locale(locale: Optional[str]) -> str:
    """Exact match against supported locales, else English."""
    if locale in SUPPORTED_LOCALES:
        return locale
    return DEFAULT_LOCALE


def _x(default: int) -> Tuple[Parameter, ...]:
    return (Parameter(name='X', type=ARGUMENT_TYPE_NUMBER, default=default),)


def _operation(opcode: str, parameters: Tuple[Parameter, ...] = ()) -> Operation:
    texts = dict(MESSAGES.get(opcode, {}))
    # Every descriptor must carry English text
    texts.setdefault(DEFAULT_LOCALE, message_for(opcode, DEFAULT_LOCALE))
    return Operation(opcode=opcode, texts=texts, parameters=parameters)


def build_operations() -> Tuple[Operation, ...]:
    """Fresh descriptors in display order."""
    return (
        _operation('connect'),
        _operation('takeoff'),
        _operation('land'),
        _operation('up', _x(DEFAULT_DISTANCE)),
        _operation('down', _x(DEFAULT_DISTANCE)),
        _operation('left', _x(DEFAULT_DISTANCE)),
        _operation('right', _x(DEFAULT_DISTANCE)),
        _operation('forward', _x(DEFAULT_DISTANCE)),
        _operation('back', _x(DEFAULT_DISTANCE)),
        _operation('cw', _x(DEFAULT_ANGLE)),
        _operation('ccw', _x(DEFAULT_ANGLE)),
    )


def parameter_defaults() -> Dict[str, Dict[str, Any]]:
    """opcode -> {parameter name: default} for every operation."""
    return {
        op.opcode: {p.name: p.default for p in op.parameters}
        for op in build_operations()
    }


def build_catalog(locale: Optional[str] = None,
                  icon_assets: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Build the extension metadata for the host.

    Never raises: an unknown locale or a missing label falls back to
    English.
    """
    resolved = resolve_locale(locale)
    logger.debug(f"Building catalog for locale={locale!r} (resolved {resolved})")

    return {
        "id": EXTENSION_ID,
        "name": EXTENSION_NAME,
        "iconAssets": dict(icon_assets or {}),
        "blocks": [op.to_block(resolved) for op in build_operations()]
    }
