"""
Channel
Data model for one stimulation output and the 12-channel bank.

A Channel is immutable; edits produce a new Channel via with_field().
Numeric input is coerced the way a browser number field does it:
unparseable text becomes NaN and is stored, never rejected.
"""

import math
import re
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from stimconfig.config import (
    CHANNEL_DEFAULTS,
    CHANNEL_FIELD_ALIASES,
    CHANNEL_FIELD_KEYS,
    CHANNEL_FIELDS_BY_KEY,
    NUM_CHANNELS,
)
from stimconfig.model.errors import UnknownFieldError


# Signature = the 7 mutable fields in CHANNEL_FIELD_KEYS order
Signature = Tuple[Any, ...]


@dataclass(frozen=True)
class Channel:
    """One stimulation output. `id` is 1-based and fixed to its position."""
    id: int
    frequency: float = CHANNEL_DEFAULTS['frequency']       # Hz
    pulse_width: float = CHANNEL_DEFAULTS['pulse_width']   # ms
    voltage: float = CHANNEL_DEFAULTS['voltage']           # V, used when not current_mode
    current: float = CHANNEL_DEFAULTS['current']           # A, used when current_mode
    pulse_train: float = CHANNEL_DEFAULTS['pulse_train']
    current_mode: bool = CHANNEL_DEFAULTS['current_mode']
    num_stims: float = CHANNEL_DEFAULTS['num_stims']

    @property
    def index(self) -> int:
        return self.id - 1

    @property
    def drive_field(self) -> str:
        """Field that sets the drive level for the active mode."""
        return 'current' if self.current_mode else 'voltage'

    @property
    def drive_value(self) -> float:
        return getattr(self, self.drive_field)

    @property
    def signature(self) -> Signature:
        """Equality key over the mutable fields. NaN canonicalises to None."""
        return tuple(_canonical(getattr(self, key)) for key in CHANNEL_FIELD_KEYS)

    def with_field(self, field: str, value: Any) -> 'Channel':
        """Return a copy with `field` replaced, coercing numeric fields."""
        key = resolve_field(field)
        if CHANNEL_FIELDS_BY_KEY[key]['kind'] == 'bool':
            new_value = value
        else:
            new_value = coerce_number(value)
        return replace(self, **{key: new_value})


def _canonical(value):
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def resolve_field(field: str) -> str:
    """Map a field name (snake_case or UI camelCase alias) to its key."""
    if field in CHANNEL_FIELDS_BY_KEY:
        return field
    key = CHANNEL_FIELD_ALIASES.get(field)
    if key is None:
        raise UnknownFieldError(field)
    return key


def default_channels(count: int = NUM_CHANNELS) -> Tuple[Channel, ...]:
    """Fresh bank of channels with default settings."""
    return tuple(Channel(id=i + 1) for i in range(count))


# === NUMERIC COERCION ===

_DECIMAL_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)
_RADIX_RE = re.compile(r'0([xXoObB])([0-9a-fA-F]+)')
_RADIX_BASES = {'x': 16, 'o': 8, 'b': 2}
_INFINITY_RE = re.compile(r'([+-]?)Infinity')


def coerce_number(raw: Any) -> float:
    """
    Convert raw input to a number, NaN on failure.

    Mirrors JavaScript Number(): booleans are 1/0, None and blank strings
    are 0, 0x/0o/0b literals are integers, 'Infinity' is accepted but
    Python-only spellings ('inf', 'nan', '1_000') are not.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        return 1.0 if raw else 0.0
    if isinstance(raw, (int, float)):
        return float(raw)
    if not isinstance(raw, str):
        return math.nan

    text = raw.strip()
    if not text:
        return 0.0

    if _DECIMAL_RE.fullmatch(text):
        return float(text)

    m = _RADIX_RE.fullmatch(text)
    if m:
        try:
            return float(int(m.group(2), _RADIX_BASES[m.group(1).lower()]))
        except ValueError:
            return math.nan
        except OverflowError:
            # Unsigned literal too large for a float
            return math.inf

    m = _INFINITY_RE.fullmatch(text)
    if m:
        return -math.inf if m.group(1) == '-' else math.inf

    return math.nan


def channel_at(channels, index: int) -> Optional[Channel]:
    """Channel at a 0-based index, or None when out of range."""
    if 0 <= index < len(channels):
        return channels[index]
    return None
