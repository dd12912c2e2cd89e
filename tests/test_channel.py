"""
Tests for stimconfig/model/channel.py
Channel defaults, field resolution, numeric coercion and signatures.
"""

import math

import pytest

from stimconfig.config import NUM_CHANNELS
from stimconfig.model.channel import (
    Channel,
    channel_at,
    coerce_number,
    default_channels,
    resolve_field,
)
from stimconfig.model.errors import UnknownFieldError


class TestDefaults:

    def test_bank_size_and_ids(self):
        channels = default_channels()
        assert len(channels) == NUM_CHANNELS
        assert [ch.id for ch in channels] == list(range(1, 13))
        assert [ch.index for ch in channels] == list(range(12))

    def test_default_values(self):
        ch = Channel(id=1)
        assert ch.frequency == 10
        assert ch.pulse_width == 2
        assert ch.voltage == 0
        assert ch.current == 0
        assert ch.pulse_train == 15
        assert ch.current_mode is False
        assert ch.num_stims == 3

    def test_channel_is_immutable(self):
        ch = Channel(id=1)
        with pytest.raises(Exception):
            ch.frequency = 20

    def test_channel_at(self, channels):
        assert channel_at(channels, 0).id == 1
        assert channel_at(channels, 12) is None
        assert channel_at(channels, -1) is None


class TestResolveField:

    def test_snake_case_passes_through(self):
        assert resolve_field('pulse_width') == 'pulse_width'

    def test_camel_case_aliases(self):
        assert resolve_field('pulseWidth') == 'pulse_width'
        assert resolve_field('pulseTrain') == 'pulse_train'
        assert resolve_field('currentMode') == 'current_mode'
        assert resolve_field('numStims') == 'num_stims'

    def test_unknown_field_raises(self):
        with pytest.raises(UnknownFieldError):
            resolve_field('amplitude')

    def test_unknown_field_is_key_error(self):
        """Callers catching KeyError also see unknown fields."""
        with pytest.raises(KeyError):
            resolve_field('id')


class TestCoerceNumber:

    @pytest.mark.parametrize("raw, expected", [
        ("20", 20.0),
        (" 2.5 ", 2.5),
        ("-3", -3.0),
        ("+4", 4.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("0x10", 16.0),
        ("0b101", 5.0),
        ("0o17", 15.0),
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
        (True, 1.0),
        (False, 0.0),
        (7, 7.0),
        (1.25, 1.25),
    ])
    def test_valid_input(self, raw, expected):
        assert coerce_number(raw) == expected

    def test_infinity(self):
        assert coerce_number("Infinity") == math.inf
        assert coerce_number("-Infinity") == -math.inf

    def test_huge_radix_literal_is_infinity(self):
        """Hex/octal/binary literals beyond float range overflow to +inf, not an error."""
        assert coerce_number("0x" + "f" * 300) == math.inf
        assert coerce_number("0b" + "1" * 1100) == math.inf

    @pytest.mark.parametrize("raw", [
        "abc", "12abc", "inf", "nan", "1_000", "0x", "-0x10", "0b102", [1],
        "١٢",          # Arabic-Indic digits
        "１２",          # fullwidth digits
    ])
    def test_invalid_input_is_nan(self, raw):
        assert math.isnan(coerce_number(raw))


class TestWithField:

    def test_numeric_field_is_coerced(self):
        ch = Channel(id=1).with_field('frequency', "20")
        assert ch.frequency == 20.0

    def test_bool_field_passes_through(self):
        ch = Channel(id=1).with_field('currentMode', True)
        assert ch.current_mode is True

    def test_invalid_number_stored_as_nan(self):
        ch = Channel(id=1).with_field('voltage', "oops")
        assert math.isnan(ch.voltage)

    def test_original_untouched(self):
        original = Channel(id=3)
        edited = original.with_field('num_stims', "9")
        assert original.num_stims == 3
        assert edited.num_stims == 9
        assert edited.id == 3

    def test_drive_field_follows_mode(self):
        ch = Channel(id=1, voltage=5, current=0.2)
        assert ch.drive_field == 'voltage'
        assert ch.drive_value == 5
        ch = ch.with_field('current_mode', True)
        assert ch.drive_field == 'current'
        assert ch.drive_value == 0.2


class TestSignature:

    def test_excludes_id(self):
        assert Channel(id=1).signature == Channel(id=7).signature

    def test_field_order(self):
        ch = Channel(id=1)
        assert ch.signature == (10, 2, 0, 0, 15, False, 3)

    def test_int_and_float_equal(self):
        a = Channel(id=1, frequency=20)
        b = Channel(id=2).with_field('frequency', "20")
        assert a.signature == b.signature

    def test_no_tolerance(self):
        a = Channel(id=1).with_field('frequency', "10.000001")
        assert a.signature != Channel(id=2).signature

    def test_nan_signatures_match(self):
        a = Channel(id=1).with_field('frequency', "x")
        b = Channel(id=2).with_field('frequency', "y")
        assert a.signature == b.signature
        assert hash(a.signature) == hash(b.signature)
