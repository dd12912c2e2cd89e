"""
Central Configuration
All constants, mappings, and settings in one place
"""

# === CHANNEL BANK ===
NUM_CHANNELS = 12

# === CHANNEL FIELDS ===
# Single source of truth for the per-channel stimulation parameters.
# Order determines editor order, Signature order and export statement order.
CHANNEL_FIELDS = [
    {
        'key': 'frequency',
        'alias': 'frequency',
        'label': 'Frequency',
        'unit': 'Hz',
        'kind': 'number',
        'default': 10,
        'setter': 'set_frequency',
    },
    {
        'key': 'pulse_width',
        'alias': 'pulseWidth',
        'label': 'Pulse Width',
        'unit': 'ms',
        'kind': 'number',
        'default': 2,
        'setter': 'set_pulse_width',
    },
    {
        'key': 'voltage',
        'alias': 'voltage',
        'label': 'Voltage',
        'unit': 'V',
        'kind': 'number',
        'default': 0,
        'setter': 'set_voltage',
    },
    {
        'key': 'current',
        'alias': 'current',
        'label': 'Current',
        'unit': 'A',
        'kind': 'number',
        'default': 0,
        'setter': 'set_current',
    },
    {
        'key': 'pulse_train',
        'alias': 'pulseTrain',
        'label': 'Pulse Train Length',
        'unit': '',
        'kind': 'number',
        'default': 15,
        'setter': 'set_pulse_train_length',
    },
    {
        'key': 'current_mode',
        'alias': 'currentMode',
        'label': 'Current Mode',
        'unit': '',
        'kind': 'bool',
        'default': False,
        'setter': 'set_current_stimulation_mode',
    },
    {
        'key': 'num_stims',
        'alias': 'numStims',
        'label': 'Number of Stimulations',
        'unit': '',
        'kind': 'number',
        'default': 3,
        'setter': 'set_num_of_stims',
    },
]

# Build lookup dicts for quick access
CHANNEL_FIELDS_BY_KEY = {f['key']: f for f in CHANNEL_FIELDS}
CHANNEL_FIELD_KEYS = tuple(f['key'] for f in CHANNEL_FIELDS)
CHANNEL_FIELD_ALIASES = {f['alias']: f['key'] for f in CHANNEL_FIELDS}
CHANNEL_DEFAULTS = {f['key']: f['default'] for f in CHANNEL_FIELDS}

# Input step for the drive-level field (voltage steps in volts, current in amps)
DRIVE_STEP = {
    'voltage': 1.0,
    'current': 0.01,
}

# === GROUP COLOURS ===
# (background, border) pairs, cycled per distinct configuration
GROUP_COLORS = [
    ('#dbeafe', '#93c5fd'),  # blue
    ('#dcfce7', '#86efac'),  # green
    ('#fef9c3', '#fde047'),  # yellow
    ('#f3e8ff', '#d8b4fe'),  # purple
    ('#fce7f3', '#f9a8d4'),  # pink
    ('#e0e7ff', '#a5b4fc'),  # indigo
]
UNGROUPED_COLOR = ('#ffffff', '#e5e7eb')
SELECTION_RING_COLOR = '#3b82f6'

# === EXPORT ===
EXPORT_CHANNEL_ARRAY = 'channels'
EXPORT_CURSOR_NAME = 'set_channel'

# === LAYOUT ===
SIZES = {
    'grid_columns': 6,
    'tile_min_width': 130,
    'window_width': 960,
    'window_height': 560,
}
