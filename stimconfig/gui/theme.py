"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling
"""
from stimconfig.config import SELECTION_RING_COLOR

FONT_FAMILY = 'Helvetica'

FONT_SIZES = {
    'title': 18,
    'section': 14,
    'label': 11,
    'small': 10,
}

COLORS = {
    'background': '#f9fafb',
    'text': '#111827',
    'text_dim': '#4b5563',
    'divider': '#e5e7eb',
    'button': '#3b82f6',
    'button_hover': '#2563eb',
    'button_text': '#ffffff',
    'selection_ring': SELECTION_RING_COLOR,
}


def tile_style(color, selected=False):
    """Stylesheet for a channel tile. `color` is a (background, border) pair."""
    background, border = color
    ring = COLORS['selection_ring'] if selected else border
    width = 2 if selected else 1
    return f"""
        QFrame#channelTile {{
            background-color: {background};
            border: {width}px solid {ring};
            border-radius: 4px;
        }}
        QLabel {{
            background: transparent;
            border: none;
            color: {COLORS['text']};
        }}
    """


def button_style():
    """Primary action button."""
    return f"""
        QPushButton {{
            background-color: {COLORS['button']};
            color: {COLORS['button_text']};
            border-radius: 4px;
            padding: 6px 14px;
        }}
        QPushButton:hover {{
            background-color: {COLORS['button_hover']};
        }}
    """
