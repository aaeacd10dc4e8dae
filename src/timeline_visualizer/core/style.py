"""
Timeline Style Configuration

Colors and fonts used by the renderer. Override the class attributes
directly to restyle every canvas, e.g.:

    TimelineStyle.BG_COLOR = QColor(20, 20, 20)
"""

from PyQt6.QtGui import QColor, QFont


class TimelineStyle:
    """
    Style configuration for the timeline canvas.
    """

    # =========================================================================
    # Background Colors
    # =========================================================================
    BG_COLOR = QColor(0x33, 0x33, 0x33)
    LABEL_BG_COLOR = QColor(0x66, 0x66, 0x66)

    # =========================================================================
    # Lines / Text
    # =========================================================================
    ROW_LINE_COLOR = QColor(0, 0, 0)
    TEXT_COLOR = QColor(255, 255, 255)
    TEXT_FONT_FAMILY = "Calibri"
    TEXT_FONT_SIZE = 16  # Pixels

    # =========================================================================
    # Timeline-Specific Colors
    # =========================================================================
    PLAYHEAD_COLOR = QColor(255, 0, 0, 128)
    OBJECT_FILL_COLOR = QColor(22, 102, 247, 191)
    OBJECT_BORDER_COLOR = QColor(232, 240, 255, 217)

    @classmethod
    def text_font(cls) -> QFont:
        font = QFont(cls.TEXT_FONT_FAMILY)
        font.setPixelSize(cls.TEXT_FONT_SIZE)
        return font
