"""Theme colors for the UI."""


class TypingColors:
    """Light palette for the typing screen."""

    BG = "#e0f7fa"
    CARD_BG = "rgba(255, 255, 255, 0.85)"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"

    CORRECT = "#2e7d32"
    INCORRECT = "#c62828"
    PENDING = "#78909c"
    CURSOR_BG = "#b2ebf2"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"

    BANNER_BG = "#e8f5e9"
