"""
Theme definitions for the SDA Checklist Manager GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"
    PRIMARY_BLUE_PRESSED = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    MUTED = "#eef0f2"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders & Dividers
    BORDER = "#e0e0e0"
    DIVIDER = "#eeeeee"
    BORDER_FOCUS = "#28A8EA"

    # Status
    ERROR = "#d32f2f"
    SUCCESS = "#388e3c"
    WARNING = "#f57c00"
    INFO = "#1976d2"

    # "Required" badge
    BADGE_REQUIRED_BG = "#d32f2f"
    BADGE_REQUIRED_TEXT = "#ffffff"


class ColorsDark:
    """Dark theme color palette."""

    PRIMARY_BLUE = "#3794FF"
    PRIMARY_BLUE_HOVER = "#4FA3FF"
    PRIMARY_BLUE_PRESSED = "#2A7FE8"

    BACKGROUND = "#1e1e1e"
    SURFACE = "#252526"
    MUTED = "#2d2d30"
    HOVER = "#21262D"
    DISABLED_BG = "#3D444D"

    TEXT_PRIMARY = "#E6EDF3"
    TEXT_SECONDARY = "#8B949E"
    TEXT_DISABLED = "#9CA3AF"
    TEXT_ON_PRIMARY = "#FFFFFF"

    BORDER = "#30363D"
    DIVIDER = "#21262D"
    BORDER_FOCUS = "#3794FF"

    ERROR = "#F85149"
    SUCCESS = "#3FB950"
    WARNING = "#D29922"
    INFO = "#58A6FF"

    BADGE_REQUIRED_BG = "#F85149"
    BADGE_REQUIRED_TEXT = "#FFFFFF"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    MONO_FONT = "Consolas, Monaco, Menlo, 'Courier New', monospace"

    # Sizes
    H1 = "22pt"
    H2 = "16pt"
    BODY = "13pt"
    SMALL = "10pt"
    CONSOLE = "12pt"

    # Weights
    WEIGHT_REGULAR = "400"
    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


def build_stylesheet(C) -> str:
    """Build the application stylesheet for a color palette."""
    return f"""
        QMainWindow, QWidget {{
            background-color: {C.BACKGROUND};
            color: {C.TEXT_PRIMARY};
        }}
        QLabel#mainTitle {{
            font-size: {Fonts.H1};
            font-weight: {Fonts.WEIGHT_BOLD};
        }}
        QLabel#mainSubtitle {{
            color: {C.TEXT_SECONDARY};
        }}
        QLabel#sectionTitle {{
            font-size: {Fonts.H2};
            font-weight: {Fonts.WEIGHT_BOLD};
        }}
        QLabel#panelTitle {{
            font-weight: {Fonts.WEIGHT_BOLD};
        }}
        QLabel#gridHeader {{
            background-color: {C.MUTED};
            font-weight: {Fonts.WEIGHT_BOLD};
            padding: 10px;
        }}
        QLabel#absentCell {{
            color: {C.TEXT_SECONDARY};
            font-style: italic;
        }}
        QLabel#requiredBadge {{
            background-color: {C.BADGE_REQUIRED_BG};
            color: {C.BADGE_REQUIRED_TEXT};
            font-size: {Fonts.SMALL};
            border-radius: 4px;
            padding: 2px 6px;
        }}
        QLabel#parseError {{
            color: {C.ERROR};
            font-size: {Fonts.SMALL};
        }}
        QPlainTextEdit {{
            background-color: {C.SURFACE};
            border: 1px solid {C.BORDER};
            border-radius: 4px;
            font-family: {Fonts.MONO_FONT};
        }}
        QPlainTextEdit:focus {{
            border: 2px solid {C.BORDER_FOCUS};
        }}
        QPlainTextEdit[invalid="true"] {{
            border: 2px solid {C.ERROR};
        }}
        QFrame#outputCard, QFrame#alignmentGrid {{
            background-color: {C.SURFACE};
            border: 1px solid {C.BORDER};
            border-radius: 6px;
        }}
        QPushButton {{
            background-color: {C.PRIMARY_BLUE};
            color: {C.TEXT_ON_PRIMARY};
            border-radius: 6px;
            padding: 6px 14px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
            border: none;
        }}
        QPushButton:hover {{
            background-color: {C.PRIMARY_BLUE_HOVER};
        }}
        QPushButton:pressed {{
            background-color: {C.PRIMARY_BLUE_PRESSED};
        }}
        QPushButton#themeButton {{
            background-color: {C.MUTED};
            color: {C.TEXT_PRIMARY};
        }}
        QPushButton#themeButton:hover {{
            background-color: {C.HOVER};
        }}
        QStatusBar {{
            background-color: {C.SURFACE};
            color: {C.TEXT_SECONDARY};
        }}
    """


GLOBAL_STYLESHEET = build_stylesheet(Colors)
GLOBAL_STYLESHEET_DARK = build_stylesheet(ColorsDark)


def apply_theme(app, is_dark: bool = False) -> None:
    """
    Apply the appropriate stylesheet (light or dark) to the QApplication.
    """
    set_dark_mode(is_dark)
    if is_dark:
        app.setStyleSheet(GLOBAL_STYLESHEET_DARK)
    else:
        app.setStyleSheet(GLOBAL_STYLESHEET)

# Module-level dark mode state (set explicitly when theme changes)
_is_dark_mode = False

def set_dark_mode(is_dark: bool):
    """Explicitly set the dark mode state. Called by apply_theme."""
    global _is_dark_mode
    _is_dark_mode = is_dark

def is_dark_mode() -> bool:
    return _is_dark_mode

def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors
