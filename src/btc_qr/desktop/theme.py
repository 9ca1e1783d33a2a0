"""Desktop theme — dark palette with Bitcoin orange accents.

Design principles:
  • Dark background (#1a1a1a base) so the white QR quiet zone stands out
  • Bitcoin orange (#f7931a) for primary actions and the active section
  • Monospace for seed words, descriptors and transaction data
  • QSS stylesheet exported as a single string for QApplication.setStyleSheet()
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Palette:
    """Named colour tokens — single source of truth."""

    # Backgrounds
    bg_base: str = "#1a1a1a"
    bg_surface: str = "#232323"  # sidebar
    bg_card: str = "#2a2a2a"
    bg_input: str = "#333333"
    bg_hover: str = "#3a3a3a"

    border: str = "#404040"
    border_focus: str = "#f7931a"

    # Text
    text_primary: str = "#ededed"
    text_secondary: str = "#a3a3a3"
    text_muted: str = "#6b6b6b"
    text_inverse: str = "#1a1a1a"

    # Bitcoin accent
    accent: str = "#f7931a"
    accent_hover: str = "#ffa940"
    accent_muted: str = "#7a4a0d"

    # Semantic
    success: str = "#22c55e"
    warning: str = "#f59e0b"
    error: str = "#ef4444"


PALETTE = Palette()

# ---------------------------------------------------------------------------
# Typography & sizing
# ---------------------------------------------------------------------------

FONT_FAMILY = '"Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'
FONT_MONO = '"SF Mono", "Cascadia Code", "Fira Code", Consolas, monospace'

FONT_SIZE_XS = 11
FONT_SIZE_SM = 13
FONT_SIZE_MD = 14
FONT_SIZE_XL = 20

RADIUS_MD = 6
BUTTON_HEIGHT = 34


def build_stylesheet(p: Palette | None = None) -> str:
    """Generate the Qt Style Sheet for the application.

    Args:
        p: Palette to use. Defaults to the built-in dark theme.
    """
    if p is None:
        p = PALETTE

    return f"""
    * {{
        color: {p.text_primary};
        font-family: {FONT_FAMILY};
        font-size: {FONT_SIZE_MD}px;
    }}
    QMainWindow, QWidget {{
        background-color: {p.bg_base};
    }}

    /* ===== Labels ===== */
    QLabel {{
        background: transparent;
    }}
    QLabel[role="heading"] {{
        font-size: {FONT_SIZE_XL}px;
        font-weight: 600;
    }}
    QLabel[role="caption"] {{
        font-size: {FONT_SIZE_XS}px;
        color: {p.text_secondary};
    }}
    QLabel[role="mono"] {{
        font-family: {FONT_MONO};
        font-size: {FONT_SIZE_SM}px;
        color: {p.text_secondary};
    }}
    QLabel[role="error"] {{
        color: {p.error};
    }}
    QLabel[role="badge"] {{
        color: {p.accent};
        font-weight: 600;
    }}

    /* ===== Buttons ===== */
    QPushButton {{
        background-color: {p.bg_input};
        border: 1px solid {p.border};
        border-radius: {RADIUS_MD}px;
        padding: 6px 14px;
        min-height: {BUTTON_HEIGHT}px;
    }}
    QPushButton:hover {{
        background-color: {p.bg_hover};
        border-color: {p.accent};
    }}
    QPushButton:disabled {{
        color: {p.text_muted};
        border-color: {p.border};
    }}
    QPushButton[role="primary"] {{
        background-color: {p.accent};
        color: {p.text_inverse};
        border: none;
        font-weight: 600;
    }}
    QPushButton[role="primary"]:hover {{
        background-color: {p.accent_hover};
    }}
    QPushButton[role="primary"]:disabled {{
        background-color: {p.accent_muted};
        color: {p.text_muted};
    }}
    QPushButton[role="nav"] {{
        background: transparent;
        border: none;
        text-align: left;
        padding: 8px 12px;
    }}
    QPushButton[role="nav"]:checked {{
        background-color: {p.bg_card};
        color: {p.accent};
        border-left: 3px solid {p.accent};
    }}
    QPushButton[role="toggle"]:checked {{
        background-color: {p.accent};
        color: {p.text_inverse};
    }}

    /* ===== Inputs ===== */
    QLineEdit, QPlainTextEdit {{
        background-color: {p.bg_input};
        border: 1px solid {p.border};
        border-radius: {RADIUS_MD}px;
        padding: 4px 8px;
        font-family: {FONT_MONO};
    }}
    QLineEdit:focus, QPlainTextEdit:focus {{
        border-color: {p.border_focus};
    }}
    QLineEdit[invalid="true"] {{
        border-color: {p.warning};
    }}
    QListWidget[role="suggestions"] {{
        background-color: {p.bg_card};
        border: 1px solid {p.accent};
        font-family: {FONT_MONO};
    }}
    QListWidget[role="suggestions"]::item:selected {{
        background-color: {p.accent};
        color: {p.text_inverse};
    }}

    /* ===== Containers ===== */
    QFrame[role="card"] {{
        background-color: {p.bg_card};
        border: 1px solid {p.border};
        border-radius: {RADIUS_MD}px;
    }}
    QTabBar::tab {{
        background: {p.bg_surface};
        padding: 6px 16px;
    }}
    QTabBar::tab:selected {{
        color: {p.accent};
        border-bottom: 2px solid {p.accent};
    }}
    QStatusBar {{
        background-color: {p.bg_surface};
        color: {p.text_secondary};
    }}
    """


DARK_STYLESHEET = build_stylesheet()
