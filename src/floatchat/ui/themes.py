"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Deep-ocean palette: blue for temperature, teal for salinity, violet for currents
FLOATCHAT_OCEAN = Theme(
    name="floatchat-ocean",
    primary="#60a5fa",      # Blue - main accent, user messages
    secondary="#2dd4bf",    # Teal - assistant messages
    accent="#a78bfa",       # Violet - charts
    foreground="#e2e8f0",
    background="#0b1120",
    success="#4ade80",      # Green - status dots, send button
    warning="#fbbf24",
    error="#f87171",
    surface="#111a2e",
    panel="#0f172a",
    dark=True,
    variables={
        "block-cursor-foreground": "#0b1120",
        "block-cursor-background": "#bfdbfe",
        "block-cursor-text-style": "bold",
        "block-hover-background": "#1e293b 20%",

        "input-cursor-background": "#e2e8f0",
        "input-cursor-foreground": "#0b1120",
        "input-selection-background": "#60a5fa 30%",

        "border": "#334155",
        "border-blurred": "#1e293b",

        "scrollbar": "#1e293b",
        "scrollbar-hover": "#334155",
        "scrollbar-active": "#60a5fa",
        "scrollbar-background": "#0f172a",
        "scrollbar-corner-color": "#0f172a",

        "footer-foreground": "#cbd5e1",
        "footer-background": "#0b1120",
        "footer-key-foreground": "#2dd4bf",
        "footer-key-background": "#1e293b",
        "footer-description-foreground": "#94a3b8",

        "text-muted": "#64748b",
        "text-disabled": "#334155",

        "button-foreground": "#e2e8f0",
        "button-color-foreground": "#0b1120",
        "button-focus-text-style": "bold reverse",
    },
)
