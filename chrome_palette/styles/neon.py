"""
Neon: maximum chroma with raised lightness for a vivid glow.
"""

from .definitions import StyleEntry

NEON_STYLE = {
    "dark": {
        "titleBar.activeBackground": StyleEntry(0.58, 1.0),
        "titleBar.activeForeground": StyleEntry(0.98, 0.15),
        "titleBar.inactiveBackground": StyleEntry(0.5, 0.85),
        "titleBar.inactiveForeground": StyleEntry(0.82, 0.12),
        "statusBar.background": StyleEntry(0.6, 1.0),
        "statusBar.foreground": StyleEntry(0.98, 0.15),
        "activityBar.background": StyleEntry(0.52, 0.95),
        "activityBar.foreground": StyleEntry(0.96, 0.14),
        "sideBar.background": StyleEntry(0.49, 0.95),
        "sideBar.foreground": StyleEntry(0.96, 0.14),
        "sideBarSectionHeader.background": StyleEntry(0.52, 0.95),
        "sideBarSectionHeader.foreground": StyleEntry(0.96, 0.14),
    },
    "light": {
        "titleBar.activeBackground": StyleEntry(0.72, 0.95),
        "titleBar.activeForeground": StyleEntry(0.12, 0.25),
        "titleBar.inactiveBackground": StyleEntry(0.76, 0.8),
        "titleBar.inactiveForeground": StyleEntry(0.28, 0.18),
        "statusBar.background": StyleEntry(0.7, 1.0),
        "statusBar.foreground": StyleEntry(0.12, 0.25),
        "activityBar.background": StyleEntry(0.78, 0.9),
        "activityBar.foreground": StyleEntry(0.15, 0.2),
        "sideBar.background": StyleEntry(0.81, 0.9),
        "sideBar.foreground": StyleEntry(0.15, 0.2),
        "sideBarSectionHeader.background": StyleEntry(0.78, 0.9),
        "sideBarSectionHeader.foreground": StyleEntry(0.15, 0.2),
    },
    "hcDark": {
        "titleBar.activeBackground": StyleEntry(0.45, 1.0),
        "titleBar.activeForeground": StyleEntry(0.99, 0.12),
        "titleBar.inactiveBackground": StyleEntry(0.38, 0.9),
        "titleBar.inactiveForeground": StyleEntry(0.9, 0.1),
        "statusBar.background": StyleEntry(0.48, 1.0),
        "statusBar.foreground": StyleEntry(0.99, 0.12),
        "activityBar.background": StyleEntry(0.4, 0.95),
        "activityBar.foreground": StyleEntry(0.98, 0.1),
        "sideBar.background": StyleEntry(0.37, 0.95),
        "sideBar.foreground": StyleEntry(0.98, 0.1),
        "sideBarSectionHeader.background": StyleEntry(0.4, 0.95),
        "sideBarSectionHeader.foreground": StyleEntry(0.98, 0.1),
    },
    "hcLight": {
        "titleBar.activeBackground": StyleEntry(0.8, 1.0),
        "titleBar.activeForeground": StyleEntry(0.06, 0.3),
        "titleBar.inactiveBackground": StyleEntry(0.84, 0.85),
        "titleBar.inactiveForeground": StyleEntry(0.2, 0.2),
        "statusBar.background": StyleEntry(0.78, 1.0),
        "statusBar.foreground": StyleEntry(0.06, 0.3),
        "activityBar.background": StyleEntry(0.85, 0.95),
        "activityBar.foreground": StyleEntry(0.08, 0.25),
        "sideBar.background": StyleEntry(0.88, 0.95),
        "sideBar.foreground": StyleEntry(0.08, 0.25),
        "sideBarSectionHeader.background": StyleEntry(0.85, 0.95),
        "sideBarSectionHeader.foreground": StyleEntry(0.08, 0.25),
    },
}
