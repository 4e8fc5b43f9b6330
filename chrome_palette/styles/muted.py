"""
Muted: desaturated tones for minimal visual impact.

Backgrounds use 25-40% of the available chroma, between tinted and pastel.
"""

from .definitions import StyleEntry

MUTED_STYLE = {
    "dark": {
        "titleBar.activeBackground": StyleEntry(0.36, 0.3),
        "titleBar.activeForeground": StyleEntry(0.9, 0.08),
        "titleBar.inactiveBackground": StyleEntry(0.3, 0.25),
        "titleBar.inactiveForeground": StyleEntry(0.68, 0.06),
        "statusBar.background": StyleEntry(0.38, 0.35),
        "statusBar.foreground": StyleEntry(0.9, 0.08),
        "activityBar.background": StyleEntry(0.28, 0.3),
        "activityBar.foreground": StyleEntry(0.85, 0.08),
        "sideBar.background": StyleEntry(0.25, 0.3),
        "sideBar.foreground": StyleEntry(0.85, 0.08),
        "sideBarSectionHeader.background": StyleEntry(0.28, 0.3),
        "sideBarSectionHeader.foreground": StyleEntry(0.85, 0.08),
    },
    "light": {
        "titleBar.activeBackground": StyleEntry(0.82, 0.3),
        "titleBar.activeForeground": StyleEntry(0.18, 0.1),
        "titleBar.inactiveBackground": StyleEntry(0.86, 0.25),
        "titleBar.inactiveForeground": StyleEntry(0.38, 0.08),
        "statusBar.background": StyleEntry(0.78, 0.35),
        "statusBar.foreground": StyleEntry(0.18, 0.1),
        "activityBar.background": StyleEntry(0.88, 0.3),
        "activityBar.foreground": StyleEntry(0.2, 0.08),
        "sideBar.background": StyleEntry(0.91, 0.3),
        "sideBar.foreground": StyleEntry(0.2, 0.08),
        "sideBarSectionHeader.background": StyleEntry(0.88, 0.3),
        "sideBarSectionHeader.foreground": StyleEntry(0.2, 0.08),
    },
    "hcDark": {
        "titleBar.activeBackground": StyleEntry(0.18, 0.35),
        "titleBar.activeForeground": StyleEntry(0.95, 0.08),
        "titleBar.inactiveBackground": StyleEntry(0.14, 0.28),
        "titleBar.inactiveForeground": StyleEntry(0.8, 0.06),
        "statusBar.background": StyleEntry(0.2, 0.4),
        "statusBar.foreground": StyleEntry(0.95, 0.08),
        "activityBar.background": StyleEntry(0.12, 0.32),
        "activityBar.foreground": StyleEntry(0.92, 0.08),
        "sideBar.background": StyleEntry(0.09, 0.32),
        "sideBar.foreground": StyleEntry(0.92, 0.08),
        "sideBarSectionHeader.background": StyleEntry(0.12, 0.32),
        "sideBarSectionHeader.foreground": StyleEntry(0.92, 0.08),
    },
    "hcLight": {
        "titleBar.activeBackground": StyleEntry(0.92, 0.35),
        "titleBar.activeForeground": StyleEntry(0.1, 0.12),
        "titleBar.inactiveBackground": StyleEntry(0.94, 0.28),
        "titleBar.inactiveForeground": StyleEntry(0.28, 0.08),
        "statusBar.background": StyleEntry(0.9, 0.4),
        "statusBar.foreground": StyleEntry(0.1, 0.12),
        "activityBar.background": StyleEntry(0.95, 0.32),
        "activityBar.foreground": StyleEntry(0.12, 0.1),
        "sideBar.background": StyleEntry(0.97, 0.32),
        "sideBar.foreground": StyleEntry(0.12, 0.1),
        "sideBarSectionHeader.background": StyleEntry(0.95, 0.32),
        "sideBarSectionHeader.foreground": StyleEntry(0.12, 0.1),
    },
}
