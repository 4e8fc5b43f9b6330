"""
Pastel: soft tones that blend gently with any theme.

Backgrounds use 45-60% of the available chroma; foregrounds stay close to
neutral for readability while keeping the hue.
"""

from .definitions import StyleEntry

PASTEL_STYLE = {
    "dark": {
        "titleBar.activeBackground": StyleEntry(0.42, 0.55),
        "titleBar.activeForeground": StyleEntry(0.92, 0.12),
        "titleBar.inactiveBackground": StyleEntry(0.36, 0.45),
        "titleBar.inactiveForeground": StyleEntry(0.72, 0.1),
        "statusBar.background": StyleEntry(0.45, 0.6),
        "statusBar.foreground": StyleEntry(0.92, 0.12),
        "activityBar.background": StyleEntry(0.34, 0.5),
        "activityBar.foreground": StyleEntry(0.88, 0.12),
        "sideBar.background": StyleEntry(0.31, 0.5),
        "sideBar.foreground": StyleEntry(0.88, 0.12),
        "sideBarSectionHeader.background": StyleEntry(0.34, 0.5),
        "sideBarSectionHeader.foreground": StyleEntry(0.88, 0.12),
    },
    "light": {
        "titleBar.activeBackground": StyleEntry(0.76, 0.55),
        "titleBar.activeForeground": StyleEntry(0.15, 0.15),
        "titleBar.inactiveBackground": StyleEntry(0.8, 0.45),
        "titleBar.inactiveForeground": StyleEntry(0.35, 0.1),
        "statusBar.background": StyleEntry(0.72, 0.6),
        "statusBar.foreground": StyleEntry(0.15, 0.15),
        "activityBar.background": StyleEntry(0.82, 0.5),
        "activityBar.foreground": StyleEntry(0.18, 0.12),
        "sideBar.background": StyleEntry(0.85, 0.5),
        "sideBar.foreground": StyleEntry(0.18, 0.12),
        "sideBarSectionHeader.background": StyleEntry(0.82, 0.5),
        "sideBarSectionHeader.foreground": StyleEntry(0.18, 0.12),
    },
    "hcDark": {
        "titleBar.activeBackground": StyleEntry(0.24, 0.6),
        "titleBar.activeForeground": StyleEntry(0.96, 0.1),
        "titleBar.inactiveBackground": StyleEntry(0.2, 0.5),
        "titleBar.inactiveForeground": StyleEntry(0.82, 0.08),
        "statusBar.background": StyleEntry(0.26, 0.65),
        "statusBar.foreground": StyleEntry(0.96, 0.1),
        "activityBar.background": StyleEntry(0.18, 0.55),
        "activityBar.foreground": StyleEntry(0.94, 0.1),
        "sideBar.background": StyleEntry(0.15, 0.55),
        "sideBar.foreground": StyleEntry(0.94, 0.1),
        "sideBarSectionHeader.background": StyleEntry(0.18, 0.55),
        "sideBarSectionHeader.foreground": StyleEntry(0.94, 0.1),
    },
    "hcLight": {
        "titleBar.activeBackground": StyleEntry(0.88, 0.6),
        "titleBar.activeForeground": StyleEntry(0.1, 0.2),
        "titleBar.inactiveBackground": StyleEntry(0.9, 0.5),
        "titleBar.inactiveForeground": StyleEntry(0.25, 0.12),
        "statusBar.background": StyleEntry(0.85, 0.65),
        "statusBar.foreground": StyleEntry(0.1, 0.2),
        "activityBar.background": StyleEntry(0.92, 0.55),
        "activityBar.foreground": StyleEntry(0.12, 0.15),
        "sideBar.background": StyleEntry(0.95, 0.55),
        "sideBar.foreground": StyleEntry(0.12, 0.15),
        "sideBarSectionHeader.background": StyleEntry(0.92, 0.55),
        "sideBarSectionHeader.foreground": StyleEntry(0.12, 0.15),
    },
}
