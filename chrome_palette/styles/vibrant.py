"""
Vibrant: bold, clearly noticeable colors.

Sits between pastel and neon: backgrounds use 70-90% of the available
chroma at a lightness slightly above pastel.
"""

from .definitions import StyleEntry

VIBRANT_STYLE = {
    "dark": {
        "titleBar.activeBackground": StyleEntry(0.5, 0.8),
        "titleBar.activeForeground": StyleEntry(0.96, 0.14),
        "titleBar.inactiveBackground": StyleEntry(0.44, 0.68),
        "titleBar.inactiveForeground": StyleEntry(0.8, 0.12),
        "statusBar.background": StyleEntry(0.52, 0.85),
        "statusBar.foreground": StyleEntry(0.96, 0.14),
        "activityBar.background": StyleEntry(0.42, 0.75),
        "activityBar.foreground": StyleEntry(0.92, 0.14),
        "sideBar.background": StyleEntry(0.38, 0.75),
        "sideBar.foreground": StyleEntry(0.92, 0.14),
        "sideBarSectionHeader.background": StyleEntry(0.42, 0.75),
        "sideBarSectionHeader.foreground": StyleEntry(0.92, 0.14),
    },
    "light": {
        "titleBar.activeBackground": StyleEntry(0.72, 0.8),
        "titleBar.activeForeground": StyleEntry(0.12, 0.2),
        "titleBar.inactiveBackground": StyleEntry(0.78, 0.68),
        "titleBar.inactiveForeground": StyleEntry(0.3, 0.14),
        "statusBar.background": StyleEntry(0.68, 0.85),
        "statusBar.foreground": StyleEntry(0.12, 0.2),
        "activityBar.background": StyleEntry(0.8, 0.75),
        "activityBar.foreground": StyleEntry(0.15, 0.16),
        "sideBar.background": StyleEntry(0.83, 0.75),
        "sideBar.foreground": StyleEntry(0.15, 0.16),
        "sideBarSectionHeader.background": StyleEntry(0.8, 0.75),
        "sideBarSectionHeader.foreground": StyleEntry(0.15, 0.16),
    },
    "hcDark": {
        "titleBar.activeBackground": StyleEntry(0.32, 0.85),
        "titleBar.activeForeground": StyleEntry(0.98, 0.1),
        "titleBar.inactiveBackground": StyleEntry(0.26, 0.72),
        "titleBar.inactiveForeground": StyleEntry(0.86, 0.08),
        "statusBar.background": StyleEntry(0.34, 0.9),
        "statusBar.foreground": StyleEntry(0.98, 0.1),
        "activityBar.background": StyleEntry(0.26, 0.8),
        "activityBar.foreground": StyleEntry(0.96, 0.1),
        "sideBar.background": StyleEntry(0.22, 0.8),
        "sideBar.foreground": StyleEntry(0.96, 0.1),
        "sideBarSectionHeader.background": StyleEntry(0.26, 0.8),
        "sideBarSectionHeader.foreground": StyleEntry(0.96, 0.1),
    },
    "hcLight": {
        "titleBar.activeBackground": StyleEntry(0.84, 0.85),
        "titleBar.activeForeground": StyleEntry(0.08, 0.25),
        "titleBar.inactiveBackground": StyleEntry(0.88, 0.72),
        "titleBar.inactiveForeground": StyleEntry(0.22, 0.15),
        "statusBar.background": StyleEntry(0.82, 0.9),
        "statusBar.foreground": StyleEntry(0.08, 0.25),
        "activityBar.background": StyleEntry(0.89, 0.8),
        "activityBar.foreground": StyleEntry(0.1, 0.2),
        "sideBar.background": StyleEntry(0.92, 0.8),
        "sideBar.foreground": StyleEntry(0.1, 0.2),
        "sideBarSectionHeader.background": StyleEntry(0.89, 0.8),
        "sideBarSectionHeader.foreground": StyleEntry(0.1, 0.2),
    },
}
