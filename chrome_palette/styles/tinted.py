"""
Tinted: barely-there color hints, close to the theme's own neutrals.
"""

from .definitions import StyleEntry

TINTED_STYLE = {
    "dark": {
        "titleBar.activeBackground": StyleEntry(0.3, 0.1),
        "titleBar.activeForeground": StyleEntry(0.88, 0.08),
        "titleBar.inactiveBackground": StyleEntry(0.24, 0.08),
        "titleBar.inactiveForeground": StyleEntry(0.65, 0.06),
        "statusBar.background": StyleEntry(0.32, 0.12),
        "statusBar.foreground": StyleEntry(0.88, 0.08),
        "activityBar.background": StyleEntry(0.22, 0.1),
        "activityBar.foreground": StyleEntry(0.82, 0.06),
        "sideBar.background": StyleEntry(0.19, 0.1),
        "sideBar.foreground": StyleEntry(0.82, 0.06),
        "sideBarSectionHeader.background": StyleEntry(0.22, 0.1),
        "sideBarSectionHeader.foreground": StyleEntry(0.82, 0.06),
    },
    "light": {
        "titleBar.activeBackground": StyleEntry(0.85, 0.1),
        "titleBar.activeForeground": StyleEntry(0.15, 0.08),
        "titleBar.inactiveBackground": StyleEntry(0.9, 0.08),
        "titleBar.inactiveForeground": StyleEntry(0.35, 0.06),
        "statusBar.background": StyleEntry(0.82, 0.12),
        "statusBar.foreground": StyleEntry(0.15, 0.08),
        "activityBar.background": StyleEntry(0.92, 0.1),
        "activityBar.foreground": StyleEntry(0.18, 0.06),
        "sideBar.background": StyleEntry(0.95, 0.1),
        "sideBar.foreground": StyleEntry(0.18, 0.06),
        "sideBarSectionHeader.background": StyleEntry(0.92, 0.1),
        "sideBarSectionHeader.foreground": StyleEntry(0.18, 0.06),
    },
    "hcDark": {
        "titleBar.activeBackground": StyleEntry(0.14, 0.1),
        "titleBar.activeForeground": StyleEntry(0.96, 0.06),
        "titleBar.inactiveBackground": StyleEntry(0.1, 0.08),
        "titleBar.inactiveForeground": StyleEntry(0.8, 0.05),
        "statusBar.background": StyleEntry(0.16, 0.12),
        "statusBar.foreground": StyleEntry(0.96, 0.06),
        "activityBar.background": StyleEntry(0.08, 0.1),
        "activityBar.foreground": StyleEntry(0.92, 0.05),
        "sideBar.background": StyleEntry(0.05, 0.1),
        "sideBar.foreground": StyleEntry(0.92, 0.05),
        "sideBarSectionHeader.background": StyleEntry(0.08, 0.1),
        "sideBarSectionHeader.foreground": StyleEntry(0.92, 0.05),
    },
    "hcLight": {
        "titleBar.activeBackground": StyleEntry(0.94, 0.1),
        "titleBar.activeForeground": StyleEntry(0.08, 0.06),
        "titleBar.inactiveBackground": StyleEntry(0.96, 0.08),
        "titleBar.inactiveForeground": StyleEntry(0.25, 0.05),
        "statusBar.background": StyleEntry(0.92, 0.12),
        "statusBar.foreground": StyleEntry(0.08, 0.06),
        "activityBar.background": StyleEntry(0.97, 0.1),
        "activityBar.foreground": StyleEntry(0.1, 0.05),
        "sideBar.background": StyleEntry(0.99, 0.1),
        "sideBar.foreground": StyleEntry(0.1, 0.05),
        "sideBarSectionHeader.background": StyleEntry(0.97, 0.1),
        "sideBarSectionHeader.foreground": StyleEntry(0.1, 0.05),
    },
}
