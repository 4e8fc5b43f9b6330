def wrap_hue(hue):
    """Wrap a hue angle into [0, 360). Never returns a negative value."""
    return ((hue % 360) + 360) % 360


def apply_hue_offset(hue, offset=None):
    """Add a hue offset (may be None or negative) and wrap the result.

    Args:
        hue: Base hue angle in degrees
        offset: Degrees to add, None meaning 0

    Returns:
        Wrapped hue angle in [0, 360)
    """
    return wrap_hue(hue + (offset or 0))
