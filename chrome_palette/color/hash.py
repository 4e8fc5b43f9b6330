_HASH_START = 5381
_HASH_MASK = 0xFFFFFFFF


def hash_string(value):
    """Hash a string to an unsigned 32-bit integer (djb2, xor variant).

    Works on the UTF-8 bytes of the string so the result does not depend on
    the platform or locale.
    """
    h = _HASH_START
    for byte in value.encode("utf-8"):
        h = ((h * 33) ^ byte) & _HASH_MASK
    return h


def compute_base_hue(identifier, seed=0):
    """Derive the workspace base hue from an identifier and seed.

    The seed is hashed through its decimal string and XORed with the
    identifier hash, so each seed gives an unrelated hue rather than a
    small shift.

    Args:
        identifier: Workspace identifier string
        seed: Integer seed, 0 means no shift

    Returns:
        int: Hue angle in [0, 359]
    """
    workspace_hash = hash_string(identifier)
    seed_hash = hash_string(str(seed)) if seed != 0 else 0
    return ((workspace_hash ^ seed_hash) & _HASH_MASK) % 360
