"""
Naming Policy

Output names for thumbnails and the stored upload are derived from the
primary name by inserting a suffix in front of the extension.
"""

import os


def _extension_start(name: str) -> int:
    """Index of the last dot in the final path element, or -1"""
    dot = name.rfind(".")
    separator = max(name.rfind("/"), name.rfind(os.sep))
    if os.altsep:
        separator = max(separator, name.rfind(os.altsep))
    return dot if dot > separator else -1


def derive_name(name: str, suffix: str) -> str:
    """
    Insert suffix before the extension of name.

    The extension runs from the last dot of the final path element, so a
    dotfile such as ".png" is all extension.

    Example:
        >>> derive_name("photo.jpg", "-small")
        'photo-small.jpg'
        >>> derive_name("noext", "-small")
        'noext-small'
        >>> derive_name("out/photo.png", "-original")
        'out/photo-original.png'
        >>> derive_name(".png", "-small")
        '-small.png'
    """
    dot = _extension_start(name)
    if dot < 0:
        return name + suffix
    return name[:dot] + suffix + name[dot:]
