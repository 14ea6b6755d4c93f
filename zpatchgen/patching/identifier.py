"""Distribution identifiers for patched story files."""

from __future__ import annotations

# Serials in this family are unique per release, so the checksum is left out.
CHECKSUM_FREE_SERIAL_PREFIX = "8"


def derive_identifier(release: int, serial: str, checksum: int) -> str:
    """Build the ``release-serial[-checksum]`` identifier of a build.

    Args:
        release: Release number (0-65535)
        serial: Six-character serial
        checksum: Header checksum (0-65535)

    Returns:
        ``"{release}-{serial}"`` for serials starting with ``8``, otherwise
        ``"{release}-{serial}-{checksum:x}"``
    """
    if serial.startswith(CHECKSUM_FREE_SERIAL_PREFIX):
        return f"{release}-{serial}"
    return f"{release}-{serial}-{checksum:x}"
