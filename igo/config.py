"""
Configuration constants for the Go rules engine.

Values that may differ between deployments are read from the environment;
everything else is a fixed rule of the game.
"""

import logging
import os

logger = logging.getLogger(__name__)

# Supported board sizes
BOARD_SIZES: tuple[int, ...] = (9, 13, 19)

# Used when IGO_BOARD_SIZE is unset or invalid
FALLBACK_BOARD_SIZE: int = 9


def board_size_from_env(value: str | None) -> int:
    """
    Parse the IGO_BOARD_SIZE setting.

    Args:
        value (str | None): Raw environment value

    Returns:
        int: The configured size, or FALLBACK_BOARD_SIZE if unset or invalid
    """
    if value is None:
        return FALLBACK_BOARD_SIZE
    try:
        size = int(value)
    except ValueError:
        size = None
    if size not in BOARD_SIZES:
        logger.warning(
            "Ignoring IGO_BOARD_SIZE=%r: expected one of %s, using %d",
            value,
            BOARD_SIZES,
            FALLBACK_BOARD_SIZE,
        )
        return FALLBACK_BOARD_SIZE
    return size


# Board size used when no size is given
DEFAULT_BOARD_SIZE: int = board_size_from_env(os.environ.get("IGO_BOARD_SIZE"))

# Compensation awarded to White
KOMI: float = 6.5

# Display guides (hoshi), by board size
STAR_POINTS: dict[int, list[tuple[int, int]]] = {
    9: [(2, 2), (2, 6), (6, 2), (6, 6), (4, 4)],
    13: [(3, 3), (3, 9), (9, 3), (9, 9), (6, 6)],
    19: [
        (3, 3),
        (3, 9),
        (3, 15),
        (9, 3),
        (9, 9),
        (9, 15),
        (15, 3),
        (15, 9),
        (15, 15),
    ],
}
