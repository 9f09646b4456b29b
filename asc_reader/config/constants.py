# asc_reader/config/constants.py
"""Vocabulary and fixed values of the EyeLink ASC line grammar."""

from __future__ import annotations

from typing import Dict, Tuple


class AscConstants:
    """Markers, tokens and defaults used while parsing ASC logs."""

    # Placeholder written by the tracker for untracked / invalid values
    MISSING_TOKEN: str = "."

    # Line prefix of the EDF converter preamble
    PREAMBLE_PREFIX: str = "**"

    # Recording configuration lines written at the opening of a block
    CONFIG_KEYWORDS: Tuple[str, ...] = (
        "SAMPLES",
        "EVENTS",
        "PUPIL",
        "PRESCALER",
        "VPRESCALER",
    )

    # Event start markers; the matching end markers carry all the data
    EVENT_START_KEYWORDS: Tuple[str, ...] = ("SFIX", "SSACC", "SBLINK")

    # Sample-line flags on the SAMPLES configuration line
    VELOCITY_TOKEN: str = "VEL"
    RESOLUTION_TOKEN: str = "RES"
    HTARGET_TOKEN: str = "HTARGET"
    INPUT_TOKEN: str = "INPUT"
    BUTTONS_TOKEN: str = "BUTTONS"

    # Messages carrying display geometry and mount type
    SCREEN_MESSAGES: Tuple[str, ...] = ("DISPLAY_COORDS", "GAZE_COORDS")
    MOUNT_MESSAGE: str = "ELCLCFG"

    # Format of the "** DATE:" preamble line (whitespace collapsed)
    DATE_FORMAT: str = "%a %b %d %H:%M:%S %Y"

    # How many anomaly locations are kept / logged at WARNING level
    MAX_ANOMALY_EXAMPLES: int = 20

    # Rows held as raw tokens before a builder converts them to numbers
    CHUNK_ROWS: int = 100_000


# ELCLCFG codes -> human readable mount description
MOUNT_TYPES: Dict[str, str] = {
    "MTABLER": "Desktop / Monocular / Head Stabilized",
    "BTABLER": "Desktop / Binocular / Head Stabilized",
    "RTABLER": "Desktop / Monocular / Remote",
    "RBTABLER": "Desktop / Binocular / Remote",
    "AMTABLER": "Arm Mount / Monocular / Head Stabilized",
    "ABTABLER": "Arm Mount / Binocular / Head Stabilized",
    "ARTABLER": "Arm Mount / Monocular / Remote",
    "ABRTABLE": "Arm Mount / Binocular / Remote",
    "BTOWER": "Binocular Tower Mount",
    "TOWER": "Tower Mount",
    "MPRIM": "Primate Mount",
    "BPRIM": "Binocular Primate Mount",
    "MLRR": "Long-Range Mount",
    "BLRR": "Binocular Long-Range Mount",
}
