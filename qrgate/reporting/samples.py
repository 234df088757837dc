"""
Sample wristband codes for testing scanners and the parser.
"""

import random

SAMPLE_DATE = "2024-01-15"
SAMPLE_TIME = "10:30"


def generate_sample_code(rng: random.Random | None = None) -> str:
    """
    Generate a random well-formed wristband code.

    Args:
        rng: Random source (defaults to the module-level generator)

    Returns:
        A code such as 4821/1377/52/2024-01-15/10:30/60418275
    """
    rng = rng or random.Random()

    event = rng.randint(1000, 9999)
    location = rng.randint(1000, 9999)
    zone = rng.randint(10, 99)
    wristband_id = rng.randint(10000000, 99999999)

    return f"{event}/{location}/{zone}/{SAMPLE_DATE}/{SAMPLE_TIME}/{wristband_id}"
