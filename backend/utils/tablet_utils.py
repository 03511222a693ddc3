import math
from typing import Optional

# expected_tablet_count is stored in a signed 64-bit INTEGER column
MAX_TABLET_COUNT = 2 ** 63


def calculate_expected_tablet_count(received_weight: Optional[float], tablet_weight: Optional[float]) -> Optional[int]:
    """
    Number of whole tablets a press run can yield from the received blend.

    Returns None when either weight is missing, the tablet weight is zero,
    or the quotient is not finite or does not fit the count column.
    """
    if received_weight is None or tablet_weight is None:
        return None
    if tablet_weight == 0:
        return None
    quotient = received_weight / tablet_weight
    if not math.isfinite(quotient) or abs(quotient) >= MAX_TABLET_COUNT:
        return None
    return math.floor(quotient)
