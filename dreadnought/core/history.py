"""
Historical technology curves.

Several formulas scale with the design year to reflect the maturity of
naval technology: early designs are penalised, and designs past the end of
the modelled era fall out of range entirely.
"""

import math

from dreadnought.core.constants import YEAR_MATURE_START, YEAR_MATURE_END


def year_adjustment(year: int) -> float:
    """
    Technology maturity for a design year.

    1.0 from 1890 to 1950 inclusive, ramping down linearly before 1890
    (reaching 0 in 1790) and 0 after 1950.
    """
    if year > YEAR_MATURE_END:
        return 0.0
    if year >= YEAR_MATURE_START:
        return 1.0
    return max(1.0 - (YEAR_MATURE_START - year) / 100.0, 0.0)


def date_factor(year: int) -> float:
    """Square root of the year adjustment, used for gun and shell weights."""
    return math.sqrt(year_adjustment(year))


def early_factor(year: int) -> float:
    """Penalty applied to machinery built before 1890."""
    if year < YEAR_MATURE_START:
        return 1.0 + (YEAR_MATURE_START - year) / 100.0
    return 1.0
