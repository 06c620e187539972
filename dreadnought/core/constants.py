"""
dreadnought Physical Constants

Constants shared by the hull, armour, machinery and armament calculators.
Imperial units throughout: feet, inches, long tons, knots, horsepower.
"""

# ==================== Sea Water ====================

# Cubic feet of sea water displaced per long ton
FT3_PER_TON_SEA = 35.0

# ==================== Weight ====================

# Pounds per long ton
POUND2TON = 2240.0

# Weight of one square foot of armour plate one inch thick, in long tons
INCH = 0.0185

# ==================== Unit Conversions ====================

INCH2MM = 25.4
FEET2METERS = 0.3048
SQFEET2SQMETERS = 0.092903
POUND2KG = 0.45359236
HP2KW = 0.746

# ==================== Historical Range ====================

# Years covered at full technology maturity
YEAR_MATURE_START = 1890
YEAR_MATURE_END = 1950

# ==================== Defaults ====================

DEFAULT_YEAR = 1920
DEFAULT_TRIM = 50

# Conventional slot counts on a new design
NUM_BATTERIES = 5
NUM_TORPEDO_MOUNTS = 2
NUM_ASW_MOUNTS = 2

# ==================== Cost ====================

# Pounds sterling per ton of normal displacement
COST_PER_TON_LB = 110.0
DOLLARS_PER_POUND_STERLING = 4.0

SHIP_FILE_EXT = "ship.json"
