"""Fixed constants: calendar unit sizes, angle conversions, tool limits."""

# Calendar: each unit is a whole multiple of the next finer one
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 6
WEEKS_PER_MONTH = 5
MONTHS_PER_YEAR = 12

DAYS_PER_MONTH = DAYS_PER_WEEK * WEEKS_PER_MONTH
DAYS_PER_YEAR = DAYS_PER_MONTH * MONTHS_PER_YEAR

# Hour of day used as the zero point of the solar time angle
NOON_HOUR = 12

# Angle
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
RIGHT_ANGLE_DEGREES = 90.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0

# Default observer (homeworld) geometry, degrees
DEFAULT_OBSERVER_NAME = 'Thyra'
DEFAULT_LATITUDE = 40.0
DEFAULT_TILT = 23.44

# Defaults and limits for the ephemeris and tracker tools
DEFAULT_INTERVAL = 1.0
DEFAULT_TIME_UNIT = 'hour'
MAX_TABLE_STEPS = 100000
