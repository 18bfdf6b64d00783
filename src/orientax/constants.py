"""
The `constants` module defines the mathematical, angular and time constants
shared by the time, IERS and frame modules.
"""

import math

# Mathematical Constants

"""
Full turn in radians. Units: *rad*
"""
TWO_PI = 2.0 * math.pi

"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = math.pi / 180.0

"""
Constant to convert radians to degrees. Units: *deg/rad*
"""
RAD2DEG = 180.0 / math.pi

"""
Constant to convert arcseconds to radians. Units: *rad/as*
"""
AS2RAD = 4.848136811095359935899141e-6

"""
Constant to convert milliarcseconds to radians. Units: *rad/mas*
"""
MAS2RAD = AS2RAD / 1e3

"""
Constant to convert microarcseconds to radians. Units: *rad/uas*
"""
UAS2RAD = AS2RAD / 1e6

"""
Arcseconds in a full circle. Units: *as*
"""
TURNAS = 1296000.0

# Time Constants

"""
Seconds in a minute, an hour and a day. Units: *s*
"""
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

"""
Seconds in a Julian year (365.25 days). Units: *s*
"""
SECONDS_PER_JULIAN_YEAR = 31557600

"""
Seconds in a Julian century (36525 days). Units: *s*
"""
SECONDS_PER_JULIAN_CENTURY = 3155760000

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
J2000_JD = 2451545.0

"""
Offset between Julian Date and Modified Julian Date. Units: *days*
"""
JD_MJD_OFFSET = 2400000.5

"""
Modified Julian Date of the J2000.0 epoch. Units: *days*
"""
MJD2000 = 51544.5

"""
Days per Julian century. Units: *days*
"""
DAYS_PER_JULIAN_CENTURY = 36525.0

"""
Seconds between Julian Date zero and J2000. Units: *s*
"""
SECONDS_BETWEEN_JD_AND_J2000 = 211813488000

"""
Seconds between the Modified Julian Date epoch and J2000. Units: *s*
"""
SECONDS_BETWEEN_MJD_AND_J2000 = 4453444800

"""
Seconds between the J1950 epoch and J2000. Units: *s*
"""
SECONDS_BETWEEN_J1950_AND_J2000 = 1577880000

# Earth

"""
Nominal rotation rate of the Earth. Units: *rad/s*

References:

1. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, 2010
"""
ROTATION_RATE_EARTH = 7.2921150e-5
