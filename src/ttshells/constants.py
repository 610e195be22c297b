'''
A file for regularly used constants. Such as the Earth's radius.

:copyright:
   The ttshells development team.
:license:
    EUROPEAN UNION PUBLIC LICENCE v. 1.2
   (https://joinup.ec.europa.eu/collection/eupl/eupl-text-eupl-12)

Created: Monday, 19th October 2026 09:12:40 am
Last Modified: Monday, 19th October 2026 02:31:05 pm
'''
from obspy.geodetics import degrees2kilometers


# Earth's radius in km
R_EARTH = 6371.

DEG2KM = degrees2kilometers(1, radius=R_EARTH)
KM2DEG = 1.0/DEG2KM

# Target travel distance increments in km for sampling rays in each layer,
# from the inner core outward to the upper crust
TARGET_RANGE_INCREMENTS = (300., 300., 150., 150., 100., 100.)
