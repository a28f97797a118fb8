"""Constants for geo-computing needs."""

#: Minimum valid latitude.
LAT_MIN = -90.0

#: Maximum valid latitude.
LAT_MAX = 90.0

#: Minimum valid longitude.
LON_MIN = -180.0

#: Maximum valid longitude.
LON_MAX = 180.0