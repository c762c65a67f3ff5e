"""Trailcode -- reversible byte <-> geodesic path codec.

Encodes arbitrary binary data as a walk across the Earth's surface: every
byte becomes one line segment (a distance in meters and a compass bearing)
starting from a fixed origin. The walk can be written out as a GeoJSON
line-string or as plain walking directions, and a GeoJSON walk decodes back
to the exact original bytes.
"""
