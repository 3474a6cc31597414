"""Numeric tolerances shared by the geometry modules."""

# Degeneracy and incidence tolerance for lines and segments.
EPS_LINE = 1e-9

# Below this distance from |cos| == 1 the chord segment switches from the
# closed form to the parabola approximation.
EPS_CHORD = 1e-4
