"""Complementary terms of the equation of the equinoxes, IAU 2000.

Generated from IERS Conventions 2003, table 5.2e, by
``tools/generate_series_tables.py``. Do not edit by hand.

Each row holds the multipliers of (l, l', F, D, Om, LVe, LE, pA) followed
by the sine and cosine amplitudes in arcseconds.
"""

# fmt: off
E0_TERMS = (
    ((0, 0, 0, 0, 1, 0, 0, 0), 2640.96e-6, -0.39e-6),
    ((0, 0, 0, 0, 2, 0, 0, 0), 63.52e-6, -0.02e-6),
    ((0, 0, 2, -2, 3, 0, 0, 0), 11.75e-6, 0.01e-6),
    ((0, 0, 2, -2, 1, 0, 0, 0), 11.21e-6, 0.01e-6),
    ((0, 0, 2, -2, 2, 0, 0, 0), -4.55e-6, 0.00e-6),
    ((0, 0, 2, 0, 3, 0, 0, 0), 2.02e-6, 0.00e-6),
    ((0, 0, 2, 0, 1, 0, 0, 0), 1.98e-6, 0.00e-6),
    ((0, 0, 0, 0, 3, 0, 0, 0), -1.72e-6, 0.00e-6),
    ((0, 1, 0, 0, 1, 0, 0, 0), -1.41e-6, -0.01e-6),
    ((0, 1, 0, 0, -1, 0, 0, 0), -1.26e-6, -0.01e-6),
    ((1, 0, 0, 0, -1, 0, 0, 0), -0.63e-6, 0.00e-6),
    ((1, 0, 0, 0, 1, 0, 0, 0), -0.63e-6, 0.00e-6),
    ((0, 1, 2, -2, 3, 0, 0, 0), 0.46e-6, 0.00e-6),
    ((0, 1, 2, -2, 1, 0, 0, 0), 0.45e-6, 0.00e-6),
    ((0, 0, 4, -4, 4, 0, 0, 0), 0.36e-6, 0.00e-6),
    ((0, 0, 1, -1, 1, -8, 12, 0), -0.24e-6, -0.12e-6),
    ((0, 0, 2, 0, 0, 0, 0, 0), 0.32e-6, 0.00e-6),
    ((0, 0, 2, 0, 2, 0, 0, 0), 0.28e-6, 0.00e-6),
    ((1, 0, 2, 0, 3, 0, 0, 0), 0.27e-6, 0.00e-6),
    ((1, 0, 2, 0, 1, 0, 0, 0), 0.26e-6, 0.00e-6),
    ((0, 0, 2, -2, 0, 0, 0, 0), -0.21e-6, 0.00e-6),
    ((0, 1, -2, 2, -3, 0, 0, 0), 0.19e-6, 0.00e-6),
    ((0, 1, -2, 2, -1, 0, 0, 0), 0.18e-6, 0.00e-6),
    ((0, 0, 0, 0, 0, 8, -13, -1), -0.10e-6, 0.05e-6),
    ((0, 0, 0, 2, 0, 0, 0, 0), 0.15e-6, 0.00e-6),
    ((2, 0, -2, 0, -1, 0, 0, 0), -0.14e-6, 0.00e-6),
    ((1, 0, 0, -2, 1, 0, 0, 0), 0.14e-6, 0.00e-6),
    ((0, 1, 2, -2, 2, 0, 0, 0), -0.14e-6, 0.00e-6),
    ((1, 0, 0, -2, -1, 0, 0, 0), 0.14e-6, 0.00e-6),
    ((0, 0, 4, -2, 4, 0, 0, 0), 0.13e-6, 0.00e-6),
    ((0, 0, 2, -2, 4, 0, 0, 0), -0.11e-6, 0.00e-6),
    ((1, 0, -2, 0, -3, 0, 0, 0), 0.11e-6, 0.00e-6),
    ((1, 0, -2, 0, -1, 0, 0, 0), 0.11e-6, 0.00e-6),
)

E1_TERMS = (
    ((0, 0, 0, 0, 1, 0, 0, 0), -0.87e-6, 0.00e-6),
)
# fmt: on
