"""
Pure normalization and scoring core. No I/O happens below this package.
"""
