"""String analysis.

The analysis layer derives a canonical fingerprint and a structural property record from raw
text. It is pure: no I/O, no shared state.
"""
