"""Level object records.

This package declares the per-version field layouts of every LVD object.
It builds on the codec package and feeds the file envelope.
"""
