"""Versioned binary codec machinery.

This package reads and writes the primitive and versioned wire types.
It provides the record, array, and string codecs used by object layouts.
"""
