"""Persistence and text conversion layer.

This module reads and writes binary LVD files and their YAML text form.
It powers the conversion CLI and the public SDK helpers.
"""
