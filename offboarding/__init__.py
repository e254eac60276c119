"""Offboarding workflow service package.

Holds the template catalog, process instantiation, progress aggregation and
the filtering layer used by the HR administration dashboard.
"""
