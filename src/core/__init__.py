"""Shared fixturekit foundations.

This module holds configuration, logging, errors and value adaptation.
Higher layers build typed fixture access on top of it.
"""
