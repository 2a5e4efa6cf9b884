"""Typed fixture access layer.

This module holds fixture values loaded for a test and hands them out
as typed objects, leniently or strictly as the caller prefers.
"""
