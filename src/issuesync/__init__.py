"""
issuesync - Keep one tracking issue per item, without duplicates.

Reconciles application-defined items against a remote issue tracker:
finds the issues already filed for an item, closes duplicate open issues,
and either comments on the surviving issue or files a new one.
"""

__version__ = "0.1.0"
