"""
Generic utility functions shared across modules.

Includes the error classes, argument validators and logging setup.
"""
