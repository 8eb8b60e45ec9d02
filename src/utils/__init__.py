"""
Generic utility functions shared across modules.

Currently holds the clock abstraction used to timestamp self-check reports.
"""
