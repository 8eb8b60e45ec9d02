"""
Configuration loading and validation for self-check run parameters.
"""
