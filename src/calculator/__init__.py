"""
Integer calculator: scalar operations, element-wise operations, and self-checks.
"""
