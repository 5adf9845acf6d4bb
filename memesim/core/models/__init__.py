"""
Simulator domain models.
"""
