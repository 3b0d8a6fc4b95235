"""
Reference Data

Static configuration for the cost calculation.
"""
