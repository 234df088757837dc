"""
Core models, validators and rules for wristband codes.
"""
