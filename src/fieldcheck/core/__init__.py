"""
Core validation: message templates, models and the Validator.
"""
