"""
Schemas package - pydantic config models
"""
