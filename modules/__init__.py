"""
Modules package - xoshiro family reference engine, fixture format and harness
"""
