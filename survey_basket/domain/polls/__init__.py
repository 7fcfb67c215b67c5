"""
Polls bounded context: domain layer.
"""
