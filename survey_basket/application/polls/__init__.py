"""
Application layer for the polls bounded context.
"""
