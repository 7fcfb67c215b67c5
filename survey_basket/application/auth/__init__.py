"""
Application layer for the auth bounded context.
"""
