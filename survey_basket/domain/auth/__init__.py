"""
Auth bounded context: domain layer.
"""
