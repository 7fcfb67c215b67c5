"""
Shared error handling package.

Centralizes failure-to-HTTP mapping so that failed results and framework
errors are consistently translated into problem responses.
"""
