"""
Shared kernel.

Result values, problem payloads and cross-cutting concerns used by every
bounded context.
"""
