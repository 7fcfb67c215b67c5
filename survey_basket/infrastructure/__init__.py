"""
Infrastructure layer package.

Contains adapters that implement domain ports using SQLAlchemy Core and
the standard library. No business rules belong here.
"""
