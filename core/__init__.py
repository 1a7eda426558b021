"""
__init__.py — Core Package
--------------------------

Query helpers and the small pieces of arithmetic behind each dashboard view.
Every function takes an open SQLAlchemy session; callers own the transaction.
"""
