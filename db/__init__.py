"""
__init__.py — Package Initialization File
-----------------------------------------

This file marks the directory as a Python package.

Although intentionally left empty, its presence allows Python to recognize the folder
as part of the module structure. Engine and session setup live in `db.db`; each
`*_model.py` module holds the ORM models for one area of the dashboard.

No initialization logic is required at this level.
"""
