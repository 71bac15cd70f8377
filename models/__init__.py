"""
models/ - Domain Layer
======================
Plain record types for every demo, plus the `Result`/`AppError` values
that repositories and services return instead of raising.
"""
