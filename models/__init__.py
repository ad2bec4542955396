"""
models/ - Input Records
=======================
Dataclasses describing what callers hand to the repositories.
Rows coming back from the database stay plain dicts.
"""
