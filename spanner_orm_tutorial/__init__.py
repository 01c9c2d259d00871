"""
Spanner ORM tutorial.

Shows how SQLModel, through the ``sqlalchemy-spanner`` dialect, works with a
Cloud Spanner emulator: the emulator is started automatically, the sample
database is created and loaded with its schema, and a few related rows are
written and queried back.
"""

__version__ = "0.1.0"
