"""Database base class and session factory."""
