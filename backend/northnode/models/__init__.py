"""ORM models for persisted governance configuration."""
