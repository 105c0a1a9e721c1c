"""Pydantic schemas shared by the engines, the API routes and the CLI tools."""
