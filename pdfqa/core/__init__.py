"""Core domain logic: ingestion pipeline, QA chain and exceptions."""
