"""FastAPI backend for parameter validation."""
