"""Pydantic Schemas — response models for API endpoints."""
