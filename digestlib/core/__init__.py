"""Core types for digestlib: exceptions, settings and configuration models."""
