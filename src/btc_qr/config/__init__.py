"""Configuration — pydantic-settings models backed by env vars and YAML."""
