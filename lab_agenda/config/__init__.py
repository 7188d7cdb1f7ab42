"""Configuration loading (YAML + JSON schema validation)."""
