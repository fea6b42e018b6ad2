"""Core primitives: enums, errors, configuration, digest helper."""
