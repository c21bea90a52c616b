"""Core infrastructure layer: logging, errors, signals and module wiring."""
