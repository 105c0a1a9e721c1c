"""Cross-cutting concerns: configuration, logging, errors, contracts and dependency wiring."""
