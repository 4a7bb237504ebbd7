"""Core domain: models, dimension derivation, interception and dispatch."""
