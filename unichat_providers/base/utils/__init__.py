"""Small, side-effect-free helpers shared across adapters."""
