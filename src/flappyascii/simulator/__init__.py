"""Desktop simulator for Flappy ASCII."""
