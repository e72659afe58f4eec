"""Desktop simulator for playing the engine interactively."""
