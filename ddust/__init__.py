"""ddust: rules engine for a two-player card game on a 4x4 board."""
