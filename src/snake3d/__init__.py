"""3D snake: grid game state, tick rules and a pygame renderer."""
