"""Fixed dimensions of a ten-pin game."""

PINS = 10
FRAMES = 10
# nine strikes plus three balls in the tenth, or nine open frames plus a spare and bonus
MAX_ROLLS = 21
