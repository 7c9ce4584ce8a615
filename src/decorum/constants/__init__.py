"""Constants shared across Decorum modules."""
