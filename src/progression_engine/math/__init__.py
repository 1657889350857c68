"""Pure numeric helpers: rounding, strength metrics, unit conversion."""
