"""Domain layer: units, classification and body metric formulas."""
