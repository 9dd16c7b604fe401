"""Body metric formulas and goal projection."""
