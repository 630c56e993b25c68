"""Domain layer - capability contracts and the variants implementing them."""
