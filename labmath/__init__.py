"""Complex number arithmetic, a complex calculator, and Conway's Game of Life."""

__version__ = "0.1.0"
__all__ = ["complex_number", "complex_calculator", "conways_life"]