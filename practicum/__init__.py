"""Small modules: 3D vectors and shapes, OBJ scene reading, a stack, a strict cursor, a result container, sorting, word counting, War and reproducible random data."""

__version__ = "0.1.0"