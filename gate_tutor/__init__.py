"""GATE Tutor backend."""
