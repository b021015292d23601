"""vite3 -- interactive scaffolder for Vite + three.js projects."""

__version__ = "1.0.0"
