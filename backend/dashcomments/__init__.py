"""Dashboard comments backend."""
