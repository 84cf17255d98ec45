"""Core: configuración, dominio y servicios."""
