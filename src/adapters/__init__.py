"""Adaptadores: sistema de ficheros, reloj y exportación."""
