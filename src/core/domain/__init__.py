"""Modelos, errores y reglas de coincidencia del dominio.

El dominio no conoce la CLI ni el sistema de ficheros: solo líneas de texto.
"""
