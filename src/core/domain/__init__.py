"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2), los errores y el
  cálculo de dígitos verificadores.
- El dominio no conoce DNS, CLI ni SDKs: solo conceptos del problema.
"""
