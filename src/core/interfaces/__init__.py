"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos
  (parser del envelope, descarga HTTP).
- El Core depende de estas abstracciones; los tests las sustituyen por fakes.
"""
