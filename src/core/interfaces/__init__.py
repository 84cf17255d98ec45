"""Interfaces/abstracciones del Core.

Contratos (Protocol) que implementan adaptadores concretos, de modo que el
Core dependa de abstracciones y no de implementaciones.
"""
