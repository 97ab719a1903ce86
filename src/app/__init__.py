"""
Módulo de la aplicación principal.
Contiene la clase que integra todos los componentes.
"""

from .keyboard_app import KeyboardCalculatorApp

__all__ = ['KeyboardCalculatorApp']
