"""
Módulo de configuración para la calculadora.
Contiene la configuración de precisión, historial y ventana.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']
