"""
Módulo de interfaz de usuario.
Contiene el renderizador de la ventana de la calculadora.
"""

from .renderer import UIRenderer

__all__ = ['UIRenderer']
