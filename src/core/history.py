"""
Historial de cálculos realizados.

Este módulo contiene la clase History que guarda los últimos resultados
(el más reciente primero) para poder consultarlos y reutilizarlos.
"""

import time


class HistoryEntry:
    """Un cálculo completado: expresión, resultado y momento."""

    def __init__(self, expression, result, timestamp=None):
        self.expression = expression
        self.result = result
        self.timestamp = timestamp if timestamp is not None else time.time()

    def __eq__(self, other):
        if not isinstance(other, HistoryEntry):
            return NotImplemented
        return (self.expression, self.result, self.timestamp) == \
            (other.expression, other.result, other.timestamp)

    def __repr__(self):
        return f"HistoryEntry({self.expression!r}, {self.result!r})"


# ============================================================================
# CLASE: History
# Propósito: Registro acotado de cálculos
# Responsabilidades:
#   - Añadir entradas al principio (más reciente primero)
#   - Descartar las más antiguas al superar el límite
#   - Permitir consulta por índice y borrado completo
# ============================================================================
class History:
    """
    Historial de cálculos con tamaño máximo.

    Solo se añade desde la calculadora tras un "=" exitoso que tenía
    expresión previa (ej: "12 + 5" → "17"). Calcular un número suelto no
    genera entrada.
    """

    def __init__(self, limit=50):
        """
        Args:
            limit (int): Número máximo de entradas (por defecto 50)
        """
        if limit < 1:
            raise ValueError("el límite del historial debe ser positivo")
        self.limit = limit
        self.entries = []

    def add(self, expression, result):
        """
        Añade un cálculo al principio del historial.

        Returns:
            HistoryEntry: Entrada creada
        """
        entry = HistoryEntry(expression, result)
        self.entries.insert(0, entry)

        # Descartar las más antiguas (al final de la lista)
        del self.entries[self.limit:]
        return entry

    def clear(self):
        """Borra todas las entradas."""
        self.entries = []

    def latest(self):
        """Retorna la entrada más reciente o None si está vacío."""
        return self.entries[0] if self.entries else None

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index):
        return self.entries[index]
