"""
Módulo core con la lógica principal de la calculadora.
Contiene el acumulador de pulsaciones, el evaluador de expresiones
y el historial de cálculos.
"""

from .calculator import Calculator
from .expression import (
    DivisionByZero,
    EvaluationError,
    MalformedExpression,
    ResultOverflow,
    evaluate,
    format_result,
    tokenize,
)
from .history import History, HistoryEntry

__all__ = [
    'Calculator',
    'History',
    'HistoryEntry',
    'EvaluationError',
    'DivisionByZero',
    'MalformedExpression',
    'ResultOverflow',
    'evaluate',
    'format_result',
    'tokenize',
]
