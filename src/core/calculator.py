"""
Lógica de calculadora aritmética básica.

Este módulo contiene la clase Calculator que gestiona la construcción
incremental de expresiones matemáticas, su evaluación y la memoria.
"""

import math

from .expression import (
    OPERATORS,
    EvaluationError,
    Numeral,
    Operator,
    evaluate_tokens,
    format_result,
)
from .history import History


ERROR = "Error"
DIGITS = frozenset("0123456789.")


# ============================================================================
# CLASE: Calculator
# Propósito: Acumular pulsaciones y evaluar la expresión resultante
# Responsabilidades:
#   - Construir el operando actual dígito por dígito
#   - Acumular la expresión previa como secuencia de tokens
#   - Evaluar con precedencia de operadores (sin eval())
#   - Gestionar memoria (MC, MR, M+, M-) e historial
# ============================================================================
class Calculator:
    """
    Lógica de calculadora aritmética con construcción incremental.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en current_operand
        2. Usuario selecciona operación → current_operand y el operador
           pasan a la expresión previa (pending)
        3. Usuario repite hasta completar expresión (ej: "12 + 5 * 3")
        4. Usuario presiona = → se evalúa la expresión completa

    Variables de estado:
        - current_operand: Operando en edición o último resultado ("Error")
        - pending: Tokens de la expresión previa, siempre acaba en operador
        - input_started: Ya se tecleó algo del operando actual
        - reset_input: El siguiente dígito empieza un operando nuevo
        - memory: Registro de memoria (0 = vacío)

    Todas las operaciones retornan True si modificaron el estado.
    """

    def __init__(self, history=None, significant_digits=12):
        """
        Inicializa calculadora en estado vacío.

        Args:
            history (History): Historial donde registrar cálculos (opcional)
            significant_digits (int): Precisión de los resultados
        """
        self.history = history if history is not None else History()
        self.significant_digits = significant_digits
        self.memory = 0.0
        self.clear()

    # ========================================================================
    # CONSULTA DE ESTADO
    # ========================================================================
    @property
    def previous_operand(self):
        """Expresión previa como texto (ej: "12 + 5 *")."""
        return " ".join(str(token) for token in self.pending)

    @property
    def display_current(self):
        return self.current_operand

    @property
    def display_previous(self):
        return self.previous_operand

    def get_current_operand(self):
        return self.current_operand

    def get_previous_operand(self):
        return self.previous_operand

    def is_error(self):
        return self.current_operand == ERROR

    # ========================================================================
    # EDICIÓN
    # ========================================================================
    def clear(self):
        """
        Borra TODO el estado de la calculadora (C = Clear).

        La memoria y el historial se conservan, igual que en calculadoras
        físicas donde "C" no toca "M".
        """
        self.current_operand = "0"
        self.pending = []
        self.input_started = False
        self.reset_input = False
        return True

    def delete(self):
        """
        Borra el último carácter del operando actual (← = Backspace).

        Comportamiento:
            - Tras un resultado o error: equivale a clear()
            - Si el operando es "0": no hace nada
            - Si queda vacío o solo "-": vuelve a "0"
        """
        if self.reset_input:
            return self.clear()
        if self.current_operand == "0":
            return False

        self.current_operand = self.current_operand[:-1]
        if self.current_operand in ("", "-"):
            self.current_operand = "0"
            self.input_started = False
        return True

    def append_digit(self, symbol):
        """
        Añade un dígito o el punto decimal al operando actual.

        Args:
            symbol (str): "0"-"9" o "."

        Returns:
            bool: True si se añadió, False si se rechazó

        Comportamiento:
            - Tras un resultado: empieza un operando nuevo
            - Un solo punto decimal por operando
            - "0" + "7" → "7", "0" + "." → "0."
        """
        if len(symbol) != 1 or symbol not in DIGITS:
            raise ValueError(f"símbolo no válido: {symbol!r}")
        if self.is_error():
            return False

        if self.reset_input:
            self.current_operand = ""
            self.reset_input = False
            self.input_started = True

        if symbol == "." and "." in self.current_operand:
            return False

        if self.current_operand == "":
            # Operando recién vaciado: "." necesita un 0 delante
            self.current_operand = "0." if symbol == "." else symbol
        elif self.current_operand == "0" and symbol != ".":
            self.current_operand = symbol
        else:
            self.current_operand += symbol

        self.input_started = True
        return True

    def choose_operator(self, op):
        """
        Añade una operación matemática a la expresión.

        Args:
            op (str): Operador matemático ("+", "-", "*", "/")

        Returns:
            bool: True si se modificó la expresión

        Casos (por prioridad):
            1. Tras "=": el resultado pasa a ser el primer operando
               ("8" → "8 -")
            2. Sin operando nuevo tras otro operador: se sustituye el
               operador ("5 +" → "5 *")
            3. Normal: se añade operando y operador ("12 +" → "12 + 5 *")
        """
        if op not in OPERATORS:
            raise ValueError(f"operador no válido: {op!r}")
        if self.is_error():
            return False

        # Caso 1: Reutilizar resultado previo como primer operando
        if self.reset_input:
            self.reset_input = False
            self.pending = [Numeral(self.current_operand), Operator(op)]
            self.current_operand = "0"
            self.input_started = False
            return True

        # Caso 2: Cambiar de opinión sobre el operador
        if (not self.input_started and self.pending
                and isinstance(self.pending[-1], Operator)):
            self.pending[-1] = Operator(op)
            return True

        # Caso 3: Añadir operando actual y operador a la expresión
        self.pending.extend([Numeral(self.current_operand), Operator(op)])
        self.current_operand = "0"
        self.input_started = False
        return True

    def equals(self):
        """
        Evalúa la expresión completa y deja el resultado en el display.

        Returns:
            bool: True si el cálculo tuvo éxito

        Proceso:
            1. Completa la expresión con el operando actual
            2. Evalúa con precedencia (shunting-yard + pila postfija)
            3. Formatea a 12 dígitos significativos
            4. Registra en historial si había expresión previa

        Errores (división por cero, desbordamiento, expresión mal formada):
            el display pasa a "Error" y el historial no cambia.
        """
        if self.is_error():
            return False

        tokens = self.pending + [Numeral(self.current_operand)]
        expression = " ".join(str(token) for token in tokens)

        try:
            value = evaluate_tokens(tokens)
            result = format_result(value, self.significant_digits)
        except EvaluationError:
            self.current_operand = ERROR
            self.pending = []
            self.reset_input = True
            return False

        if self.pending:
            self.history.add(expression, result)

        self.current_operand = result
        self.pending = []
        self.reset_input = True
        self.input_started = False
        return True

    def recall_result(self, result):
        """
        Carga un resultado del historial como valor terminado.

        Args:
            result (str): Texto del resultado (ej: "17")
        """
        self.current_operand = result
        self.pending = []
        self.input_started = True
        self.reset_input = True
        return True

    def clear_history(self):
        """Borra todas las entradas del historial."""
        self.history.clear()
        return True

    # ========================================================================
    # MEMORIA (MC, MR, M+, M-)
    # ========================================================================
    def _current_value(self):
        """Valor numérico del operando actual o None si es "Error" o no finito."""
        try:
            value = float(self.current_operand)
        except ValueError:
            return None
        return value if math.isfinite(value) else None

    def _round(self, value):
        return float(format_result(value, self.significant_digits))

    def memory_clear(self):
        self.memory = 0.0
        return True

    def memory_recall(self):
        """
        Copia la memoria al operando actual (MR).

        Sin efecto si la memoria está vacía o el display muestra "Error".
        El valor recuperado se puede seguir editando.
        """
        if not self.has_memory() or self.is_error():
            return False
        self.current_operand = format_result(self.memory,
                                             self.significant_digits)
        self.input_started = True
        self.reset_input = False
        return True

    def _store_memory(self, sign):
        """
        Suma (sign=1) o resta (sign=-1) el operando actual a la memoria.

        Si el operando o el nuevo valor no es finito, la memoria no cambia.
        """
        value = self._current_value()
        if value is None:
            return False
        try:
            self.memory = self._round(self.memory + sign * value)
        except EvaluationError:
            return False
        return True

    def memory_add(self):
        return self._store_memory(1)

    def memory_subtract(self):
        return self._store_memory(-1)

    def get_memory(self):
        return self.memory

    def has_memory(self):
        return self.memory != 0
