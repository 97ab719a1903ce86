"""
Evaluación de expresiones aritméticas sin eval().

Este módulo contiene el pipeline puro que reduce una expresión infija a un
número: tokenizar → convertir a postfija (shunting-yard) → evaluar la pila
postfija → formatear el resultado para el display.
"""

import math
import re
from collections import namedtuple
from decimal import Decimal


# ============================================================================
# ERRORES DE EVALUACIÓN
# Todos heredan de EvaluationError para que la calculadora pueda capturarlos
# en un único punto (equals) y convertirlos en el display "Error".
# ============================================================================
class EvaluationError(ArithmeticError):
    """Error genérico al evaluar una expresión."""


class DivisionByZero(EvaluationError, ZeroDivisionError):
    """El divisor de un operador '/' es exactamente 0."""


class MalformedExpression(EvaluationError, ValueError):
    """La secuencia postfija no tiene operandos suficientes o le sobran."""


class ResultOverflow(EvaluationError, OverflowError):
    """El resultado no es un número finito representable."""


# ============================================================================
# TOKENS
# ============================================================================
OPERATORS = ("+", "-", "*", "/")

# Precedencia de operadores: * y / ligan más fuerte que + y -
PRECEDENCE = {
    "*": 3,
    "/": 3,
    "+": 2,
    "-": 2,
}


class Numeral(namedtuple("Numeral", ["text"])):
    """Literal numérico tal como se tecleó (ej: "12", "0.", ".5")."""

    __slots__ = ()

    @property
    def value(self):
        return float(self.text)

    def __str__(self):
        return self.text


class Operator(namedtuple("Operator", ["symbol"])):
    """Operador binario: uno de + - * /."""

    __slots__ = ()

    @property
    def precedence(self):
        return PRECEDENCE[self.symbol]

    def __str__(self):
        return self.symbol


# Número con punto decimal opcional, punto seguido de dígitos, u operador
TOKEN_PATTERN = re.compile(r"\d+\.?\d*|\.\d+|[+\-*/]")


def tokenize(expr):
    """
    Divide una expresión en tokens numéricos y operadores.

    Args:
        expr (str): Expresión infija (ej: "12 + 5 * 3")

    Returns:
        list: Tokens Numeral/Operator en el orden de la expresión

    Comportamiento:
        - Caracteres que no encajan en el patrón se ignoran
        - Cadena vacía o solo espacios → lista vacía
        - No existe menos unario: "-3" produce [Operator("-"), Numeral("3")]
    """
    tokens = []
    for match in TOKEN_PATTERN.finditer(expr):
        raw = match.group(0)
        if not raw.strip():
            continue
        if raw in OPERATORS:
            tokens.append(Operator(raw))
        else:
            tokens.append(Numeral(raw))
    return tokens


def to_postfix(tokens):
    """
    Convierte tokens infijos a notación postfija (RPN) con shunting-yard.

    Args:
        tokens (list): Secuencia de Numeral/Operator en orden infijo

    Returns:
        list: Secuencia en orden postfijo

    Asociatividad izquierda: antes de apilar un operador se desapilan todos
    los de precedencia mayor o igual ("8 - 3 - 2" → 8 3 - 2 -).
    """
    output = []
    stack = []

    for token in tokens:
        if isinstance(token, Operator):
            while stack and stack[-1].precedence >= token.precedence:
                output.append(stack.pop())
            stack.append(token)
        else:
            output.append(token)

    while stack:
        output.append(stack.pop())

    return output


def _apply(symbol, a, b):
    if symbol == "+":
        return a + b
    if symbol == "-":
        return a - b
    if symbol == "*":
        return a * b
    if b == 0:
        raise DivisionByZero("división por cero")
    return a / b


def evaluate_postfix(rpn):
    """
    Evalúa una secuencia postfija con una pila de operandos.

    Args:
        rpn (list): Tokens en orden postfijo

    Returns:
        float: Resultado sin formatear (0.0 si la secuencia está vacía)

    Raises:
        DivisionByZero: Si un divisor es exactamente 0
        MalformedExpression: Si falta un operando o sobran valores
        ResultOverflow: Si el resultado no es finito
    """
    stack = []

    for token in rpn:
        if isinstance(token, Numeral):
            stack.append(token.value)
            continue

        # b es el operando derecho (el último apilado)
        if len(stack) < 2:
            raise MalformedExpression(
                f"faltan operandos para '{token.symbol}'")
        b = stack.pop()
        a = stack.pop()
        stack.append(_apply(token.symbol, a, b))

    if not stack:
        return 0.0
    if len(stack) > 1:
        raise MalformedExpression("operandos sin operador")

    result = stack[0]
    if not math.isfinite(result):
        raise ResultOverflow("resultado fuera de rango")
    return result


def evaluate_tokens(tokens):
    """Evalúa una secuencia infija de tokens ya construida."""
    if not tokens:
        return 0.0
    return evaluate_postfix(to_postfix(tokens))


def evaluate(expr):
    """
    Evalúa una expresión de texto completa.

    Ejemplo:
        evaluate("2 + 3 * 4") → 14.0
    """
    return evaluate_tokens(tokenize(expr))


def format_result(value, significant_digits=12):
    """
    Formatea un resultado numérico para el display.

    Args:
        value (float): Resultado de la evaluación
        significant_digits (int): Dígitos significativos a conservar

    Returns:
        str: Texto decimal canónico

    Formateo:
        - 17.0 → "17" (enteros sin decimales)
        - 1/3 → "0.333333333333" (redondeo a 12 dígitos significativos)
        - 0.1 + 0.2 → "0.3" (elimina artefactos de coma flotante)
        - 1e-7 → "0.0000001" (nunca notación exponencial)
        - -0.0 → "0"
    """
    if not math.isfinite(value):
        raise ResultOverflow("resultado fuera de rango")

    rounded = float(f"{value:.{significant_digits}g}")
    if rounded.is_integer():
        return str(int(rounded))

    # repr() da el texto más corto que identifica al float; Decimal lo
    # pasa a notación posicional sin exponente
    return format(Decimal(repr(rounded)), "f")
