"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase KeyboardCalculatorApp.
"""

import cv2
from core.calculator import Calculator
from core.history import History
from ui.renderer import UIRenderer
from config.settings import CalculatorConfig


WINDOW_NAME = 'Calculadora'

KEY_ESC = 27
KEY_ENTER = (10, 13)
KEY_BACKSPACE = (8, 127)
NO_KEY = 255


# ============================================================================
class KeyboardCalculatorApp:
    """
    Aplicación principal de calculadora por teclado.

    Arquitectura:
        - Calculator: Lógica aritmética y estado
        - History: Registro de cálculos (compartido con Calculator)
        - UIRenderer: Renderizado de interfaz gráfica
        - KeyboardCalculatorApp: Coordinador y loop principal

    La aplicación es dueña de todas las instancias; no hay estado global.
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación y sus componentes.

        Args:
            config (CalculatorConfig): Configuración (opcional)

        La ventana no se abre hasta llamar a run().
        """
        self.config = config if config else CalculatorConfig()

        self.history = History(self.config.history_limit)
        self.calc = Calculator(self.history, self.config.significant_digits)
        self.ui = UIRenderer(self.config.window_width,
                             self.config.window_height, self.config)

        self.history_open = self.config.show_history
        self.running = False

    def process(self, key):
        """
        Procesa una tecla pulsada y actualiza el estado de la calculadora.

        Args:
            key (int): Código de tecla devuelto por cv2.waitKey (& 0xFF)

        Returns:
            bool: False si la tecla pide salir de la aplicación

        Feedback:
            - Color verde: Resultado de cálculo
            - Color naranja: Memoria
            - Color rojo: Error o borrado
        """
        if key == NO_KEY or key < 0:
            return True

        char = chr(key)

        if char == 'q':
            return False

        # ====================================================================
        # HISTORIAL ABIERTO: las cifras recuperan la entrada numerada
        # ====================================================================
        if self.history_open and char.isdigit():
            index = int(char)
            # Solo las entradas dibujadas en el panel
            if index < min(len(self.history), self.ui.history_capacity()):
                entry = self.history[index]
                self.calc.recall_result(entry.result)
                self.ui.show_feedback(f"<- {entry.result}", (0, 255, 255))
                self.history_open = False
            return True

        # ====================================================================
        # NÚMEROS Y PUNTO DECIMAL
        # ====================================================================
        if char.isdigit() or char == '.':
            self.calc.append_digit(char)

        # ====================================================================
        # OPERACIONES (+ - * /)
        # ====================================================================
        elif char in '+-*/':
            self.calc.choose_operator(char)

        # ====================================================================
        # IGUAL (=): Calcular resultado de la expresión
        # ====================================================================
        elif char == '=' or key in KEY_ENTER:
            if self.calc.equals():
                self.ui.show_feedback(f"= {self.calc.display_current}", (0, 255, 0))
            elif self.calc.is_error():
                self.ui.show_feedback("Error", (50, 50, 255))

        elif key in KEY_BACKSPACE:
            self.calc.delete()

        # ESC cierra el historial si está abierto; si no, borra todo
        elif key == KEY_ESC:
            if self.history_open:
                self.history_open = False
            else:
                self.calc.clear()
                self.ui.show_feedback("TODO BORRADO", (50, 50, 255))

        elif char == 'c':
            self.calc.clear()
            self.ui.show_feedback("TODO BORRADO", (50, 50, 255))

        # ====================================================================
        # HISTORIAL
        # ====================================================================
        elif char == 'h':
            self.history_open = not self.history_open

        elif char == 'x':
            self.calc.clear_history()
            self.ui.show_feedback("HISTORIAL VACIO", (50, 50, 255))

        # ====================================================================
        # MEMORIA (MC, MR, M+, M-)
        # ====================================================================
        elif char == 'l':
            self.calc.memory_clear()
            self.ui.show_feedback("MC", (0, 165, 255))

        elif char == 'r':
            if self.calc.memory_recall():
                self.ui.show_feedback("MR", (0, 165, 255))

        elif char == 'p':
            if self.calc.memory_add():
                self.ui.show_feedback("M+", (0, 165, 255))

        elif char == 'n':
            if self.calc.memory_subtract():
                self.ui.show_feedback("M-", (0, 165, 255))

        return True

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar el estado actual en un lienzo nuevo
            2. Mostrar frame
            3. Esperar una tecla (frame_delay_ms) y procesarla
            4. Repetir hasta 'q' o cierre de la ventana
        """
        print("\n" + "="*70)
        print("CALCULADORA")
        print("="*70)
        print("\nNumeros: 0-9 y punto decimal")
        print("Operaciones: + - * /")
        print("Calcular: Enter o =")
        print("Borrar: Backspace (ultimo digito), Esc o c (todo)")
        print("Memoria: l = MC, r = MR, p = M+, n = M-")
        print("Historial: h = abrir/cerrar, x = vaciar, 0-9 = recuperar")
        print("\nPresiona 'q' para salir")
        print("="*70 + "\n")

        cv2.namedWindow(WINDOW_NAME)
        self.running = True

        # ====================================================================
        # BUCLE PRINCIPAL
        # ====================================================================
        while self.running:
            frame = self.ui.render(self.calc, self.history_open)
            cv2.imshow(WINDOW_NAME, frame)

            key = cv2.waitKey(self.config.frame_delay_ms) & 0xFF
            if not self.process(key):
                break

            # Ventana cerrada con el ratón
            if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                break

        # ====================================================================
        # LIMPIEZA Y CIERRE
        # ====================================================================
        self.running = False
        cv2.destroyAllWindows()
        print(f"\nOK Aplicacion cerrada correctamente ({len(self.history)} calculos)")
