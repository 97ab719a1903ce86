"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos visuales.
"""

import cv2
import numpy as np
import time

from config.settings import CalculatorConfig


# Colores BGR
BACKGROUND = (25, 25, 25)
PANEL = (35, 35, 35)
BORDER = (100, 200, 255)
TEXT = (255, 255, 255)
MUTED = (180, 180, 180)
RESULT = (100, 255, 100)
ERROR = (100, 100, 255)
MEMORY = (0, 200, 255)


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display principal: Expresión previa y operando actual o resultado
        2. Indicador de memoria: Valor guardado con M+ / M-
        3. Panel de historial: Últimos cálculos numerados (tecla 0-9)
        4. Guía de teclas: Atajos disponibles
        5. Feedback: Mensajes temporales de confirmación/error
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else CalculatorConfig()
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)   # Color del feedback

    def new_frame(self):
        """Crea un lienzo vacío del tamaño de la ventana."""
        frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        frame[:] = BACKGROUND
        return frame

    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (por defecto la configurada)
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration if duration else self.config.feedback_duration

    def _fit_scale(self, text, max_width, scale, thickness):
        """Reduce la escala de fuente hasta que el texto quepa en max_width."""
        while scale > 0.6:
            text_w = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, scale, thickness)[0][0]
            if text_w <= max_width:
                break
            scale -= 0.25
        return scale

    def draw_display(self, img, calc):
        """
        Dibuja el display principal de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            calc (Calculator): Instancia de calculadora con estado actual

        Colores del display:
            - Blanco: Número en edición
            - Verde: Resultado de cálculo
            - Rojo: Error
        """
        x, y, w, h = 30, 30, self.width - 60, 220

        # Fondo semi-transparente usando overlay
        overlay = img.copy()
        cv2.rectangle(overlay, (x, y), (x + w, y + h), PANEL, -1)
        cv2.addWeighted(overlay, 0.92, img, 0.08, 0, img)
        cv2.rectangle(img, (x, y), (x + w, y + h), BORDER, 4)

        cv2.putText(img, "CALCULADORA", (x + 20, y + 40),
                   cv2.FONT_HERSHEY_DUPLEX, 1.1, (200, 200, 200), 2)

        # Expresión previa (parte superior del display)
        expr = calc.display_previous
        if expr:
            expr_scale = self._fit_scale(expr, w - 40, 0.9, 2)
            cv2.putText(img, expr, (x + 20, y + 85),
                       cv2.FONT_HERSHEY_SIMPLEX, expr_scale, MUTED, 2)

        display = calc.display_current

        color = TEXT
        if calc.is_error():
            color = ERROR
        elif calc.reset_input:
            color = RESULT

        # Ajustar tamaño de fuente según longitud
        font_scale = 3.5 if len(display) < 8 else 2.5
        font_scale = self._fit_scale(display, w - 60, font_scale, 4)
        cv2.putText(img, display, (x + 20, y + 170),
                   cv2.FONT_HERSHEY_DUPLEX, font_scale, color, 4)

        # Cursor parpadeante (solo mientras se edita)
        if not calc.reset_input and int(time.time() * 2) % 2 == 0:
            text_w = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, font_scale, 4)[0][0]
            cx = x + 30 + text_w
            cv2.line(img, (cx, y + 130), (cx, y + 175), (0, 255, 0), 4)

    def draw_memory(self, img, calc):
        """Dibuja el indicador "M" con el valor guardado en memoria."""
        if not calc.has_memory():
            return

        value = calc.get_memory()
        if abs(value) >= 1e9:
            text = f"M {value:.2e}"
        else:
            text = f"M {value:,.8f}".rstrip('0').rstrip('.')
        cv2.putText(img, text, (self.width - 330, 70),
                   cv2.FONT_HERSHEY_SIMPLEX, 0.8, MEMORY, 2)

    def _history_box(self):
        x, y = self.width // 2, 270
        w, h = self.width // 2 - 30, self.height - y - 70
        return x, y, w, h

    def history_capacity(self):
        """
        Filas del historial que caben en el panel.

        Returns:
            int: Mínimo entre el espacio del panel y config.history_rows()
        """
        h = self._history_box()[3]
        fit = max(1, (h - 50) // self.config.history_row_height)
        return min(fit, self.config.history_rows())

    def draw_history(self, img, history):
        """
        Dibuja el panel de historial sobre la parte derecha de la ventana.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            history (History): Historial de cálculos

        Cada entrada se numera con la tecla que la recupera (0-9).
        """
        x, y, w, h = self._history_box()

        overlay = img.copy()
        cv2.rectangle(overlay, (x, y), (x + w, y + h), PANEL, -1)
        cv2.addWeighted(overlay, 0.90, img, 0.10, 0, img)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 100, 100), 3)

        cv2.putText(img, "HISTORIAL", (x + 20, y + 35),
                   cv2.FONT_HERSHEY_DUPLEX, 0.9, TEXT, 2)

        if len(history) == 0:
            cv2.putText(img, "Sin historial", (x + 20, y + 80),
                       cv2.FONT_HERSHEY_SIMPLEX, 0.65, MUTED, 1)
            return

        row_h = self.config.history_row_height
        rows = min(len(history), self.history_capacity())
        cy = y + 75
        for index in range(rows):
            entry = history[index]
            line = f"{index}: {entry.expression} = {entry.result}"
            scale = self._fit_scale(line, w - 40, 0.65, 1)
            cv2.putText(img, line, (x + 20, cy),
                       cv2.FONT_HERSHEY_SIMPLEX, scale, (200, 200, 200), 1)
            cy += row_h

    def draw_guide(self, img):
        if not self.config.show_key_guide:
            return

        x, y = 30, 270
        guide = [
            "TECLAS",
            "  0-9 .  numeros",
            "  + - * /  operaciones",
            "  Enter =  calcular",
            "  Backspace  borrar",
            "  Esc c  borrar todo",
            "",
            "MEMORIA",
            "  l: MC  r: MR",
            "  p: M+  n: M-",
            "",
            "HISTORIAL",
            "  h: abrir/cerrar  x: vaciar",
        ]

        cy = y + 20
        for label in guide:
            if not label:
                cy += 12
                continue

            # Encabezados de sección (mayúsculas, sin espacios iniciales)
            if label.isupper() and not label.startswith(" "):
                cv2.putText(img, label, (x, cy),
                           cv2.FONT_HERSHEY_DUPLEX, 0.7, BORDER, 2)
                cy += 30
            else:
                cv2.putText(img, label, (x, cy),
                           cv2.FONT_HERSHEY_SIMPLEX, 0.55, (200, 200, 200), 1)
                cy += 24

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal en la parte inferior de la pantalla.

        Efecto:
            - Se desvanece usando alpha blending
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            # Calcular alpha para fade-out suave
            alpha = min(self.feedback_timer / 10.0, 1.0)

            x, y = self.width // 2 - 200, self.height - 25

            overlay = img.copy()
            cv2.rectangle(overlay, (x - 20, y - 40), (x + 420, y + 10), (40, 40, 40), -1)
            cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, self.feedback_msg, (x, y),
                       cv2.FONT_HERSHEY_DUPLEX, 1.0, color, 2)

    def render(self, calc, history_open=False):
        """
        Dibuja un frame completo con el estado actual.

        Returns:
            np.array: Imagen lista para cv2.imshow
        """
        frame = self.new_frame()
        self.draw_display(frame, calc)
        self.draw_memory(frame, calc)
        self.draw_guide(frame)
        if history_open:
            self.draw_history(frame, calc.history)
        self.draw_feedback(frame)
        return frame
