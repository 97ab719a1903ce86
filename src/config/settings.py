"""
Configuración de la calculadora y de su ventana.

Este módulo contiene la configuración centralizada: precisión numérica,
tamaño del historial y preferencias de la interfaz.
"""

# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Configuración de la calculadora interactiva
# Responsabilidades:
#   - Almacenar precisión de resultados y límite del historial
#   - Definir tamaño de ventana y ritmo del bucle principal
#   - Gestionar paneles visibles (historial, guía de teclas)
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora.

    Opciones disponibles:
        - Precisión: dígitos significativos de los resultados
        - Historial: número máximo de entradas guardadas
        - Ventana: tamaño del lienzo y retardo entre frames
        - Paneles: historial y guía de teclas visibles o no
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CÁLCULO
        # ====================================================================
        self.significant_digits = 12    # Redondeo de resultados (artefactos float)
        self.history_limit = 50         # Entradas máximas del historial

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_width = 900         # Ancho del lienzo en píxeles
        self.window_height = 640        # Alto del lienzo en píxeles
        self.frame_delay_ms = 30        # Espera de cv2.waitKey por frame
        self.feedback_duration = 20     # Frames que dura un mensaje de feedback

        # ====================================================================
        # PANELES
        # ====================================================================
        self.show_history = False       # Panel de historial abierto al iniciar
        self.show_key_guide = True      # Guía de teclas en la parte inferior
        self.history_row_height = 44    # Alto de cada fila del historial

    def history_rows(self):
        """
        Calcula cuántas entradas del historial caben en el panel.

        Returns:
            int: Filas visibles (máximo 10, una por tecla 0-9)
        """
        available = self.window_height - 120
        return max(1, min(10, available // self.history_row_height))
