# ============================================================================
# IMPORTS - Componentes de la calculadora
# ============================================================================
from app.keyboard_app import KeyboardCalculatorApp   # Bucle principal y teclado
from config.settings import CalculatorConfig         # Precisión, historial, ventana


def main():
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback

    Ejecución:
        python3 src/main.py

    Requisitos:
        - Python 3.9+
        - opencv-python
        - numpy
    """
    try:
        app = KeyboardCalculatorApp(CalculatorConfig())
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    raise SystemExit(main())
