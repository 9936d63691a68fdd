"""Punto de entrada para ejecutar la línea de comandos desde el código fuente.

Instalado el paquete, el mismo comando está disponible como
`chemuson-moldata`.

Ejemplo:
    python src/main.py --carbons 4 --substituent 1:HALIDE:Cl
"""

import sys
import os

# Aseguramos que Python encuentre los módulos dentro de `src` al ejecutar
# el archivo directamente.
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from chemio.cli import main

if __name__ == "__main__":
    sys.exit(main())
