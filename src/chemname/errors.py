"""Excepciones del motor de nomenclatura IUPAC-lite."""


class ChemNameNotSupported(Exception):
    """La molécula queda fuera del subconjunto que el motor sabe nombrar."""


class ChemNameInternalError(Exception):
    """Error inesperado del motor al recorrer un grafo soportado."""
