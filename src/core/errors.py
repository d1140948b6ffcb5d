"""Excepciones de los motores de grafos."""


class GraphError(Exception):
    """Error base de los motores."""


class UnknownEntityError(GraphError, KeyError):
    """La consulta nombra una persona, autor o artículo que el grafo no conoce."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} desconocido: {name!r}")

    def __str__(self) -> str:
        # KeyError.__str__ agrega comillas extra
        return self.args[0]


class MalformedRecordError(GraphError, ValueError):
    """Registro de entrada con forma inválida (se rechaza al construir)."""
