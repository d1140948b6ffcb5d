"""Configuración inmutable de los motores de grafos."""
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Paths:

    DATA_DIR: Path = Path('data')

    @property
    def hechos(self) -> Path:
        return self.DATA_DIR / 'hechos.csv'

    @property
    def contactos(self) -> Path:
        return self.DATA_DIR / 'contactos.csv'

    @property
    def articulos(self) -> Path:
        return self.DATA_DIR / 'articulos.txt'


@dataclass(frozen=True)
class TracingConfig:

    incubation_window: int = 60  # Minutos hasta poder contagiar


@dataclass(frozen=True)
class CollaborationConfig:

    reference_author: str = 'Paul Erdös'
    paper_separator: str = ':'
    author_separator: str = '|'


# Singleton instances
PATHS = Paths()
TRACING_CONFIG = TracingConfig()
COLLAB_CONFIG = CollaborationConfig()
