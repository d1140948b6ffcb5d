"""Registros de entrada y nodos de los grafos (valores inmutables)."""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .config import COLLAB_CONFIG
from .errors import MalformedRecordError


def _check_name(value, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MalformedRecordError(f"{field_name} debe ser un nombre no vacío, recibido: {value!r}")
    return value


class EventState(Enum):
    ARRIVED = 'ARRIVED'
    LEFT = 'LEFT'


@dataclass(frozen=True)
class Event:
    """Llegada o salida de una persona; clave de nodo en el grafo de eventos."""
    name: str
    state: EventState

    def __repr__(self) -> str:
        return f"Event({self.name!r}, {self.state.value})"


class StatementType(Enum):
    TYPE_ONE = 'TYPE_ONE'  # A se fue antes de que llegara B
    TYPE_TWO = 'TYPE_TWO'  # A y B estuvieron juntos

    @classmethod
    def parse(cls, value: Union[str, 'StatementType']) -> 'StatementType':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise MalformedRecordError(f"Tipo de hecho desconocido: {value!r}") from None


@dataclass(frozen=True)
class Statement:
    """Hecho temporal entre dos personas."""
    person_a: str
    person_b: str
    type: StatementType

    def __post_init__(self):
        _check_name(self.person_a, 'person_a')
        _check_name(self.person_b, 'person_b')
        # Acepta el tag como texto ("TYPE_ONE") además del Enum
        object.__setattr__(self, 'type', StatementType.parse(self.type))


@dataclass(frozen=True)
class ContactRecord:
    """Contacto entre dos personas en un instante (minutos)."""
    person_a: str
    person_b: str
    timestamp: int

    def __post_init__(self):
        _check_name(self.person_a, 'person_a')
        _check_name(self.person_b, 'person_b')
        if self.person_a == self.person_b:
            raise MalformedRecordError(f"Contacto de {self.person_a!r} consigo mismo")
        if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, int):
            raise MalformedRecordError(f"timestamp debe ser entero, recibido: {self.timestamp!r}")


@dataclass(frozen=True)
class Paper:
    """Artículo con su lista ordenada de autores distintos."""
    title: str
    authors: Tuple[str, ...]

    def __post_init__(self):
        _check_name(self.title, 'title')
        authors = tuple(self.authors)
        if not authors:
            raise MalformedRecordError(f"Artículo {self.title!r} sin autores")
        for author in authors:
            _check_name(author, 'author')
        if len(set(authors)) != len(authors):
            raise MalformedRecordError(f"Autores repetidos en {self.title!r}: {authors}")
        object.__setattr__(self, 'authors', authors)

    @classmethod
    def parse(cls, raw: str, config=COLLAB_CONFIG) -> 'Paper':
        """
        Interpreta un artículo codificado como ``titulo:autor1|autor2|...``.

        Raises:
            MalformedRecordError: si falta el separador de título o los autores
        """
        if not isinstance(raw, str) or config.paper_separator not in raw:
            raise MalformedRecordError(f"Artículo mal codificado: {raw!r}")
        title, _, authors = raw.partition(config.paper_separator)
        return cls(title, tuple(a for a in authors.split(config.author_separator)))
