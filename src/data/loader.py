"""Carga y validación de los conjuntos de datos de entrada."""
import pandas as pd
from pathlib import Path
from typing import Dict, List
from abc import ABC, abstractmethod

from ..core.config import COLLAB_CONFIG
from ..core.errors import MalformedRecordError
from ..core.models import ContactRecord, Paper, Statement
from ..utils.logger import get_logger

logger = get_logger(__name__)


class DataValidator(ABC):
    @abstractmethod
    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        pass


class HechosValidator(DataValidator):

    REQUIRED_COLS = ['persona_a', 'persona_b', 'tipo']  # Columnas obligatorias

    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        missing = set(self.REQUIRED_COLS) - set(df.columns)
        if missing:
            raise MalformedRecordError(f"Columnas faltantes en hechos: {sorted(missing)}")

        if df[self.REQUIRED_COLS].isnull().any().any():
            raise MalformedRecordError("Hechos con campos vacíos")

        return df


class ContactosValidator(DataValidator):

    REQUIRED_COLS = ['persona_a', 'persona_b', 'tiempo']  # Columnas obligatorias

    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        missing = set(self.REQUIRED_COLS) - set(df.columns)
        if missing:
            raise MalformedRecordError(f"Columnas faltantes en contactos: {sorted(missing)}")

        if df[['persona_a', 'persona_b']].isnull().any().any():
            raise MalformedRecordError("Contactos con personas vacías")

        tiempos = pd.to_numeric(df['tiempo'], errors='coerce')
        if tiempos.isnull().any() or (tiempos % 1 != 0).any():
            raise MalformedRecordError("Instantes de contacto no enteros")

        df = df.copy()
        df['tiempo'] = tiempos.astype('int64')
        return df


class DataLoader:

    def __init__(self,
                 hechos_path: Path,
                 contactos_path: Path,
                 articulos_path: Path,
                 validators: Dict[str, DataValidator] = None):
        self.hechos_path = Path(hechos_path)
        self.contactos_path = Path(contactos_path)
        self.articulos_path = Path(articulos_path)

        # Validadores por defecto si no se proporcionan
        self.validators = validators or {
            'hechos': HechosValidator(),
            'contactos': ContactosValidator()
        }

    def load_statements(self) -> List[Statement]:
        df = self._load_and_validate(self.hechos_path, self.validators['hechos'])
        hechos = [
            Statement(row.persona_a, row.persona_b, row.tipo)
            for row in df.itertuples(index=False)
        ]
        logger.info(f"{len(hechos)} hechos cargados desde {self.hechos_path}")
        return hechos

    def load_contacts(self) -> List[ContactRecord]:
        df = self._load_and_validate(self.contactos_path, self.validators['contactos'])
        contactos = [
            ContactRecord(row.persona_a, row.persona_b, int(row.tiempo))
            for row in df.itertuples(index=False)
        ]
        logger.info(f"{len(contactos)} contactos cargados desde {self.contactos_path}")
        return contactos

    def load_papers(self) -> List[Paper]:
        """Un artículo por línea: ``titulo:autor1|autor2``; se ignoran líneas vacías."""
        try:
            lineas = self.articulos_path.read_text(encoding='utf-8').splitlines()
        except FileNotFoundError:
            raise FileNotFoundError(f"Archivo no encontrado: {self.articulos_path}")
        except UnicodeDecodeError as e:
            raise MalformedRecordError(f"Error cargando {self.articulos_path}: {e}") from e

        articulos = [Paper.parse(linea.strip(), COLLAB_CONFIG) for linea in lineas if linea.strip()]
        logger.info(f"{len(articulos)} artículos cargados desde {self.articulos_path}")
        return articulos

    def _load_and_validate(self, path: Path, validator: DataValidator) -> pd.DataFrame:
        try:
            df = pd.read_csv(path, dtype={'persona_a': str, 'persona_b': str, 'tipo': str},
                             skipinitialspace=True)
            return validator.validate(df)
        except FileNotFoundError:
            raise FileNotFoundError(f"Archivo no encontrado: {path}")
        except MalformedRecordError:
            raise
        except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as e:
            raise MalformedRecordError(f"Error cargando {path}: {e}") from e
