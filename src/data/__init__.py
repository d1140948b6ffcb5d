"""Data module - carga de hechos, contactos y artículos."""

from .loader import DataLoader

__all__ = ['DataLoader']
