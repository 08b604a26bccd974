"""Abstract interfaces for the SOP Revision Review System."""

from .parser import IDocumentParser

__all__ = [
    "IDocumentParser",
]
