"""Document comparison for the SOP Revision Review System."""

from .normalization import natural_sort_key, normalize
from .comparator import DocumentComparator, compare_documents, index_sections

__all__ = [
    "natural_sort_key",
    "normalize",
    "DocumentComparator",
    "compare_documents",
    "index_sections",
]
