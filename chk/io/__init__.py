"""Reading schema and value documents (YAML or JSON)."""
from .documents import load_document, load_text

__all__ = ["load_document", "load_text"]
