from .base import WordRecognizer
from .tesseract_cli import TesseractCliEngine, parse_tsv_words

__all__ = ["WordRecognizer", "TesseractCliEngine", "parse_tsv_words"]
