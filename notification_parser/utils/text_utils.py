"""Text normalization helpers shared by the extraction passes."""
import unicodedata


def normalize_text(text: str) -> str:
    """Compose Vietnamese diacritics (NFC) so keyword matching sees one form."""
    return unicodedata.normalize("NFC", text)


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]
