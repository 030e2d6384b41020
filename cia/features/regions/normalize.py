import unicodedata


def normalize_for_match(text: str | None) -> str:
    """Lower-case and strip diacritics so "Ngāruawāhia" == "ngaruawahia".

    Idempotent: the output contains no combining marks and is already lower-case.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
