# Helpers for turning ingredient names into comparison keys.

# Small synonyms map: variant -> canonical
SYNONYMS = {
    "aubergine": "eggplant",
    "courgette": "zucchini",
    "capsicum": "bell pepper",
    "scallion": "green onion",
    "spring onion": "green onion",
    "cilantro": "coriander",
    "garbanzo bean": "chickpea",
}

_ES_STEMS = ("x", "z", "ch", "sh", "o", "ss")


def _singularize(word: str) -> str:
    w = word
    if len(w) <= 3:
        return w
    if w.endswith("ies"):
        return w[:-3] + "y"
    if w.endswith("es") and w[:-2].endswith(_ES_STEMS):
        return w[:-2]
    if w.endswith("s") and not w.endswith(("ss", "us")):
        return w[:-1]
    return w


def normalize_name(s: str) -> str:
    """Trim and lowercase an ingredient name."""
    if not s:
        return ""
    return s.strip().lower()


def canonical_name(s: str) -> str:
    """Return the canonical form of an ingredient name.

    Applies `normalize_name`, strips a plural suffix from the last word and
    maps known regional variants onto one name, so "Aubergines" and
    "eggplant" share a key.
    """
    w = normalize_name(s)
    if not w:
        return ""
    words = w.split()
    words[-1] = _singularize(words[-1])
    w = " ".join(words)
    return SYNONYMS.get(w, w)
