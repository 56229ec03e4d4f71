"""
Helpers for building synthetic dictionary corpora in tests.
"""

from pathlib import Path

FRENCH_WORDS = [
    "maison", "chat", "chien", "pomme", "livre", "soleil", "lune", "arbre",
    "fleur", "voiture", "école", "fromage", "pain", "jardin", "musique",
]

PORTUGUESE_WORDS = [
    "casa", "gato", "cachorro", "livro", "flor", "janela", "porta", "mesa",
    "cadeira", "coração", "pão", "leite", "praia", "cidade",
]

NONSENSE_WORDS = [
    "blorp", "zizzle", "quonk", "frimble", "snark", "woozle", "glarp", "trimp",
    "vexel", "plonk", "zorbit", "kweep", "mumble", "splat", "drizz",
]


def write_dictionary(directory: Path, filename: str, words: list[str], flags: str = "/N") -> Path:
    """Write a Hunspell-style .dic file (count header, one word per line)."""
    directory.mkdir(parents=True, exist_ok=True)
    lines = [str(len(words))] + [f"{w}{flags}" for w in words]
    path = directory / filename
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
