"""
Static per-language stopword tables.

Each supported language code maps to a frozenset of lowercase words that
are skipped when building a term-frequency map. The tables are built once
at import time and exposed through a read-only mapping, so they can be
shared freely between concurrent callers.

New languages are added by extending ``_RAW_STOPWORDS``; nothing else in
the package needs to change.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from wordhash.data.languages import normalize_language_code


_RAW_STOPWORDS: Mapping[str, Tuple[str, ...]] = {
    "en": (
        "a", "again", "all", "along", "are", "also",
        "an", "and", "as", "at", "but", "by",
        "came", "can", "cant", "couldnt", "did", "didn",
        "didnt", "do", "doesnt", "dont", "ever", "first",
        "from", "have", "her", "here", "him", "how",
        "i", "if", "in", "into", "is", "isnt",
        "it", "itll", "just", "last", "least", "like",
        "most", "my", "new", "no", "not", "now",
        "of", "on", "or", "should", "sinc", "so",
        "some", "th", "than", "this", "that", "the",
        "their", "then", "those", "to", "told", "too",
        "true", "try", "until", "url", "us", "were",
        "when", "whether", "while", "with", "within", "yes",
        "you", "youll",
    ),
    "es": (
        "de", "la", "que", "el", "en", "y",
        "a", "los", "del", "se", "las", "por",
        "un", "para", "con", "no", "una", "su",
        "al", "lo", "como", "más", "pero", "sus",
        "le", "ya", "o", "este", "sí", "porque",
        "esta", "entre", "cuando", "muy", "sin", "sobre",
        "también", "me", "hasta", "hay", "donde", "quien",
        "desde", "todo", "nos", "durante", "todos", "uno",
        "les", "ni", "contra", "otros", "ese", "eso",
        "ante", "ellos", "e", "esto", "mí", "antes",
        "algunos", "qué", "unos", "yo", "otro", "otras",
        "otra", "él", "tanto", "esa", "estos", "mucho",
        "quienes", "nada", "muchos", "cual", "poco", "ella",
        "estar", "estas", "algunas", "algo", "nosotros", "mi",
        "mis", "tú", "te", "ti", "tu", "tus",
        "ellas", "nosotras", "vosotros", "vosotras", "os", "mío",
        "mía", "míos", "mías", "tuyo", "tuya", "tuyos",
        "tuyas", "suyo", "suya", "suyos", "suyas", "nuestro",
        "nuestra", "nuestros", "nuestras", "vuestro", "vuestra", "vuestros",
        "vuestras", "esos", "esas", "estoy", "estás", "está",
        "estamos", "estáis", "están", "esté", "estés", "estemos",
        "estéis", "estén", "estaré", "estarás", "estará", "estaremos",
        "estaréis", "estarán", "estaría", "estarías", "estaríamos", "estaríais",
        "estarían", "estaba", "estabas", "estábamos", "estabais", "estaban",
        "estuve", "estuviste", "estuvo", "estuvimos", "estuvisteis", "estuvieron",
        "estuviera", "estuvieras", "estuviéramos", "estuvierais", "estuvieran", "estuviese",
        "estuvieses", "estuviésemos", "estuvieseis", "estuviesen", "estando", "estado",
        "estada", "estados", "estadas", "estad", "he", "has",
        "ha", "hemos", "habéis", "han", "haya", "hayas",
        "hayamos", "hayáis", "hayan", "habré", "habrás", "habrá",
        "habremos", "habréis", "habrán", "habría", "habrías", "habríamos",
        "habríais", "habrían", "había", "habías", "habíamos", "habíais",
        "habían", "hube", "hubiste", "hubo", "hubimos", "hubisteis",
        "hubieron", "hubiera", "hubieras", "hubiéramos", "hubierais", "hubieran",
        "hubiese", "hubieses", "hubiésemos", "hubieseis", "hubiesen", "habiendo",
        "habido", "habida", "habidos", "habidas", "soy", "eres",
        "es", "somos", "sois", "son", "sea", "seas",
        "seamos", "seáis", "sean", "seré", "serás", "será",
        "seremos", "seréis", "serán", "sería", "serías", "seríamos",
        "seríais", "serían", "era", "eras", "éramos", "erais",
        "eran", "fui", "fuiste", "fue", "fuimos", "fuisteis",
        "fueron", "fuera", "fueras", "fuéramos", "fuerais", "fueran",
        "fuese", "fueses", "fuésemos", "fueseis", "fuesen", "siendo",
        "sido", "tengo", "tienes", "tiene", "tenemos", "tenéis",
        "tienen", "tenga", "tengas", "tengamos", "tengáis", "tengan",
        "tendré", "tendrás", "tendrá", "tendremos", "tendréis", "tendrán",
        "tendría", "tendrías", "tendríamos", "tendríais", "tendrían", "tenía",
        "tenías", "teníamos", "teníais", "tenían", "tuve", "tuviste",
        "tuvo", "tuvimos", "tuvisteis", "tuvieron", "tuviera", "tuvieras",
        "tuviéramos", "tuvierais", "tuvieran", "tuviese", "tuvieses", "tuviésemos",
        "tuvieseis", "tuviesen", "teniendo", "tenido", "tenida", "tenidos",
        "tenidas", "tened",
    ),
}


STOPWORD_TABLES: Mapping[str, FrozenSet[str]] = MappingProxyType(
    {language: frozenset(words) for language, words in _RAW_STOPWORDS.items()}
)

_EMPTY: FrozenSet[str] = frozenset()


def get_stopword_set(language: str = "en") -> FrozenSet[str]:
    """
    Return the stopword set for a language code.

    Unknown languages are not an error: they get an empty set, which
    disables stopword filtering for that language.

    Parameters
    ----------
    language : str
        Language code ("en", "ES") or Snowball name ("english").

    Returns
    -------
    FrozenSet[str]
        Lowercase stopwords for the language.
    """
    return STOPWORD_TABLES.get(normalize_language_code(language), _EMPTY)


def supported_stopword_languages() -> Tuple[str, ...]:
    """Language codes that ship with a stopword table."""
    return tuple(sorted(STOPWORD_TABLES))
