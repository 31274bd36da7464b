"""
Rule-based English syllable estimate.

Counts vowel clusters, then corrects the count with two lists of regex
patterns: SUBTRACT_PATTERNS catch spellings where the clusters over-count
(silent vowels, "-ion", "-ely"), ADD_PATTERNS catch spellings that hide an
extra nucleus (vowel triplets, syllabic "-le", "-ism"). Words the patterns
get wrong entirely live in the exception sets.
"""
import re

# Matched after the trailing "e" is stripped, hence "anyon" and "mayb".
TWO_SYLLABLE_WORDS = frozenset({
    "every", "different", "family", "girl", "girls", "world", "worlds",
    "bein", "being", "something", "mkay", "mayb",
})
THREE_SYLLABLE_WORDS = frozenset({"anyon", "everyon"})

POLYSYLLABLE_MIN = 3

SUBTRACT_PATTERNS = tuple(re.compile(p) for p in (
    r"cial",
    r"tia",
    r"cius",
    r"cious",
    r"giu",             # belgium
    r"ion",
    r"iou",
    r"^every",          # everything, everybody
    r"sia$",
    r".ely$",           # absolutely, but not "ely"
    r"[^szaeiou]es$",   # fates, but not sasses
    r"[^tdaeiou]ed$",   # trapped, but not fated
    r"^ninet",          # nineteen, ninety
    r"^awe",            # awesome
))

ADD_PATTERNS = tuple(re.compile(p) for p in (
    r"ia",
    r"rie[rt]",
    r"dien",
    r"ieth",
    r"iu",
    r"io",
    r"ii",
    r"ienc",            # science, ambience
    r"les?$",
    r"[aeiouym][bp]l$", # -Vble, -mble, -Vple
    r"[aeiou]{3}",
    r"^mc",
    r"ism$",
    r"([^aeiouy])\1l$", # middle, battle, bottle
    r"[^l]lien",        # alien, salient
    r"^coa[dglx].",
    r"[^gq]ua[^auieo]",
    r"dnt$",            # couldn't, wouldn't
    r"uity$",
    r"ie(r|st)$",
    r"[aeiouy]ing",
    r"([cs]h|[cgxz])es$",  # churches, boxes, judges
))

_DROPPED_CHARS_RE = re.compile(r"['‘’()\[\]{}]")
_SEPARATOR_RE = re.compile(r"[\W\d_]+")
_NON_VOWELS_RE = re.compile(r"[^aeiouy]+")


def _count_token(token: str) -> int:
    if token.endswith("e"):
        token = token[:-1]

    if token in TWO_SYLLABLE_WORDS:
        return 2
    if token in THREE_SYLLABLE_WORDS:
        return 3

    adjustment = sum(1 for p in ADD_PATTERNS if p.search(token))
    adjustment -= sum(1 for p in SUBTRACT_PATTERNS if p.search(token))

    if len(token) == 1:
        clusters = 1
    else:
        clusters = sum(1 for run in _NON_VOWELS_RE.split(token) if run)

    return max(1, clusters + adjustment)


def count_syllables(word: str) -> int:
    """
    Estimated syllables in ``word``.

    Apostrophes and brackets are dropped in place ("couldn't" -> "couldnt"),
    any other non-letter splits the word ("well-known" -> "well", "known")
    and the parts are summed. Returns 0 when no letters remain, otherwise
    at least 1.
    """
    normalized = _DROPPED_CHARS_RE.sub("", word.lower())
    tokens = _SEPARATOR_RE.sub(" ", normalized).split()
    return sum(_count_token(token) for token in tokens)


def is_polysyllabic(word: str) -> bool:
    return count_syllables(word) >= POLYSYLLABLE_MIN
