"""
Phrase Generator

Renders an item's name as an English noun phrase: article, quantity word and
singular or plural name.

Plurals are never guessed. An item without an explicit plural gets a bare
suffix that follows the item's case: "s" normally, "S" for an all-caps item.
Irregular nouns must carry their plural form.

One interaction is kept on purpose: suppressing the article also suppresses
the quantity word.
"""

from typing import TYPE_CHECKING, List

from adventure_core import normalize

if TYPE_CHECKING:
    from .components.item import Item


_ONES = [
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
]

_TENS = [
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
]

_SCALES = [
    (10 ** 12, "trillion"),
    (10 ** 9, "billion"),
    (10 ** 6, "million"),
    (1000, "thousand"),
]


def _below_thousand(n: int) -> str:
    words = []
    hundreds, rest = divmod(n, 100)
    if hundreds:
        words.append(f"{_ONES[hundreds]} hundred")
    if rest >= 20:
        tens, ones = divmod(rest, 10)
        words.append(f"{_TENS[tens]}-{_ONES[ones]}" if ones else _TENS[tens])
    elif rest or not hundreds:
        words.append(_ONES[rest])
    return " ".join(words)


def cardinal(n: int) -> str:
    """
    Spell out a non-negative integer.

    Examples:
        0 -> 'zero'
        21 -> 'twenty-one'
        105 -> 'one hundred five'
        2003 -> 'two thousand three'
    """
    if n < 0:
        raise ValueError(f"Cannot spell a negative quantity: {n}")
    if n < 1000:
        return _below_thousand(n)

    words = []
    for scale, name in _SCALES:
        if n >= scale:
            count, n = divmod(n, scale)
            words.append(f"{cardinal(count)} {name}")
    if n:
        words.append(_below_thousand(n))
    return " ".join(words)


def article_for(item: "Item") -> str:
    """Pick the article an item takes."""
    if item.definite:
        return "the"
    return "an" if item.starts_with_vowel else "a"


def name_for(item: "Item") -> str:
    """Singular or plural name for the item's current quantity."""
    if item.quantity == 1:
        name = item.name
    elif item.plural:
        name = item.plural
    else:
        name = item.name + ("S" if item.all_caps else "s")
    return name.upper() if item.all_caps else name


def render(
    item: "Item",
    *,
    all_caps: bool = False,
    as_identifier: bool = False,
    force_article: bool = False,
    force_quantity: bool = False,
    quantity_in_parens: bool = False,
    no_article: bool = False,
    no_quantity: bool = False,
) -> str:
    """
    Render an item as a noun phrase.

    Args:
        item: The item to describe
        all_caps: Upper-case the whole phrase
        as_identifier: Return the normalized identifier form of the phrase
        force_article: Emit an article even where it would be dropped
        force_quantity: Emit the quantity word even for a single item
        quantity_in_parens: Follow the quantity word with the numeral, "two (2)"
        no_article: Drop the article (and, with it, the quantity word)
        no_quantity: Drop the quantity word

    Returns:
        The rendered phrase, e.g. "an apple", "two oofs", "the Tablet"
    """
    parts = []

    singular_countable = item.quantity == 1 and item.quantifiable and not item.proper
    if not no_article and (force_article or singular_countable or item.definite):
        parts.append(article_for(item))

    if not no_quantity and not no_article and (
        force_quantity or (item.quantity != 1 and item.quantifiable)
    ):
        quantity = cardinal(item.quantity)
        if quantity_in_parens:
            quantity = f"{quantity} ({item.quantity})"
        parts.append(quantity)

    parts.append(name_for(item))

    phrase = " ".join(parts)
    if all_caps:
        phrase = phrase.upper()
    if as_identifier:
        return normalize(phrase)
    return phrase


def join_phrases(phrases: List[str]) -> str:
    """
    Join phrases into an English list without an Oxford comma.

    Examples:
        ['x'] -> 'x'
        ['x', 'y'] -> 'x and y'
        ['x', 'y', 'z'] -> 'x, y and z'
    """
    if not phrases:
        return ""
    if len(phrases) == 1:
        return phrases[0]
    return ", ".join(phrases[:-1]) + " and " + phrases[-1]
