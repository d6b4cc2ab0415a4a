#!/usr/bin/env python3
"""
Terafont to Unicode Converter Module

This module converts Gujarati text typed in the legacy Terafont keyboard
encoding into standard Unicode Gujarati. The conversion runs in fixed
stages, each one a plain string -> string function:

1. Base decoding - each Terafont key becomes its Unicode character. The
   ambiguous keys I and U are resolved from the surrounding characters.
2. Short-i reordering - the pre-base vowel sign િ is moved in front of the
   consonant (or conjunct) it is attached to
3. Halant cleanup - runs of halants collapse to one
4. Conjunct formation - legacy conjunct spellings are corrected
5. Short-i reordering again, for conjuncts formed in step 4
6. Short-i fix across the standard conjuncts and their trailing matras

Every stage is total: characters that are not Terafont keys pass through
unchanged, nothing is ever rejected.
"""

import re
from collections import Counter

from terafont_mapping import (
    AMBIGUOUS_MAPPING,
    CAPS_MAPPING,
    GUJARATI_CONSONANTS,
    GUJARATI_INDEPENDENT_VOWELS,
    HALANT,
    HALANT_KEY,
    KSSA,
    LEGACY_KSSA,
    NOCAPS_MAPPING,
    SHORT_I_KEY,
    SHORT_I_MATRA,
    STANDARD_CONJUNCTS,
    is_consonant,
    is_independent_vowel,
    is_mapped_key,
    is_matra,
)

# Base unit the short-i matra attaches to: a vowel or consonant,
# optionally extended into a conjunct by (halant + consonant) pairs
_BASE_UNIT = (
    rf'(?:(?:{GUJARATI_INDEPENDENT_VOWELS}|{GUJARATI_CONSONANTS})'
    rf'(?:{HALANT}{GUJARATI_CONSONANTS})*)'
)

_SHORT_I_PATTERN = re.compile(rf'({_BASE_UNIT}?){SHORT_I_MATRA}')

_CONJUNCT_SHORT_I_PATTERN = re.compile(
    '(' + '|'.join(STANDARD_CONJUNCTS) + ')([ાીુૂેો]*)' + SHORT_I_MATRA
)

_HALANT_RUN_PATTERN = re.compile(f'{HALANT}+')

# Standard conjunct -> canonical representation
CANONICAL_CONJUNCTS = tuple((conjunct, conjunct) for conjunct in STANDARD_CONJUNCTS)


# =============================================================================
# Stage 1: Base Decoding
# =============================================================================

def _resolve_ambiguous(char: str, next_char, previous, after_halant: bool) -> str:
    """
    Pick the consonant or matra reading of an ambiguous key (I or U).

    Rules, first match wins:
        - next key is the short-i key: consonant (two matras can't follow
          each other, and િ needs a consonant)
        - previous output is િ: matra
        - previous output is an independent vowel: matra
        - right after a halant, at the start of text, or after anything
          that is neither a consonant nor a matra: consonant
        - otherwise: matra
    """
    consonant, matra = AMBIGUOUS_MAPPING[char]

    if next_char == SHORT_I_KEY:
        return consonant

    if previous == SHORT_I_MATRA:
        return matra

    if is_independent_vowel(previous):
        return matra

    if after_halant or previous is None or (
        not is_consonant(previous) and not is_matra(previous)
    ):
        return consonant
    return matra


def decode_base(text: str) -> str:
    """
    Translate Terafont keys to Unicode Gujarati, one character at a time.

    Example:
        "Af" -> "બા"
        "Il" -> "યિ"   (I before l is always the consonant ય)
        "xU" -> "ઋૂ"   (U after an independent vowel is the matra ૂ)

    Args:
        text: Terafont encoded text

    Returns:
        Unicode text in logical key order (no reordering yet)
    """
    out = []
    previous = None
    after_halant = False

    for i, char in enumerate(text):
        next_char = text[i + 1] if i + 1 < len(text) else None

        if char == HALANT_KEY:
            emitted = HALANT
            out.append(emitted)
            previous = emitted
            after_halant = True
            continue

        if char in AMBIGUOUS_MAPPING:
            emitted = _resolve_ambiguous(char, next_char, previous, after_halant)
        elif char in CAPS_MAPPING:
            emitted = CAPS_MAPPING[char]
        elif char in NOCAPS_MAPPING:
            emitted = NOCAPS_MAPPING[char]
        else:
            # Passthrough
            emitted = char

        out.append(emitted)
        previous = emitted
        after_halant = False

    return ''.join(out)


# =============================================================================
# Stage 2/5: Short-i Reordering
# =============================================================================

def reorder_matra_i(text: str) -> str:
    """
    Move the short-i matra (િ) in front of the base it follows.

    The base is an independent vowel or consonant, with any following
    (halant + consonant) pairs so a whole conjunct moves together.

    Example:
        "કિ" -> "િક"
        "સ્તિ" -> "િસ્ત"

    Args:
        text: Unicode text

    Returns:
        Text with every short-i matra moved before its base
    """
    if not text:
        return text

    return _SHORT_I_PATTERN.sub(SHORT_I_MATRA + r'\1', text)


def normalize_prebase_i_clusters(text: str) -> str:
    """
    Move the short-i matra in front of a standard conjunct and the
    matras trailing it.

    Example:
        "ક્ષાિ" -> "િક્ષા"
    """
    if not text:
        return text

    return _CONJUNCT_SHORT_I_PATTERN.sub(SHORT_I_MATRA + r'\1\2', text)


# =============================================================================
# Stage 3: Halant Cleanup
# =============================================================================

def normalize_halants(text: str) -> str:
    """Collapse runs of consecutive halants into a single halant."""
    if not text:
        return text

    return _HALANT_RUN_PATTERN.sub(HALANT, text)


# =============================================================================
# Stage 4: Conjunct Formation
# =============================================================================

def apply_conjuncts(text: str) -> str:
    """
    Rewrite consonant + halant + consonant sequences to their conjunct form.

    The Terafont legacy spelling ક્ણ is corrected to ક્ષ first. The standard
    conjuncts are then rewritten to their canonical form, which today is
    the decomposed sequence itself; this is where ligature code points
    would be substituted for targets that need them.

    Args:
        text: Unicode text after halant cleanup

    Returns:
        Text with conjuncts in canonical form
    """
    if not text:
        return text

    text = text.replace(LEGACY_KSSA, KSSA)

    for conjunct, canonical in CANONICAL_CONJUNCTS:
        text = text.replace(conjunct, canonical)

    return text


# =============================================================================
# Master Pipeline
# =============================================================================

# Passes run after decode_base, in this exact order. reorder_matra_i
# appears twice: conjunct formation can leave a matra behind a new cluster.
PIPELINE = (
    reorder_matra_i,
    normalize_halants,
    apply_conjuncts,
    reorder_matra_i,
    normalize_prebase_i_clusters,
)


def convert(text: str) -> str:
    """
    Convert Terafont encoded text to Unicode Gujarati.

    Example:
        "A"   -> "બ"
        "Af"  -> "બા"
        "S+M" -> "ક્ષ"

    Args:
        text: Terafont encoded text (may be empty)

    Returns:
        Unicode Gujarati text; unknown characters are kept as they are
    """
    if not text:
        return text

    result = decode_base(text)
    for fix in PIPELINE:
        result = fix(result)

    return result


# =============================================================================
# Conversion Report
# =============================================================================

def find_unmapped_characters(text: str) -> Counter:
    """
    Count the characters that have no Terafont meaning.

    These are passed through unchanged by decode_base. Whitespace is not
    counted.

    Args:
        text: Terafont encoded text

    Returns:
        Counter of character -> occurrences
    """
    if not text:
        return Counter()

    return Counter(c for c in text if not c.isspace() and not is_mapped_key(c))
