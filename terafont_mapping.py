#!/usr/bin/env python3
"""
Terafont Key Mapping Module

This module holds the fixed key tables used to decode Terafont Gujarati
text (a legacy glyph encoding typed on a Latin keyboard) into Unicode, and
the Gujarati character classes the conversion passes work with.

Lookup precedence is CAPS first, then NOCAPS. Two keys (I and U) mean
either a consonant or a vowel sign depending on context; they live in
AMBIGUOUS_MAPPING and are resolved by the decoder, never by plain lookup.
"""

from types import MappingProxyType

# =============================================================================
# Gujarati Character Constants
# =============================================================================

# Halant / virama - suppresses the inherent vowel, joins conjuncts
HALANT = '\u0acd'         # ્

# Short-i vowel sign, the one matra written before its consonant
SHORT_I_MATRA = '\u0abf'  # િ

# Gujarati consonants
# U+0A95-U+0AB9: ka through ha
GUJARATI_CONSONANTS = r'[\u0a95-\u0ab9]'

# Gujarati independent vowels
# U+0A85-U+0A94: a through au
GUJARATI_INDEPENDENT_VOWELS = r'[\u0a85-\u0a94]'

# Dependent vowel signs that can follow a consonant
MATRAS = 'ાિીુૂેોૈૌ'

# Independent vowels that force the matra reading of an ambiguous key
INDEPENDENT_VOWELS = 'ઋઅઆઇઈઉઊએઐઓઔ'

# Conjuncts that get the cross-cluster short-i fix
STANDARD_CONJUNCTS = ('ક્ષ', 'ત્ર', 'શ્ર', 'જ્ઞ')

# Legacy Terafont spelling of ક્ષ (ka + halant + nna)
LEGACY_KSSA = 'ક્ણ'
KSSA = 'ક્ષ'


# =============================================================================
# Key Tables
# =============================================================================

# Consonants - checked FIRST
CAPS_MAPPING = MappingProxyType({
    # A-L row
    'A': 'બ', 'S': 'ક', 'D': 'મ', 'F': 'લ', 'G': 'ન',
    'H': 'જ', 'J': 'વ', 'K': 'છ',

    # Z-M row
    'Z': 'ર', 'X': 'શ', 'C': 'હ', 'B': 'ખ', 'N': 'દ', 'M': 'ણ',

    # Q-P row
    'Q': 'ણ', 'W': 'ધ', 'E': 'ભ', 'R': 'ચ', 'T': 'ત',
    'Y': 'થ', 'O': 'ફ',
})

# Matras, vowels and signs - checked SECOND
NOCAPS_MAPPING = MappingProxyType({
    'f': 'ા', 'l': SHORT_I_MATRA, 'u': 'ુ', 's': 'ે', 'o': 'ો',

    # Punctuation keys that carry letters in Terafont
    ';': 'સ', ',': 'લ',

    'x': 'ઋ',

    '+': HALANT, '?': 'ઞ',
})

# key -> (consonant reading, matra reading)
AMBIGUOUS_MAPPING = MappingProxyType({
    'I': ('ય', 'ી'),
    'U': ('ગ', 'ૂ'),
})

HALANT_KEY = '+'
SHORT_I_KEY = 'l'


# =============================================================================
# Utility Functions
# =============================================================================

def is_consonant(char) -> bool:
    """Check if a character is a Gujarati consonant (U+0A95-U+0AB9)."""
    if not char or len(char) != 1:
        return False
    return 0x0A95 <= ord(char) <= 0x0AB9


def is_matra(char) -> bool:
    """Check if a character is one of the dependent vowel signs in MATRAS."""
    return bool(char) and len(char) == 1 and char in MATRAS


def is_independent_vowel(char) -> bool:
    return bool(char) and len(char) == 1 and char in INDEPENDENT_VOWELS


def is_gujarati_char(char: str) -> bool:
    """Check if a character is in the Gujarati Unicode block (U+0A80-U+0AFF)."""
    if len(char) != 1:
        return False
    code = ord(char)
    return 0x0A80 <= code <= 0x0AFF


def count_gujarati_chars(text: str) -> int:
    """Count the number of Gujarati characters in a string."""
    return sum(1 for c in text if is_gujarati_char(c))


def is_mapped_key(char: str) -> bool:
    """
    Check if a source character has a Terafont meaning.

    Covers the halant key, the ambiguous keys and both key tables.
    Anything else is passed through unchanged by the decoder.
    """
    return (
        char == HALANT_KEY
        or char in AMBIGUOUS_MAPPING
        or char in CAPS_MAPPING
        or char in NOCAPS_MAPPING
    )
