#!/usr/bin/env python3
"""
Test Suite for Terafont Key Mapping Module

Covers the key tables and the Gujarati character utility functions in
terafont_mapping.py.

Run tests with:
    python -m pytest test_terafont_mapping.py -v
"""

import unittest

from terafont_mapping import (
    # Tables
    CAPS_MAPPING,
    NOCAPS_MAPPING,
    AMBIGUOUS_MAPPING,
    HALANT_KEY,
    SHORT_I_KEY,
    # Constants
    HALANT,
    SHORT_I_MATRA,
    MATRAS,
    # Utility functions
    is_consonant,
    is_matra,
    is_independent_vowel,
    is_gujarati_char,
    count_gujarati_chars,
    is_mapped_key,
)


class TestKeyTables(unittest.TestCase):
    """
    Test cases for the CAPS / NOCAPS / ambiguous key tables.
    """

    def test_caps_are_consonants(self):
        """Every CAPS key maps to a Gujarati consonant."""
        for key, value in CAPS_MAPPING.items():
            with self.subTest(key=key):
                self.assertTrue(is_consonant(value))

    def test_sample_caps(self):
        self.assertEqual(CAPS_MAPPING['A'], 'બ')
        self.assertEqual(CAPS_MAPPING['S'], 'ક')
        self.assertEqual(CAPS_MAPPING['M'], 'ણ')
        self.assertEqual(CAPS_MAPPING['Z'], 'ર')

    def test_sample_nocaps(self):
        self.assertEqual(NOCAPS_MAPPING['f'], 'ા')
        self.assertEqual(NOCAPS_MAPPING['x'], 'ઋ')
        self.assertEqual(NOCAPS_MAPPING[';'], 'સ')

    def test_halant_and_short_i_keys(self):
        self.assertEqual(NOCAPS_MAPPING[HALANT_KEY], HALANT)
        self.assertEqual(NOCAPS_MAPPING[SHORT_I_KEY], SHORT_I_MATRA)

    def test_tables_do_not_overlap(self):
        """No key has both a CAPS and a NOCAPS meaning."""
        self.assertEqual(set(CAPS_MAPPING) & set(NOCAPS_MAPPING), set())

    def test_ambiguous_pairs(self):
        """Ambiguous keys carry (consonant, matra) pairs."""
        self.assertEqual(AMBIGUOUS_MAPPING['I'], ('ય', 'ી'))
        self.assertEqual(AMBIGUOUS_MAPPING['U'], ('ગ', 'ૂ'))
        for consonant, matra in AMBIGUOUS_MAPPING.values():
            self.assertTrue(is_consonant(consonant))
            self.assertTrue(is_matra(matra))

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            CAPS_MAPPING['A'] = 'ક'
        with self.assertRaises(TypeError):
            NOCAPS_MAPPING['f'] = 'ી'


class TestUtilityFunctions(unittest.TestCase):
    """Test cases for the character class helpers."""

    def test_is_consonant(self):
        self.assertTrue(is_consonant('ક'))
        self.assertTrue(is_consonant('હ'))
        self.assertFalse(is_consonant('ા'))
        self.assertFalse(is_consonant('અ'))
        self.assertFalse(is_consonant('A'))
        self.assertFalse(is_consonant(None))
        self.assertFalse(is_consonant(''))
        self.assertFalse(is_consonant('કક'))

    def test_is_matra(self):
        for char in MATRAS:
            self.assertTrue(is_matra(char))
        self.assertFalse(is_matra(HALANT))
        self.assertFalse(is_matra('ક'))
        self.assertFalse(is_matra(None))

    def test_is_independent_vowel(self):
        self.assertTrue(is_independent_vowel('ઋ'))
        self.assertTrue(is_independent_vowel('અ'))
        self.assertTrue(is_independent_vowel('ઔ'))
        self.assertFalse(is_independent_vowel('ા'))
        self.assertFalse(is_independent_vowel(None))

    def test_is_gujarati_char(self):
        self.assertTrue(is_gujarati_char('ક'))
        self.assertTrue(is_gujarati_char(HALANT))
        self.assertFalse(is_gujarati_char('a'))
        self.assertFalse(is_gujarati_char('ক'))  # Bengali
        self.assertFalse(is_gujarati_char('કા'))

    def test_count_gujarati_chars(self):
        self.assertEqual(count_gujarati_chars("બા 12 ક્ષ"), 5)
        self.assertEqual(count_gujarati_chars(""), 0)

    def test_is_mapped_key(self):
        for key in ('A', 'f', '+', 'I', 'U', ';', '?'):
            self.assertTrue(is_mapped_key(key))
        for key in ('1', ' ', 'a', 'P', '.'):
            self.assertFalse(is_mapped_key(key))


if __name__ == "__main__":
    unittest.main(verbosity=2)
