# apps/registry/national_ids/tests/test_checksum.py
from django.test import SimpleTestCase

from apps.registry.national_ids.validators.checksum import (
    IdentityType,
    RejectionReason,
    classify,
    compute_check_digit,
    diagnose,
    is_valid,
    mask_national_id,
)

CITIZEN_ID = '1234567897'
RESIDENT_ID = '2345678904'


def build_id(prefix):
    return prefix + str(compute_check_digit(prefix))


class ClassifyTest(SimpleTestCase):
    def test_citizen_id(self):
        """Тест гражданского идентификатора (начинается с 1)"""
        self.assertEqual(classify(CITIZEN_ID), IdentityType.CITIZEN)

    def test_resident_id(self):
        """Тест идентификатора резидента (начинается с 2)"""
        self.assertEqual(classify(RESIDENT_ID), IdentityType.RESIDENT)

    def test_checksum_mismatch(self):
        """Тест неверной контрольной цифры"""
        # контрольные цифры для этих префиксов: 7 и 4
        self.assertEqual(classify('1234567890'), IdentityType.INVALID)
        self.assertEqual(classify('2345678901'), IdentityType.INVALID)

    def test_check_digit_zero(self):
        """Тест суммы, кратной 10: контрольная цифра 0, а не 10"""
        self.assertEqual(classify('1000000040'), IdentityType.CITIZEN)
        self.assertEqual(classify('2000000030'), IdentityType.RESIDENT)

    def test_unknown_type_digit(self):
        """Тест первой цифры, отличной от 1 и 2"""
        self.assertEqual(classify('3456789012'), IdentityType.INVALID)
        for first in '03456789':
            self.assertEqual(classify(build_id(first + '23456789')), IdentityType.INVALID)

    def test_wrong_length(self):
        """Тест длины, отличной от 10"""
        self.assertEqual(classify('123456789'), IdentityType.INVALID)
        self.assertEqual(classify(CITIZEN_ID + '0'), IdentityType.INVALID)
        self.assertEqual(classify('1'), IdentityType.INVALID)

    def test_non_digit_characters(self):
        """Тест нецифровых символов при правильной длине"""
        self.assertEqual(classify('12345678AB'), IdentityType.INVALID)
        self.assertEqual(classify('+123456789'), IdentityType.INVALID)
        self.assertEqual(classify('-123456789'), IdentityType.INVALID)

    def test_non_ascii_digits(self):
        """Тест цифр вне ASCII (арабско-индийские, полноширинные)"""
        self.assertEqual(classify('١٢٣٤٥٦٧٨٩٧'), IdentityType.INVALID)
        self.assertEqual(classify('１２３４５６７８９７'), IdentityType.INVALID)

    def test_empty_and_none(self):
        """Тест пустой строки, пробелов и None"""
        self.assertEqual(classify(''), IdentityType.INVALID)
        self.assertEqual(classify('   '), IdentityType.INVALID)
        self.assertEqual(classify('\t\n'), IdentityType.INVALID)
        self.assertEqual(classify(None), IdentityType.INVALID)

    def test_non_string_input(self):
        """Тест значения не строкового типа"""
        self.assertEqual(classify(1234567897), IdentityType.INVALID)

    def test_surrounding_whitespace_trimmed(self):
        """Тест пробелов по краям"""
        for padding in (' ', '  ', '\t', '\n', ' \t\n'):
            for candidate in (CITIZEN_ID, RESIDENT_ID, '1234567890', '3456789012', '123456789', ''):
                self.assertEqual(classify(padding + candidate + padding), classify(candidate))

    def test_internal_whitespace_rejected(self):
        """Тест пробелов внутри номера"""
        self.assertEqual(classify('12345 67897'), IdentityType.INVALID)
        self.assertEqual(classify('1234 67897'), IdentityType.INVALID)

    def test_idempotent(self):
        """Тест повторного вызова"""
        for candidate in (CITIZEN_ID, RESIDENT_ID, '1234567890', None):
            self.assertEqual(classify(candidate), classify(candidate))

    def test_type_digit_matches_tag(self):
        """Тест соответствия первой цифры и значения IdentityType"""
        for first in '12':
            for middle in ('00000000', '12345678', '98765432', '55555555'):
                candidate = build_id(first + middle)
                identity_type = classify(candidate)
                self.assertNotEqual(identity_type, IdentityType.INVALID)
                self.assertEqual(int(candidate[0]), identity_type.value)

    def test_is_valid(self):
        """Тест булевой формы"""
        self.assertTrue(is_valid(CITIZEN_ID))
        self.assertTrue(is_valid(RESIDENT_ID))
        self.assertFalse(is_valid('1234567890'))
        self.assertFalse(is_valid('12345678AB'))
        self.assertFalse(is_valid(''))
        self.assertFalse(is_valid(None))


class ComputeCheckDigitTest(SimpleTestCase):
    def test_known_prefixes(self):
        """Тест контрольной цифры для известных префиксов"""
        self.assertEqual(compute_check_digit('123456789'), 7)
        self.assertEqual(compute_check_digit('234567890'), 4)
        self.assertEqual(compute_check_digit('000000000'), 0)
        self.assertEqual(compute_check_digit('100000008'), 1)
        self.assertEqual(compute_check_digit('100000004'), 0)
        self.assertEqual(compute_check_digit('200000003'), 0)

    def test_invalid_prefix(self):
        """Тест префикса неверного формата"""
        for prefix in ('12345678', '1234567890', '12345678A', '١٢٣٤٥٦٧٨٩', '', None):
            with self.assertRaises(ValueError):
                compute_check_digit(prefix)


class DiagnoseTest(SimpleTestCase):
    def test_valid_ids(self):
        """Тест: для валидного номера причины нет"""
        self.assertIsNone(diagnose(CITIZEN_ID))
        self.assertIsNone(diagnose(' ' + RESIDENT_ID + ' '))

    def test_reasons(self):
        """Тест причин отклонения"""
        self.assertEqual(diagnose(None), RejectionReason.BLANK)
        self.assertEqual(diagnose('  '), RejectionReason.BLANK)
        self.assertEqual(diagnose('123456789'), RejectionReason.MALFORMED)
        self.assertEqual(diagnose('12345678AB'), RejectionReason.MALFORMED)
        self.assertEqual(diagnose(1234567897), RejectionReason.MALFORMED)
        self.assertEqual(diagnose('3456789012'), RejectionReason.UNKNOWN_TYPE)
        self.assertEqual(diagnose('1234567890'), RejectionReason.CHECKSUM_MISMATCH)

    def test_agrees_with_classify(self):
        """Тест согласованности diagnose() и is_valid()"""
        samples = [CITIZEN_ID, RESIDENT_ID, '1234567890', '3456789012', '123456789', '', None, ' 1000000040 ', '1000000080']
        for candidate in samples:
            self.assertEqual(diagnose(candidate) is None, is_valid(candidate))


class MaskNationalIdTest(SimpleTestCase):
    def test_mask(self):
        """Тест маскирования для логов"""
        self.assertEqual(mask_national_id('1234567890'), '******7890')
        self.assertEqual(mask_national_id(' 123 '), '***')
        self.assertEqual(mask_national_id(None), '')
