import unittest

from sharing.errors import InvalidParameters, NonInvertibleElementError
from sharing.field import mod_add, mod_inverse, mod_mul, mod_pow, mod_sub


class FieldArithmetic(unittest.TestCase):
    def test_results_are_normalised(self):
        self.assertEqual(mod_add(5, 4, 7), 2)
        self.assertEqual(mod_sub(2, 5, 7), 4)
        self.assertEqual(mod_sub(0, 3, 7), 4)
        self.assertEqual(mod_mul(-3, 2, 7), 1)
        self.assertEqual(mod_pow(3, 0, 7), 1)

    def test_inverse(self):
        self.assertEqual(mod_inverse(3, 7), 5)
        self.assertEqual(mod_inverse(-3, 7), 2)
        p = 2**521 - 1
        a = 123456789123456789
        self.assertEqual(mod_mul(a, mod_inverse(a, p), p), 1)

    def test_inverse_of_zero_fails(self):
        with self.assertRaises(NonInvertibleElementError):
            mod_inverse(0, 7)
        with self.assertRaises(ArithmeticError):
            mod_inverse(14, 7)

    def test_inverse_with_shared_factor_fails(self):
        """Non-prime modulus: 4 and 8 share a factor"""
        with self.assertRaises(ArithmeticError):
            mod_inverse(4, 8)

    def test_negative_exponent(self):
        self.assertEqual(mod_pow(3, -1, 7), 5)
        self.assertEqual(mod_pow(3, -2, 7), 4)

    def test_modulus_must_exceed_one(self):
        with self.assertRaises(InvalidParameters):
            mod_add(1, 1, 1)
        with self.assertRaises(InvalidParameters):
            mod_inverse(1, 0)


if __name__ == '__main__':
    unittest.main()
