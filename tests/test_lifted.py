import operator
import unittest
from fractions import Fraction

from optionalpy import ABSENT, absent, present, lift, lift_unary, lift_binary, lift_compare
from optionalpy import lifted


class TestLiftedArithmetic(unittest.TestCase):
    def test_add(self):
        self.assertEqual(present(3) + present(4), present(7))
        self.assertEqual(present(3) + absent(), absent())
        self.assertEqual(absent() + present(3), absent())
        self.assertEqual(absent() + absent(), absent())

    def test_all_binary_operators_propagate_absence(self):
        ops = [operator.add, operator.sub, operator.mul, operator.truediv,
               operator.floordiv, operator.mod, operator.pow,
               operator.lshift, operator.rshift, operator.xor]
        for op in ops:
            with self.subTest(op=op.__name__):
                self.assertEqual(op(present(6), present(2)), present(op(6, 2)))
                self.assertIs(op(present(6), absent()), ABSENT)
                self.assertIs(op(absent(), present(2)), ABSENT)
                self.assertIs(op(absent(), absent()), ABSENT)

    def test_bitwise_and_or_on_ints(self):
        self.assertEqual(present(6) & present(3), present(2))
        self.assertEqual(present(6) | present(3), present(7))
        self.assertIs(present(6) & absent(), ABSENT)
        self.assertIs(absent() | present(3), ABSENT)

    def test_delegates_to_native_operator(self):
        self.assertEqual(present("ab") + present("cd"), present("abcd"))
        self.assertEqual(present([1]) * present(2), present([1, 1]))
        self.assertEqual(present(Fraction(1, 3)) + present(Fraction(1, 6)), present(Fraction(1, 2)))

    def test_zero_payload_does_not_short_circuit(self):
        self.assertEqual(present(0) * present(5), present(0))
        self.assertIs(present(0) * absent(), ABSENT)

    def test_native_errors_propagate(self):
        with self.assertRaises(ZeroDivisionError):
            present(1) / present(0)
        self.assertIs(absent() / present(0), ABSENT)

    def test_raw_operands(self):
        self.assertEqual(present(3) + 4, present(7))
        self.assertEqual(4 + present(3), present(7))
        self.assertEqual(10 - present(3), present(7))
        self.assertIs(present(3) + None, ABSENT)
        self.assertIs(None + present(3), ABSENT)

    def test_unary(self):
        self.assertEqual(-present(3), present(-3))
        self.assertEqual(+present(3), present(3))
        self.assertEqual(abs(present(-3)), present(3))
        self.assertEqual(~present(5), present(-6))
        for op in (operator.neg, operator.pos, operator.abs, operator.invert):
            self.assertIs(op(absent()), ABSENT)

    def test_three_argument_pow(self):
        self.assertEqual(pow(present(2), 3, 5), present(3))
        self.assertEqual(pow(present(2), present(10), present(1000)), present(24))
        self.assertIs(pow(present(2), 3, absent()), ABSENT)
        self.assertIs(pow(absent(), 3, 5), ABSENT)
        self.assertEqual(pow(present(2), 3), present(8))


class TestLiftedComparison(unittest.TestCase):
    def test_present_values_compare_natively(self):
        self.assertIs(present(5) > present(3), True)
        self.assertIs(present(5) < present(3), False)
        self.assertIs(present(3) <= present(3), True)
        self.assertIs(present(3) >= present(4), False)

    def test_absent_is_false(self):
        for op in (operator.lt, operator.le, operator.gt, operator.ge):
            with self.subTest(op=op.__name__):
                self.assertIs(op(present(5), absent()), False)
                self.assertIs(op(absent(), present(5)), False)
                self.assertIs(op(absent(), absent()), False)

    def test_comparison_is_not_complementary_under_absence(self):
        a, b = present(1), absent()
        self.assertFalse(a < b)
        self.assertFalse(a >= b)

    def test_raw_operands(self):
        self.assertIs(present(5) > 3, True)
        self.assertIs(3 < present(5), True)
        self.assertIs(present(5) > None, False)

    def test_result_is_plain_bool_not_optional(self):
        self.assertIsInstance(present(1) < present(2), bool)
        self.assertIsInstance(present(1) < absent(), bool)


class TestLiftFunctions(unittest.TestCase):
    def test_lift_binary(self):
        hyp = lift_binary(lambda a, b: (a * a + b * b) ** 0.5)
        self.assertEqual(hyp(present(3), present(4)), present(5.0))
        self.assertIs(hyp(present(3), None), ABSENT)

    def test_lift_unary(self):
        upper = lift_unary(str.upper)
        self.assertEqual(upper(present("a")), present("A"))
        self.assertEqual(upper("b"), present("B"))
        self.assertIs(upper(absent()), ABSENT)

    def test_lift_compare(self):
        same_len = lift_compare(lambda a, b: len(a) == len(b))
        self.assertIs(same_len(present("ab"), present("cd")), True)
        self.assertIs(same_len(present("ab"), absent()), False)

    def test_lift_nary(self):
        calls = []

        def total(*xs):
            calls.append(xs)
            return sum(xs)

        lifted_total = lift(total)
        self.assertEqual(lifted_total(present(1), 2, present(3)), present(6))
        self.assertIs(lifted_total(present(1), absent(), present(3)), ABSENT)
        self.assertEqual(calls, [(1, 2, 3)])

    def test_module_level_operators(self):
        self.assertEqual(lifted.add(present(1), present(2)), present(3))
        self.assertIs(lifted.gt(absent(), present(1)), False)
        self.assertEqual(lifted.add.__name__, "lifted_add")


if __name__ == "__main__":
    unittest.main()
