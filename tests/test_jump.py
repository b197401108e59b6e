#!/usr/bin/env python3
"""
Jump polynomial tests.

A real jump stands in for 2^64 or more steps and cannot be checked by
iteration. Instead the shared jump routine is checked on polynomials
x^k (one set bit at position k), which must equal exactly k next()
calls. The published constants are checked against x^(2^k) reduced
modulo the characteristic polynomial, which is recovered from the
generator itself with Berlekamp-Massey, and against golden jumped states
from the C reference code.
"""

import pytest

from modules import xoshiro_engine as engine
from prng_registry import get_variant, list_jump_capable_prngs


def _seed_state(variant):
    return [(0xD1B54A32D192ED03 * (i + 7)) & variant.word_mask for i in range(variant.arity)]


def _single_bit_polynomial(variant, k):
    words = [0] * variant.arity
    words[k // variant.word_width] = 1 << (k % variant.word_width)
    return words


class TestPolynomialProxy:
    """x^k jump == k next() calls."""

    @pytest.mark.parametrize("name", ['xoroshiro128pp', 'xoshiro256pp', 'xoshiro256ss'])
    @pytest.mark.parametrize("k", [0, 1, 2, 17, 63, 64, 67, 127])
    def test_single_bit_equals_k_steps(self, name, k):
        variant = get_variant(name)
        jumped = _seed_state(variant)
        stepped = list(jumped)

        engine.jump_with_polynomial(
            jumped, _single_bit_polynomial(variant, k), variant.next_fn, variant.word_width
        )
        for _ in range(k):
            variant.next_fn(stepped)

        assert jumped == stepped

    @pytest.mark.parametrize("k", [0, 5, 31, 32, 34, 100])
    def test_32_bit_words_consume_32_bits(self, k):
        variant = get_variant('xoshiro128pp')
        jumped = _seed_state(variant)
        stepped = list(jumped)

        engine.jump_with_polynomial(
            jumped, _single_bit_polynomial(variant, k), variant.next_fn, 32
        )
        for _ in range(k):
            variant.next_fn(stepped)

        assert jumped == stepped

    def test_two_bits_xor_two_step_counts(self):
        variant = get_variant('xoroshiro128pp')
        seed = _seed_state(variant)

        jumped = list(seed)
        engine.jump_with_polynomial(jumped, [(1 << 3) | (1 << 10), 0], variant.next_fn)

        after_3 = list(seed)
        for _ in range(3):
            variant.next_fn(after_3)
        after_10 = list(after_3)
        for _ in range(7):
            variant.next_fn(after_10)

        assert jumped == [a ^ b for a, b in zip(after_3, after_10)]

    def test_zero_polynomial_clears_state(self):
        state = [1, 2]
        engine.jump_with_polynomial(state, [0, 0], engine.xoroshiro128pp_next)
        assert state == [0, 0]


class TestPublishedJumps:
    """Properties of the registered jump and long_jump functions."""

    @pytest.mark.parametrize("name", list_jump_capable_prngs())
    def test_jump_uses_registered_constants(self, name):
        variant = get_variant(name)
        a = _seed_state(variant)
        b = list(a)
        variant.jump_fn(a)
        engine.jump_with_polynomial(b, variant.jump_constants, variant.next_fn, variant.word_width)
        assert a == b

        variant.long_jump_fn(a)
        engine.jump_with_polynomial(
            b, variant.long_jump_constants, variant.next_fn, variant.word_width
        )
        assert a == b

    @pytest.mark.parametrize("name", list_jump_capable_prngs())
    def test_jump_commutes_with_next(self, name):
        variant = get_variant(name)
        a = _seed_state(variant)
        b = list(a)

        variant.jump_fn(a)
        variant.next_fn(a)

        variant.next_fn(b)
        variant.jump_fn(b)

        assert a == b

    @pytest.mark.parametrize("name", list_jump_capable_prngs())
    def test_short_and_long_jumps_commute(self, name):
        variant = get_variant(name)
        a = _seed_state(variant)
        b = list(a)

        variant.jump_fn(a)
        variant.long_jump_fn(a)

        variant.long_jump_fn(b)
        variant.jump_fn(b)

        assert a == b

    @pytest.mark.parametrize("name", list_jump_capable_prngs())
    def test_jump_is_linear(self, name):
        variant = get_variant(name)
        a = _seed_state(variant)
        b = [(w * 3 + 1) & variant.word_mask for w in a]
        ab = [x ^ y for x, y in zip(a, b)]
        for jump in (variant.jump_fn, variant.long_jump_fn):
            jump(a)
            jump(b)
            jump(ab)
            assert ab == [x ^ y for x, y in zip(a, b)]

    @pytest.mark.parametrize("name", list_jump_capable_prngs())
    def test_short_and_long_diverge(self, name):
        variant = get_variant(name)
        a = _seed_state(variant)
        b = list(a)
        variant.jump_fn(a)
        variant.long_jump_fn(b)
        assert a != b
        assert a != _seed_state(variant)

    @pytest.mark.parametrize("name", list_jump_capable_prngs())
    def test_zero_state_stays_zero(self, name):
        variant = get_variant(name)
        state = [0] * variant.arity
        variant.jump_fn(state)
        variant.long_jump_fn(state)
        assert state == [0] * variant.arity

    @pytest.mark.parametrize("name", list_jump_capable_prngs())
    def test_jump_functions_are_named_and_documented(self, name):
        variant = get_variant(name)
        for fn, suffix, power in (
            (variant.jump_fn, '_jump', variant.jump_power),
            (variant.long_jump_fn, '_long_jump', variant.long_jump_power),
        ):
            assert fn.__name__ == f"{name}{suffix}"
            assert fn.__qualname__ == fn.__name__
            assert fn is getattr(engine, fn.__name__)
            assert fn.__doc__ == f"Equivalent to 2^{power} calls of {name}_next"

    def test_jump_mutates_in_place(self):
        state = [1, 2]
        original = state
        engine.xoroshiro128pp_jump(state)
        assert state is original
        assert len(state) == 2


# Characteristic polynomial helpers. Polynomials over GF(2) are ints,
# bit i holding the coefficient of x^i.

def _berlekamp_massey(bits):
    """Connection polynomial C(x) and linear complexity of a bit sequence."""
    c, b = 1, 1
    length, m = 0, 1
    for n, bit in enumerate(bits):
        d = bit
        for i in range(1, length + 1):
            d ^= ((c >> i) & 1) & bits[n - i]
        if d == 0:
            m += 1
        elif 2 * length <= n:
            t = c
            c ^= b << m
            length = n + 1 - length
            b = t
            m = 1
        else:
            c ^= b << m
            m += 1
    return c, length


def _characteristic_polynomial(variant):
    """Minimal polynomial of the state transition, recovered from output bits."""
    degree = variant.arity * variant.word_width
    state = _seed_state(variant)
    bits = []
    for _ in range(2 * degree):
        variant.next_fn(state)
        bits.append(state[0] & 1)
    c, length = _berlekamp_massey(bits)
    assert length == degree
    # reciprocal of C(x): coefficient of x^(L - i) is c_i
    return sum(((c >> i) & 1) << (length - i) for i in range(length + 1))


def _poly_mod(a, p):
    degree = p.bit_length() - 1
    while a.bit_length() - 1 >= degree:
        a ^= p << (a.bit_length() - 1 - degree)
    return a


def _poly_mulmod(a, b, p):
    product = 0
    while b:
        if b & 1:
            product ^= a
        b >>= 1
        a <<= 1
    return _poly_mod(product, p)


def _x_pow_two_pow(power, p):
    """x^(2^power) mod p"""
    result = _poly_mod(0b10, p)
    for _ in range(power):
        result = _poly_mulmod(result, result, p)
    return result


def _polynomial_words(poly, variant):
    """Split a polynomial into constant words, with one extra word for x^n."""
    mask = variant.word_mask
    return [(poly >> (variant.word_width * i)) & mask for i in range(variant.arity + 1)]


def _constants_polynomial(constants, word_bits):
    return sum(word << (word_bits * i) for i, word in enumerate(constants))


class TestJumpConstants:
    """
    Each published constant vector must encode x^(2^k) reduced modulo the
    transition's characteristic polynomial, so the jump is exactly 2^k
    next() calls.
    """

    @pytest.mark.parametrize("name", list_jump_capable_prngs())
    def test_jump_polynomial_is_power_of_x(self, name):
        variant = get_variant(name)
        p = _characteristic_polynomial(variant)
        assert _constants_polynomial(variant.jump_constants, variant.word_width) == \
            _x_pow_two_pow(variant.jump_power, p)

    @pytest.mark.parametrize("name", list_jump_capable_prngs())
    def test_long_jump_polynomial_is_power_of_x(self, name):
        variant = get_variant(name)
        p = _characteristic_polynomial(variant)
        assert _constants_polynomial(variant.long_jump_constants, variant.word_width) == \
            _x_pow_two_pow(variant.long_jump_power, p)

    @pytest.mark.parametrize("name,power,expected_power", [
        ('xoroshiro128pp', 'jump_power', 64),
        ('xoroshiro128pp', 'long_jump_power', 96),
        ('xoshiro128pp', 'jump_power', 64),
        ('xoshiro128pp', 'long_jump_power', 96),
        ('xoshiro256ss', 'jump_power', 128),
        ('xoshiro256ss', 'long_jump_power', 192),
    ])
    def test_registered_jump_distances(self, name, power, expected_power):
        assert getattr(get_variant(name), power) == expected_power

    def test_recovered_polynomial_annihilates_state(self):
        """P(T) s == 0 checks the recovered polynomial against the full state."""
        variant = get_variant('xoroshiro128pp')
        p = _characteristic_polynomial(variant)
        state = _seed_state(variant)
        engine.jump_with_polynomial(state, _polynomial_words(p, variant), variant.next_fn)
        assert state == [0, 0]

    def test_small_step_polynomial_matches_iteration(self):
        """x^(2^8) mod P, reduced past the state degree, jumps exactly 256 steps."""
        variant = get_variant('xoshiro256pp')
        p = _characteristic_polynomial(variant)
        jumped = _seed_state(variant)
        stepped = list(jumped)
        engine.jump_with_polynomial(
            jumped, _polynomial_words(_x_pow_two_pow(8, p), variant), variant.next_fn
        )
        for _ in range(256):
            variant.next_fn(stepped)
        assert jumped == stepped


class TestGoldenJumps:
    """Jumped states from a fixed seed, computed with the C reference code."""

    SEED = [0x0123456789ABCDEF, 0xFEDCBA9876543210]

    def test_xoroshiro128pp_jump(self):
        state = list(self.SEED)
        engine.xoroshiro128pp_jump(state)
        assert state == [10980970643750116829, 4516417438442587721]

    def test_xoroshiro128pp_long_jump(self):
        state = list(self.SEED)
        engine.xoroshiro128pp_long_jump(state)
        assert state == [5608002147947520300, 5243079339959491613]

    def test_registry_jump_matches_golden(self):
        variant = get_variant('xoroshiro128pp')
        short_state, long_state = list(self.SEED), list(self.SEED)
        variant.jump_fn(short_state)
        variant.long_jump_fn(long_state)
        assert short_state == [10980970643750116829, 4516417438442587721]
        assert long_state == [5608002147947520300, 5243079339959491613]
