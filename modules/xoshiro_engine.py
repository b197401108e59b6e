#!/usr/bin/env python3
"""
Xoshiro / Xoroshiro Engine - bit-exact CPU reference transitions

Every function operates on a caller-owned list of unsigned words and
mutates it in place. Arithmetic is masked to the word width so that
additions, multiplications and shifts wrap exactly like the published
C reference code (https://prng.di.unimi.it/).

Version: 1.0.0
"""

from typing import Callable, List, Sequence

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

NextFunction = Callable[[List[int]], int]


def word_mask(width: int) -> int:
    """All-ones mask for a word of ``width`` bits"""
    return (1 << width) - 1


def rotl(x: int, k: int, width: int = 64) -> int:
    """
    Rotate ``x`` left by ``k`` bits inside a ``width``-bit word.

    ``k`` is taken modulo ``width``; k=0 returns ``x`` unchanged.
    """
    mask = word_mask(width)
    x &= mask
    k %= width
    return ((x << k) & mask) | (x >> (width - k))


# ============================================================================
# PUBLISHED JUMP POLYNOMIALS
# ============================================================================

XOROSHIRO128PP_JUMP = (0x2bd7a6a6e99c2ddc, 0x0992ccaf6a6fca05)
XOROSHIRO128PP_LONG_JUMP = (0x360fd5f2cf8d5d99, 0x9c6e6877736c46e3)

XOROSHIRO128_JUMP = (0xdf900294d8f554a5, 0x170865df4b3201fc)
XOROSHIRO128_LONG_JUMP = (0xd2a98b26625eee7b, 0xdddf9b1090aa7ac1)

XOSHIRO256_JUMP = (
    0x180ec6d33cfd0aba,
    0xd5a61266f0c9392c,
    0xa9582618e03fc9aa,
    0x39abdc4529b1661c,
)
XOSHIRO256_LONG_JUMP = (
    0x76e15d3efefdcbbf,
    0xc5004e441c522fb3,
    0x77710069854ee241,
    0x39109bb02acbe635,
)

XOSHIRO128_JUMP = (0x8764000b, 0xf542d2d3, 0x6fa035c3, 0x77f2db5b)
XOSHIRO128_LONG_JUMP = (0xb523952e, 0x0b6f099f, 0xccf5a0ef, 0x1c580662)


# ============================================================================
# 32-BIT, 2-WORD: XOROSHIRO64
# ============================================================================

def xoroshiro64s_next(s: List[int]) -> int:
    """xoroshiro64* step"""
    s0 = s[0]
    s1 = s[1]
    result = (s0 * 0x9E3779BB) & MASK32

    s1 ^= s0
    s[0] = rotl(s0, 26, 32) ^ s1 ^ ((s1 << 9) & MASK32)
    s[1] = rotl(s1, 13, 32)

    return result


def xoroshiro64ss_next(s: List[int]) -> int:
    """xoroshiro64** step"""
    s0 = s[0]
    s1 = s[1]
    result = (rotl((s0 * 0x9E3779BB) & MASK32, 5, 32) * 5) & MASK32

    s1 ^= s0
    s[0] = rotl(s0, 26, 32) ^ s1 ^ ((s1 << 9) & MASK32)
    s[1] = rotl(s1, 13, 32)

    return result


# ============================================================================
# 32-BIT, 4-WORD: XOSHIRO128
# ============================================================================

def _xoshiro128_advance(s: List[int]) -> None:
    t = (s[1] << 9) & MASK32

    s[2] ^= s[0]
    s[3] ^= s[1]
    s[1] ^= s[2]
    s[0] ^= s[3]

    s[2] ^= t

    s[3] = rotl(s[3], 11, 32)


def xoshiro128p_next(s: List[int]) -> int:
    """xoshiro128+ step"""
    result = (s[0] + s[3]) & MASK32
    _xoshiro128_advance(s)
    return result


def xoshiro128pp_next(s: List[int]) -> int:
    """xoshiro128++ step"""
    result = (rotl((s[0] + s[3]) & MASK32, 7, 32) + s[0]) & MASK32
    _xoshiro128_advance(s)
    return result


def xoshiro128ss_next(s: List[int]) -> int:
    """xoshiro128** step"""
    result = (rotl((s[1] * 5) & MASK32, 7, 32) * 9) & MASK32
    _xoshiro128_advance(s)
    return result


# ============================================================================
# 64-BIT, 2-WORD: XOROSHIRO128
# ============================================================================

def _xoroshiro128_advance(s: List[int], s0: int, s1: int) -> None:
    # rotation constants (24, 16, 37) shared by xoroshiro128+ and **
    s1 ^= s0
    s[0] = rotl(s0, 24) ^ s1 ^ ((s1 << 16) & MASK64)
    s[1] = rotl(s1, 37)


def xoroshiro128p_next(s: List[int]) -> int:
    """xoroshiro128+ step"""
    s0 = s[0]
    s1 = s[1]
    result = (s0 + s1) & MASK64
    _xoroshiro128_advance(s, s0, s1)
    return result


def xoroshiro128ss_next(s: List[int]) -> int:
    """xoroshiro128** step"""
    s0 = s[0]
    s1 = s[1]
    result = (rotl((s0 * 5) & MASK64, 7) * 9) & MASK64
    _xoroshiro128_advance(s, s0, s1)
    return result


def xoroshiro128pp_next(s: List[int]) -> int:
    """xoroshiro128++ step"""
    s0 = s[0]
    s1 = s[1]
    result = (rotl((s0 + s1) & MASK64, 17) + s0) & MASK64

    s1 ^= s0
    s[0] = rotl(s0, 49) ^ s1 ^ ((s1 << 21) & MASK64)
    s[1] = rotl(s1, 28)

    return result


# ============================================================================
# 64-BIT, 4-WORD: XOSHIRO256
# ============================================================================

def _xoshiro256_advance(s: List[int]) -> None:
    t = (s[1] << 17) & MASK64

    s[2] ^= s[0]
    s[3] ^= s[1]
    s[1] ^= s[2]
    s[0] ^= s[3]

    s[2] ^= t

    s[3] = rotl(s[3], 45)


def xoshiro256p_next(s: List[int]) -> int:
    """xoshiro256+ step"""
    result = (s[0] + s[3]) & MASK64
    _xoshiro256_advance(s)
    return result


def xoshiro256pp_next(s: List[int]) -> int:
    """xoshiro256++ step"""
    result = (rotl((s[0] + s[3]) & MASK64, 23) + s[0]) & MASK64
    _xoshiro256_advance(s)
    return result


def xoshiro256ss_next(s: List[int]) -> int:
    """xoshiro256** step"""
    result = (rotl((s[1] * 5) & MASK64, 7) * 9) & MASK64
    _xoshiro256_advance(s)
    return result


# ============================================================================
# JUMP
# ============================================================================

def jump_with_polynomial(
    s: List[int],
    constants: Sequence[int],
    next_fn: NextFunction,
    word_bits: int = 64,
) -> None:
    """
    Advance ``s`` in place by the jump polynomial encoded in ``constants``.

    Bits are consumed low to high, word by word. For every set bit the
    running state is XORed into an accumulator, and the running state is
    stepped once per bit whether or not it was set. The accumulator then
    replaces the state.

    A polynomial whose only set bit is bit ``k`` (counting across words)
    is equivalent to ``k`` calls of ``next_fn``.
    """
    acc = [0] * len(s)
    for word in constants:
        for b in range(word_bits):
            if word & (1 << b):
                for j in range(len(s)):
                    acc[j] ^= s[j]
            next_fn(s)

    s[:] = acc


def _make_jump(
    name: str,
    next_fn: NextFunction,
    constants: Sequence[int],
    power: int,
    word_bits: int = 64,
):
    def jump(s: List[int]) -> None:
        jump_with_polynomial(s, constants, next_fn, word_bits)
    jump.__name__ = name
    jump.__qualname__ = name
    jump.__doc__ = f"Equivalent to 2^{power} calls of {next_fn.__name__}"
    return jump


xoroshiro128p_jump = _make_jump(
    "xoroshiro128p_jump", xoroshiro128p_next, XOROSHIRO128_JUMP, 64)
xoroshiro128p_long_jump = _make_jump(
    "xoroshiro128p_long_jump", xoroshiro128p_next, XOROSHIRO128_LONG_JUMP, 96)
xoroshiro128ss_jump = _make_jump(
    "xoroshiro128ss_jump", xoroshiro128ss_next, XOROSHIRO128_JUMP, 64)
xoroshiro128ss_long_jump = _make_jump(
    "xoroshiro128ss_long_jump", xoroshiro128ss_next, XOROSHIRO128_LONG_JUMP, 96)
xoroshiro128pp_jump = _make_jump(
    "xoroshiro128pp_jump", xoroshiro128pp_next, XOROSHIRO128PP_JUMP, 64)
xoroshiro128pp_long_jump = _make_jump(
    "xoroshiro128pp_long_jump", xoroshiro128pp_next, XOROSHIRO128PP_LONG_JUMP, 96)

xoshiro128p_jump = _make_jump(
    "xoshiro128p_jump", xoshiro128p_next, XOSHIRO128_JUMP, 64, 32)
xoshiro128p_long_jump = _make_jump(
    "xoshiro128p_long_jump", xoshiro128p_next, XOSHIRO128_LONG_JUMP, 96, 32)
xoshiro128pp_jump = _make_jump(
    "xoshiro128pp_jump", xoshiro128pp_next, XOSHIRO128_JUMP, 64, 32)
xoshiro128pp_long_jump = _make_jump(
    "xoshiro128pp_long_jump", xoshiro128pp_next, XOSHIRO128_LONG_JUMP, 96, 32)
xoshiro128ss_jump = _make_jump(
    "xoshiro128ss_jump", xoshiro128ss_next, XOSHIRO128_JUMP, 64, 32)
xoshiro128ss_long_jump = _make_jump(
    "xoshiro128ss_long_jump", xoshiro128ss_next, XOSHIRO128_LONG_JUMP, 96, 32)

xoshiro256p_jump = _make_jump(
    "xoshiro256p_jump", xoshiro256p_next, XOSHIRO256_JUMP, 128)
xoshiro256p_long_jump = _make_jump(
    "xoshiro256p_long_jump", xoshiro256p_next, XOSHIRO256_LONG_JUMP, 192)
xoshiro256pp_jump = _make_jump(
    "xoshiro256pp_jump", xoshiro256pp_next, XOSHIRO256_JUMP, 128)
xoshiro256pp_long_jump = _make_jump(
    "xoshiro256pp_long_jump", xoshiro256pp_next, XOSHIRO256_LONG_JUMP, 192)
xoshiro256ss_jump = _make_jump(
    "xoshiro256ss_jump", xoshiro256ss_next, XOSHIRO256_JUMP, 128)
xoshiro256ss_long_jump = _make_jump(
    "xoshiro256ss_long_jump", xoshiro256ss_next, XOSHIRO256_LONG_JUMP, 192)
