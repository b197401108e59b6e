#!/usr/bin/env python3
"""
PRNG Registry - xoshiro / xoroshiro family

One entry per generator kind: word width, state arity, the CPU reference
``next`` step and, where published constants exist, the ``jump`` and
``long_jump`` functions. The fixture harness and the format layer look
everything up here instead of hardcoding per-generator branches.

Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from modules import xoshiro_engine as engine


class GeneratorKind(str, Enum):
    """Closed set of supported generator kinds."""
    XOROSHIRO64S = "xoroshiro64s"
    XOROSHIRO128PP = "xoroshiro128pp"
    XOSHIRO256PP = "xoshiro256pp"
    XOSHIRO256SS = "xoshiro256ss"
    # Remaining family members
    XOROSHIRO64SS = "xoroshiro64ss"
    XOROSHIRO128P = "xoroshiro128p"
    XOROSHIRO128SS = "xoroshiro128ss"
    XOSHIRO128P = "xoshiro128p"
    XOSHIRO128PP = "xoshiro128pp"
    XOSHIRO128SS = "xoshiro128ss"
    XOSHIRO256P = "xoshiro256p"


@dataclass(frozen=True)
class GeneratorVariant:
    """Static description of one generator kind."""
    kind: GeneratorKind
    word_width: int
    arity: int
    next_fn: Callable[[List[int]], int]
    description: str
    jump_fn: Optional[Callable[[List[int]], None]] = None
    long_jump_fn: Optional[Callable[[List[int]], None]] = None
    jump_constants: Tuple[int, ...] = ()
    long_jump_constants: Tuple[int, ...] = ()
    # jump advances 2**jump_power steps, long_jump 2**long_jump_power
    jump_power: int = 0
    long_jump_power: int = 0

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def supports_jump(self) -> bool:
        return self.jump_fn is not None and self.long_jump_fn is not None

    @property
    def word_mask(self) -> int:
        return engine.word_mask(self.word_width)


# ============================================================================
# VARIANT REGISTRY
# ============================================================================

VARIANT_REGISTRY: Dict[GeneratorKind, GeneratorVariant] = {
    GeneratorKind.XOROSHIRO64S: GeneratorVariant(
        kind=GeneratorKind.XOROSHIRO64S,
        word_width=32,
        arity=2,
        next_fn=engine.xoroshiro64s_next,
        description='xoroshiro64* (no published jump)',
    ),
    GeneratorKind.XOROSHIRO128PP: GeneratorVariant(
        kind=GeneratorKind.XOROSHIRO128PP,
        word_width=64,
        arity=2,
        next_fn=engine.xoroshiro128pp_next,
        description='xoroshiro128++ with 2^64 / 2^96 jumps',
        jump_fn=engine.xoroshiro128pp_jump,
        long_jump_fn=engine.xoroshiro128pp_long_jump,
        jump_constants=engine.XOROSHIRO128PP_JUMP,
        long_jump_constants=engine.XOROSHIRO128PP_LONG_JUMP,
        jump_power=64,
        long_jump_power=96,
    ),
    GeneratorKind.XOSHIRO256PP: GeneratorVariant(
        kind=GeneratorKind.XOSHIRO256PP,
        word_width=64,
        arity=4,
        next_fn=engine.xoshiro256pp_next,
        description='xoshiro256++ with 2^128 / 2^192 jumps',
        jump_fn=engine.xoshiro256pp_jump,
        long_jump_fn=engine.xoshiro256pp_long_jump,
        jump_constants=engine.XOSHIRO256_JUMP,
        long_jump_constants=engine.XOSHIRO256_LONG_JUMP,
        jump_power=128,
        long_jump_power=192,
    ),
    GeneratorKind.XOSHIRO256SS: GeneratorVariant(
        kind=GeneratorKind.XOSHIRO256SS,
        word_width=64,
        arity=4,
        next_fn=engine.xoshiro256ss_next,
        description='xoshiro256** with 2^128 / 2^192 jumps',
        jump_fn=engine.xoshiro256ss_jump,
        long_jump_fn=engine.xoshiro256ss_long_jump,
        jump_constants=engine.XOSHIRO256_JUMP,
        long_jump_constants=engine.XOSHIRO256_LONG_JUMP,
        jump_power=128,
        long_jump_power=192,
    ),
    GeneratorKind.XOROSHIRO64SS: GeneratorVariant(
        kind=GeneratorKind.XOROSHIRO64SS,
        word_width=32,
        arity=2,
        next_fn=engine.xoroshiro64ss_next,
        description='xoroshiro64** (no published jump)',
    ),
    GeneratorKind.XOROSHIRO128P: GeneratorVariant(
        kind=GeneratorKind.XOROSHIRO128P,
        word_width=64,
        arity=2,
        next_fn=engine.xoroshiro128p_next,
        description='xoroshiro128+ with 2^64 / 2^96 jumps',
        jump_fn=engine.xoroshiro128p_jump,
        long_jump_fn=engine.xoroshiro128p_long_jump,
        jump_constants=engine.XOROSHIRO128_JUMP,
        long_jump_constants=engine.XOROSHIRO128_LONG_JUMP,
        jump_power=64,
        long_jump_power=96,
    ),
    GeneratorKind.XOROSHIRO128SS: GeneratorVariant(
        kind=GeneratorKind.XOROSHIRO128SS,
        word_width=64,
        arity=2,
        next_fn=engine.xoroshiro128ss_next,
        description='xoroshiro128** with 2^64 / 2^96 jumps',
        jump_fn=engine.xoroshiro128ss_jump,
        long_jump_fn=engine.xoroshiro128ss_long_jump,
        jump_constants=engine.XOROSHIRO128_JUMP,
        long_jump_constants=engine.XOROSHIRO128_LONG_JUMP,
        jump_power=64,
        long_jump_power=96,
    ),
    GeneratorKind.XOSHIRO128P: GeneratorVariant(
        kind=GeneratorKind.XOSHIRO128P,
        word_width=32,
        arity=4,
        next_fn=engine.xoshiro128p_next,
        description='xoshiro128+ with 2^64 / 2^96 jumps',
        jump_fn=engine.xoshiro128p_jump,
        long_jump_fn=engine.xoshiro128p_long_jump,
        jump_constants=engine.XOSHIRO128_JUMP,
        long_jump_constants=engine.XOSHIRO128_LONG_JUMP,
        jump_power=64,
        long_jump_power=96,
    ),
    GeneratorKind.XOSHIRO128PP: GeneratorVariant(
        kind=GeneratorKind.XOSHIRO128PP,
        word_width=32,
        arity=4,
        next_fn=engine.xoshiro128pp_next,
        description='xoshiro128++ with 2^64 / 2^96 jumps',
        jump_fn=engine.xoshiro128pp_jump,
        long_jump_fn=engine.xoshiro128pp_long_jump,
        jump_constants=engine.XOSHIRO128_JUMP,
        long_jump_constants=engine.XOSHIRO128_LONG_JUMP,
        jump_power=64,
        long_jump_power=96,
    ),
    GeneratorKind.XOSHIRO128SS: GeneratorVariant(
        kind=GeneratorKind.XOSHIRO128SS,
        word_width=32,
        arity=4,
        next_fn=engine.xoshiro128ss_next,
        description='xoshiro128** with 2^64 / 2^96 jumps',
        jump_fn=engine.xoshiro128ss_jump,
        long_jump_fn=engine.xoshiro128ss_long_jump,
        jump_constants=engine.XOSHIRO128_JUMP,
        long_jump_constants=engine.XOSHIRO128_LONG_JUMP,
        jump_power=64,
        long_jump_power=96,
    ),
    GeneratorKind.XOSHIRO256P: GeneratorVariant(
        kind=GeneratorKind.XOSHIRO256P,
        word_width=64,
        arity=4,
        next_fn=engine.xoshiro256p_next,
        description='xoshiro256+ with 2^128 / 2^192 jumps',
        jump_fn=engine.xoshiro256p_jump,
        long_jump_fn=engine.xoshiro256p_long_jump,
        jump_constants=engine.XOSHIRO256_JUMP,
        long_jump_constants=engine.XOSHIRO256_LONG_JUMP,
        jump_power=128,
        long_jump_power=192,
    ),
}


class JumpNotSupportedError(ValueError):
    """Raised when a jump is requested for a variant without jump constants."""


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_variant(prng_family) -> GeneratorVariant:
    """Get the registry entry for a PRNG family name or GeneratorKind"""
    try:
        kind = GeneratorKind(prng_family)
    except ValueError:
        raise ValueError(
            f"Unknown PRNG family: {prng_family}. Available: {list_available_prngs()}"
        ) from None
    return VARIANT_REGISTRY[kind]


def get_jump_variant(prng_family) -> GeneratorVariant:
    """Get a registry entry, requiring jump support"""
    variant = get_variant(prng_family)
    if not variant.supports_jump:
        raise JumpNotSupportedError(
            f"{variant.name} has no published jump constants. "
            f"Jump-capable: {list_jump_capable_prngs()}"
        )
    return variant


def list_available_prngs() -> List[str]:
    """List all registered PRNG family names"""
    return [kind.value for kind in VARIANT_REGISTRY]


def list_jump_capable_prngs() -> List[str]:
    """List PRNG families that provide jump and long_jump"""
    return [v.name for v in VARIANT_REGISTRY.values() if v.supports_jump]


def get_next_function(prng_family) -> Callable[[List[int]], int]:
    """Get the CPU reference next() step for a PRNG family"""
    return get_variant(prng_family).next_fn


if __name__ == '__main__':
    print("PRNG Registry - xoshiro / xoroshiro family")
    print("=" * 50)
    print("\nAvailable PRNGs:")
    for name in list_available_prngs():
        variant = get_variant(name)
        print(f"  {name:16} - {variant.description}")
        print(f"                   State: {variant.arity} x uint{variant.word_width}")
