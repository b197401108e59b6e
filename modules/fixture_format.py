"""
Fixture text format for PRNG test vectors.

Records are written as literal array syntax so that consumer test suites
can embed them directly:

    xoroshiro128pp:
    {[2]u64{0x..., 0x...}, []u64{0x..., ... 16 outputs}},
    {[2]u64{0x..., 0x...}, [][2][2]u64{{{0x..., 0x...}, {0x..., 0x...}}, ...}},

Every word is ``0x`` followed by uppercase hex zero-padded to the word's
full width. Siblings are separated by ``, `` and nothing else.
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple


class TypeTagStyle(str, Enum):
    """Naming convention for the word-type labels in a record."""
    NEUTRAL = "neutral"   # u8, u16, u32, u64
    GO = "go"             # uint8, uint16, uint32, uint64


_TAG_PREFIX: Dict[TypeTagStyle, str] = {
    TypeTagStyle.NEUTRAL: "u",
    TypeTagStyle.GO: "uint",
}

SUPPORTED_WIDTHS = (8, 16, 32, 64)


def type_tag(width: int, style: TypeTagStyle = TypeTagStyle.NEUTRAL) -> str:
    """Label for an unsigned word of ``width`` bits"""
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"Unsupported word width: {width}. Supported: {SUPPORTED_WIDTHS}")
    return f"{_TAG_PREFIX[TypeTagStyle(style)]}{width}"


def format_word(value: int, width: int) -> str:
    """``0x`` + uppercase hex, zero-padded to ``width // 4`` digits"""
    if value < 0 or value >> width:
        raise ValueError(f"Value {value:#x} does not fit in {width} bits")
    return f"0x{value:0{width // 4}X}"


def format_words(values: Sequence[int], width: int) -> str:
    return ", ".join(format_word(v, width) for v in values)


def format_state(state: Sequence[int], width: int) -> str:
    """Braced state array: ``{0x.., 0x..}``"""
    return "{" + format_words(state, width) + "}"


def state_fingerprint(state: Sequence[int], width: int) -> str:
    """Concatenated lowercase hex of every word, no separators"""
    return "".join(f"{v:0{width // 4}x}" for v in state)


def format_header(variant_name: str) -> str:
    return f"{variant_name}:\n"


def format_next_record(
    initial_state: Sequence[int],
    outputs: Sequence[int],
    width: int,
    output_width: Optional[int] = None,
    style: TypeTagStyle = TypeTagStyle.NEUTRAL,
) -> str:
    """One next-test record, terminated by ``,`` and a newline."""
    output_width = output_width or width
    return (
        f"{{[{len(initial_state)}]{type_tag(width, style)}{format_state(initial_state, width)}, "
        f"[]{type_tag(output_width, style)}{{{format_words(outputs, output_width)}}}}},\n"
    )


def format_jump_pair(short_state: Sequence[int], long_state: Sequence[int], width: int) -> str:
    """``{{short...}, {long...}}``"""
    if len(short_state) != len(long_state):
        raise ValueError(
            f"Lineage arity mismatch: {len(short_state)} != {len(long_state)}"
        )
    return "{" + format_state(short_state, width) + ", " + format_state(long_state, width) + "}"


def format_jump_record(
    initial_state: Sequence[int],
    pairs: List[Tuple[Sequence[int], Sequence[int]]],
    width: int,
    style: TypeTagStyle = TypeTagStyle.NEUTRAL,
) -> str:
    """One jump-test record, terminated by ``,`` and a newline."""
    n = len(initial_state)
    tag = type_tag(width, style)
    for short_state, long_state in pairs:
        if len(short_state) != n or len(long_state) != n:
            raise ValueError(f"Jump pair arity does not match initial state arity {n}")
    body = ", ".join(format_jump_pair(s, l, width) for s, l in pairs)
    return (
        f"{{[{n}]{tag}{format_state(initial_state, width)}, "
        f"[][2][{n}]{tag}{{{body}}}}},\n"
    )
