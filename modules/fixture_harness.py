#!/usr/bin/env python3
"""
Fixture Harness - random-state test vectors for the xoshiro family

Draws random initial states, drives them through the CPU reference
transitions registered in prng_registry.py and writes the observed values
as literal array records (see modules/fixture_format.py).

RESPONSIBILITIES:
1. Create the entropy-seeded random source once per run
2. Next-test records: initial state + consecutive next() outputs
3. Jump-test records: initial state + pairs of (short, long) jump lineages
4. Per-variant emission to a text stream, driven by FixtureConfig

Record content is intentionally different on every run unless a seed is
configured; only the format and the transitions are contractual.

VERSION: 1.0.0
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO, Tuple

import numpy as np
from pydantic import ValidationError

from modules.fixture_format import (
    TypeTagStyle,
    format_header,
    format_jump_record,
    format_next_record,
    state_fingerprint,
)
from prng_registry import (
    GeneratorVariant,
    JumpNotSupportedError,
    get_jump_variant,
    get_variant,
)
from schemas.fixture_config import DEFAULT_CONFIG, FixtureConfig

logger = logging.getLogger(__name__)

ENTROPY_BYTES = 16
NEXT_RECORDS = 16
OUTPUTS_PER_RECORD = 16
JUMP_RECORDS = 8
JUMPS_PER_RECORD = 8


class EntropySourceError(RuntimeError):
    """Raised when the OS entropy source cannot seed the run."""


@dataclass
class NextRecord:
    """Initial state and the outputs of consecutive next() calls."""
    initial_state: List[int]
    outputs: List[int] = field(default_factory=list)


@dataclass
class JumpRecord:
    """Initial state and per-iteration (short lineage, long lineage) states."""
    initial_state: List[int]
    pairs: List[Tuple[List[int], List[int]]] = field(default_factory=list)


# =============================================================================
# RANDOM SOURCE
# =============================================================================

def create_entropy_source(seed: Optional[int] = None) -> np.random.Generator:
    """
    Build the process-wide random source.

    With no seed, 128 bits are read from the OS entropy pool. Failure to
    read them is fatal: there is no fixed-seed fallback.
    """
    if seed is None:
        try:
            entropy = int.from_bytes(os.urandom(ENTROPY_BYTES), 'little')
        except (OSError, NotImplementedError) as e:
            raise EntropySourceError(f"OS entropy source unavailable: {e}") from e
        logger.debug("Seeding fixture source from OS entropy")
    else:
        entropy = seed
        logger.info(f"Seeding fixture source from fixed seed {seed}")
    return np.random.Generator(np.random.PCG64(np.random.SeedSequence(entropy)))


def draw_state(source: np.random.Generator, variant: GeneratorVariant) -> List[int]:
    """Draw ``variant.arity`` uniform words over the variant's full word range."""
    words = source.integers(
        0, variant.word_mask, size=variant.arity, dtype=np.uint64, endpoint=True
    )
    return [int(w) for w in words]


# =============================================================================
# RECORD GENERATION
# =============================================================================

def run_next_record(
    variant: GeneratorVariant,
    initial_state: List[int],
    outputs_per_record: int = OUTPUTS_PER_RECORD,
) -> NextRecord:
    """Run next() repeatedly from ``initial_state`` (left untouched)."""
    if len(initial_state) != variant.arity:
        raise ValueError(
            f"{variant.name} needs {variant.arity} state words, got {len(initial_state)}"
        )
    state = list(initial_state)
    outputs = [variant.next_fn(state) for _ in range(outputs_per_record)]
    return NextRecord(initial_state=list(initial_state), outputs=outputs)


def run_jump_record(
    variant: GeneratorVariant,
    initial_state: List[int],
    jumps_per_record: int = JUMPS_PER_RECORD,
) -> JumpRecord:
    """
    Advance two lineages from ``initial_state``: one by short jumps, one by
    long jumps, each building on its own previous result.
    """
    if not variant.supports_jump:
        raise JumpNotSupportedError(f"{variant.name} has no published jump constants")
    if len(initial_state) != variant.arity:
        raise ValueError(
            f"{variant.name} needs {variant.arity} state words, got {len(initial_state)}"
        )
    short_state = list(initial_state)
    long_state = list(initial_state)
    record = JumpRecord(initial_state=list(initial_state))
    for _ in range(jumps_per_record):
        variant.jump_fn(short_state)
        variant.long_jump_fn(long_state)
        record.pairs.append((list(short_state), list(long_state)))
    return record


def generate_next_records(
    variant_name: str,
    source: np.random.Generator,
    records: int = NEXT_RECORDS,
    outputs_per_record: int = OUTPUTS_PER_RECORD,
) -> List[NextRecord]:
    variant = get_variant(variant_name)
    result = []
    for _ in range(records):
        state = draw_state(source, variant)
        logger.debug(f"{variant.name} next seed state {state_fingerprint(state, variant.word_width)}")
        result.append(run_next_record(variant, state, outputs_per_record))
    return result


def generate_jump_records(
    variant_name: str,
    source: np.random.Generator,
    records: int = JUMP_RECORDS,
    jumps_per_record: int = JUMPS_PER_RECORD,
) -> List[JumpRecord]:
    variant = get_jump_variant(variant_name)
    result = []
    for _ in range(records):
        state = draw_state(source, variant)
        logger.debug(f"{variant.name} jump seed state {state_fingerprint(state, variant.word_width)}")
        result.append(run_jump_record(variant, state, jumps_per_record))
    return result


# =============================================================================
# EMISSION
# =============================================================================

def emit_next_test(
    variant_name: str,
    source: np.random.Generator,
    out: TextIO,
    records: int = NEXT_RECORDS,
    outputs_per_record: int = OUTPUTS_PER_RECORD,
    style: TypeTagStyle = TypeTagStyle.NEUTRAL,
) -> int:
    """Write a header plus next-test records; returns the record count."""
    variant = get_variant(variant_name)
    out.write(format_header(variant.name))
    generated = generate_next_records(variant.name, source, records, outputs_per_record)
    for record in generated:
        out.write(format_next_record(
            record.initial_state, record.outputs, variant.word_width, style=style
        ))
    logger.info(f"{variant.name}: wrote {len(generated)} next-test records")
    return len(generated)


def emit_jump_test(
    variant_name: str,
    source: np.random.Generator,
    out: TextIO,
    records: int = JUMP_RECORDS,
    jumps_per_record: int = JUMPS_PER_RECORD,
    style: TypeTagStyle = TypeTagStyle.NEUTRAL,
) -> int:
    """Write a header plus jump-test records; returns the record count."""
    variant = get_jump_variant(variant_name)
    out.write(format_header(variant.name))
    generated = generate_jump_records(variant.name, source, records, jumps_per_record)
    for record in generated:
        out.write(format_jump_record(
            record.initial_state, record.pairs, variant.word_width, style=style
        ))
    logger.info(f"{variant.name}: wrote {len(generated)} jump-test records")
    return len(generated)


def emit_fixtures(
    config: FixtureConfig,
    out: TextIO,
    source: Optional[np.random.Generator] = None,
) -> int:
    """
    Emit every block ``config`` selects. Next-test blocks come first, then
    jump-test blocks, each in config order. Returns total records written.
    """
    if not config.variants and not config.jump_variants:
        logger.warning("No variants selected; nothing to emit")
        return 0
    if source is None:
        source = create_entropy_source(config.seed)

    total = 0
    for name in config.variants:
        total += emit_next_test(
            name, source, out,
            records=config.next_records,
            outputs_per_record=config.outputs_per_record,
            style=config.type_tags,
        )
    for name in config.jump_variants:
        total += emit_jump_test(
            name, source, out,
            records=config.jump_records,
            jumps_per_record=config.jumps_per_record,
            style=config.type_tags,
        )
    return total


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Emit xoshiro-family test fixtures")
    parser.add_argument('--config', default=DEFAULT_CONFIG,
                        help=f'Fixture config JSON (default: {DEFAULT_CONFIG})')
    parser.add_argument('--verbose', '-v', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )

    try:
        config = FixtureConfig.load(args.config)
    except (FileNotFoundError, ValidationError, ValueError) as e:
        logger.error(f"Invalid fixture config: {e}")
        return 2

    try:
        emit_fixtures(config, sys.stdout)
    except EntropySourceError as e:
        logger.error(f"Aborting fixture generation: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
