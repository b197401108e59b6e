"""
Shared helpers for the fixture tests.

The record parser here reads the emitted text the way an external consumer
would, so the format tests check structure rather than string equality.
"""

import re
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

_HEADER_RE = re.compile(r'^([a-z0-9]+):$')
_NEXT_RE = re.compile(
    r'^\{\[(\d+)\]([a-z]+\d+)\{([^{}]*)\}, \[\]([a-z]+\d+)\{([^{}]*)\}\},$'
)
_JUMP_RE = re.compile(
    r'^\{\[(\d+)\]([a-z]+\d+)\{([^{}]*)\}, \[\]\[2\]\[(\d+)\]([a-z]+\d+)\{(.*)\}\},$'
)
_PAIR_RE = re.compile(r'\{\{([^{}]*)\}, \{([^{}]*)\}\}')
_TAG_WIDTH_RE = re.compile(r'(\d+)$')


def _tag_width(tag):
    return int(_TAG_WIDTH_RE.search(tag).group(1))


def _parse_words(text, width):
    words = []
    for literal in text.split(", "):
        assert re.fullmatch(r'0x[0-9A-F]{%d}' % (width // 4), literal), literal
        words.append(int(literal, 16))
    return words


def parse_fixture_block(text):
    """
    Parse one emitted block into (variant_name, kind, records).

    ``kind`` is 'next' or 'jump'. Next records are (state, outputs); jump
    records are (state, [(short_state, long_state), ...]).
    """
    lines = text.splitlines()
    header = _HEADER_RE.match(lines[0])
    assert header, f"bad header line: {lines[0]!r}"
    records = []
    kind = None
    for line in lines[1:]:
        m = _NEXT_RE.match(line)
        if m:
            kind = kind or 'next'
            assert kind == 'next'
            n, state_tag, state_text, out_tag, out_text = m.groups()
            state = _parse_words(state_text, _tag_width(state_tag))
            assert len(state) == int(n)
            outputs = _parse_words(out_text, _tag_width(out_tag))
            records.append((state, outputs))
            continue
        m = _JUMP_RE.match(line)
        assert m, f"unparseable record: {line!r}"
        kind = kind or 'jump'
        assert kind == 'jump'
        n, state_tag, state_text, pair_n, pair_tag, body = m.groups()
        assert n == pair_n and state_tag == pair_tag
        width = _tag_width(state_tag)
        state = _parse_words(state_text, width)
        assert len(state) == int(n)
        pairs = [
            (_parse_words(short_text, width), _parse_words(long_text, width))
            for short_text, long_text in _PAIR_RE.findall(body)
        ]
        records.append((state, pairs))
    return header.group(1), kind, records


def split_blocks(text):
    """Split a multi-variant stream on header lines."""
    blocks = []
    for line in text.splitlines(keepends=True):
        if _HEADER_RE.match(line.rstrip("\n")):
            blocks.append(line)
        else:
            blocks[-1] += line
    return blocks


@pytest.fixture
def parse_block():
    return parse_fixture_block


@pytest.fixture
def split_stream():
    return split_blocks
