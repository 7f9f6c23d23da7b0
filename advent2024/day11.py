"""Plutonian Pebbles: counting stones that change every blink."""

from __future__ import annotations

from collections import Counter

PART1_BLINKS = 25
PART2_BLINKS = 75


def blink(stone: int) -> tuple[int, ...]:
    """Stones that one stone turns into after a single blink."""
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def _parse(text: str) -> Counter[int]:
    return Counter(int(token) for token in text.strip().split(" "))


def count_stones(text: str, blinks: int) -> int:
    """Number of stones after the given number of blinks."""
    stones = _parse(text)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, count in stones.items():
            for produced in blink(stone):
                following[produced] += count
        stones = following
    return sum(stones.values())


def part1(text: str) -> int:
    """Number of stones after 25 blinks."""
    return count_stones(text, PART1_BLINKS)


def part2(text: str) -> int:
    """Number of stones after 75 blinks."""
    return count_stones(text, PART2_BLINKS)