"""Disk Fragmenter: compacting files on a disk map."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Disk:
    """Blocks on a disk: a file id, or None for free space."""

    blocks: list[int | None]
    file_count: int = field(default=0)

    @classmethod
    def parse(cls, text: str) -> Disk:
        blocks: list[int | None] = []
        file_id = 0
        for index, char in enumerate(text.strip()):
            length = int(char)
            if index % 2 == 0:
                blocks.extend([file_id] * length)
                file_id += 1
            else:
                blocks.extend([None] * length)
        return cls(blocks, file_id)

    def __str__(self) -> str:
        return "".join("." if block is None else str(block) for block in self.blocks)

    def compact_blocks(self) -> None:
        """Move file blocks one at a time from the end into the leftmost gaps."""
        blocks = self.blocks
        if not blocks:
            return
        left, right = 0, len(blocks) - 1

        def skip() -> None:
            nonlocal left, right
            while left < len(blocks) and blocks[left] is not None:
                left += 1
            while right > 0 and blocks[right] is None:
                right -= 1

        skip()
        while left < right:
            blocks[left], blocks[right] = blocks[right], blocks[left]
            skip()

    def _spans(self) -> tuple[dict[int, tuple[int, int]], list[list[int]]]:
        files: dict[int, tuple[int, int]] = {}
        gaps: list[list[int]] = []
        start = 0
        while start < len(self.blocks):
            value = self.blocks[start]
            end = start
            while end < len(self.blocks) and self.blocks[end] == value:
                end += 1
            if value is None:
                gaps.append([start, end - start])
            else:
                files[value] = (start, end - start)
            start = end
        return files, gaps

    def compact_files(self) -> None:
        """Move whole files, highest id first, into the leftmost gap that fits."""
        files, gaps = self._spans()
        for file_id in range(self.file_count - 1, -1, -1):
            if file_id not in files:
                continue
            start, length = files[file_id]
            gap = next(
                (gap for gap in gaps if gap[0] < start and gap[1] >= length), None
            )
            if gap is None:
                continue
            self.blocks[gap[0] : gap[0] + length] = [file_id] * length
            self.blocks[start : start + length] = [None] * length
            # Freed space lies right of every file still to be moved.
            gap[0] += length
            gap[1] -= length

    def checksum(self) -> int:
        """Sum of position times file id over all used blocks."""
        return sum(
            position * block
            for position, block in enumerate(self.blocks)
            if block is not None
        )


def part1(text: str) -> int:
    """Checksum after moving individual blocks."""
    disk = Disk.parse(text)
    disk.compact_blocks()
    return disk.checksum()


def part2(text: str) -> int:
    """Checksum after moving whole files."""
    disk = Disk.parse(text)
    disk.compact_files()
    return disk.checksum()