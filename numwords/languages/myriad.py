"""
Shared base for East Asian myriad numbering (Japanese, Korean, Chinese).

Digits are grouped by four; inside a group each digit is followed by its
place word (千 百 十), and each group by a myriad word (万 億 兆 …):

    123456789 → 一億二千三百四十五万六千七百八十九
"""

from __future__ import annotations

from typing import ClassVar, Sequence

from ..decomposer import RenderedSegment
from ..grammar import SegmentLanguage
from ..scales import AgglutinativeScaleWords, ScaleWords
from ..segments import Grouping, place_digits


class MyriadLanguage(SegmentLanguage):
    grouping = Grouping.FOURS
    per_digit_decimals = True
    word_separator = ""

    digits: ClassVar[Sequence[str]] = ()  # 0-9
    places: ClassVar[Sequence[str]] = ()  # thousands, hundreds, tens, units ("")
    scale_words: ClassVar[Sequence[str]] = ()
    omit_one_through: ClassVar[int] = 0
    # 千 rather than 一千 inside a group
    omit_one_before_places: ClassVar[bool] = True
    # Between groups: "" (日本語, 中文) or " " (한국어)
    group_separator: ClassVar[str] = ""

    def build_scales(self) -> ScaleWords:
        return AgglutinativeScaleWords(self.scale_words, self.omit_one_through)

    def segment_to_words(self, value: int, index: int) -> str:
        words = []
        for digit, place in zip(place_digits(value, 4), self.places):
            if not digit:
                continue
            if digit == 1 and place and self.omit_one_before_places:
                words.append(place)
            else:
                words.append(self.digits[digit] + place)
        return "".join(words)

    def segment_phrase(self, segment: RenderedSegment) -> str:
        return segment.words + segment.scale_word

    def join_segments(self, segments: Sequence[RenderedSegment], n: int) -> str:
        return self.group_separator.join(self.segment_phrase(s) for s in segments)
