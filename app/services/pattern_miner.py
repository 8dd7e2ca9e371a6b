"""Title packaging signals and over-used title openings."""
import re
from collections import Counter
from typing import Dict, List

from app.models.analysis import OutlierAnalysis, PatternInsights
from app.models.video import VideoRecord
from app.utils.numbers import percentage, round_int

DIGIT_PATTERN = re.compile(r"\d")
EMOJI_PATTERN = re.compile("[\U0001F300-\U0001F9FF]")
ALL_CAPS_PATTERN = re.compile(r"[A-Z]{3,}")

MIN_ANALYSIS_SET = 3
TOP_WORD_COUNT = 6
MIN_WORD_LENGTH = 4
PATTERN_PREFIX_WORDS = 3
SATURATION_THRESHOLD = 3
MAX_SATURATED_PATTERNS = 5


def has_number(title: str) -> bool:
    return DIGIT_PATTERN.search(title) is not None


def has_question(title: str) -> bool:
    return "?" in title


def has_emoji(title: str) -> bool:
    return EMOJI_PATTERN.search(title) is not None


def has_all_caps_run(title: str) -> bool:
    return ALL_CAPS_PATTERN.search(title) is not None


def pattern_key(title: str) -> str:
    """Lower-cased first three words of a title."""
    return " ".join(title.lower().split()[:PATTERN_PREFIX_WORDS])


class PatternMiner:
    """Mines packaging signals from the best performers of a corpus."""

    def select_analysis_set(self, outliers: OutlierAnalysis) -> List[VideoRecord]:
        if len(outliers.top_outliers) >= MIN_ANALYSIS_SET:
            return outliers.top_outliers
        return outliers.ranked[:5]

    def mine(self, outliers: OutlierAnalysis) -> PatternInsights:
        analysis_set = self.select_analysis_set(outliers)
        titles = [video.title for video in analysis_set]
        size = len(titles)

        return PatternInsights(
            uses_numbers=percentage(sum(has_number(t) for t in titles), size),
            uses_questions=percentage(sum(has_question(t) for t in titles), size),
            uses_emoji=percentage(sum(has_emoji(t) for t in titles), size),
            uses_all_caps=percentage(sum(has_all_caps_run(t) for t in titles), size),
            average_title_length=round_int(sum(len(t) for t in titles) / size) if size else 0,
            top_words=self.top_words(titles),
            saturated_patterns=self.saturated_patterns(outliers.videos)[:MAX_SATURATED_PATTERNS],
            based_on=size,
            source="outliers" if len(outliers.top_outliers) >= MIN_ANALYSIS_SET else "top performers",
        )

    def top_words(self, titles: List[str]) -> List[str]:
        counts: Counter = Counter()
        for title in titles:
            counts.update(word for word in title.lower().split() if len(word) >= MIN_WORD_LENGTH)

        # most_common keeps first-seen order among equal counts
        return [word for word, _ in counts.most_common(TOP_WORD_COUNT)]

    def saturated_patterns(self, videos: List[VideoRecord]) -> List[str]:
        """Title openings shared by three or more videos, in discovery order."""
        counts: Dict[str, int] = {}
        for video in videos:
            key = pattern_key(video.title)
            if key:
                counts[key] = counts.get(key, 0) + 1

        return [key for key, count in counts.items() if count >= SATURATION_THRESHOLD]
