"""Word-level diff highlighting for modified sections."""

import difflib
import html
import re
from enum import Enum
from typing import Dict, List

from ..models.comparison import SectionChange
from ..models.enums import ChangeType


class DiffType(Enum):
    """Types of differences."""
    INSERT = "insert"
    DELETE = "delete"
    EQUAL = "equal"


_TOKENS = re.compile(r"\s+|\S+")


def tokenize(text: str) -> List[str]:
    """Split text into alternating word and whitespace tokens."""
    return _TOKENS.findall(text or "")


class DiffHighlighter:
    """
    Highlights differences between the old and new text of a section.

    Diffs run over word tokens so a changed word is reported whole
    rather than character by character.
    """

    KEY_CHANGE_SAMPLES = 3
    KEY_CHANGE_MIN_LENGTH = 4
    KEY_CHANGE_MAX_LENGTH = 50

    def __init__(self):
        """Initialize the diff highlighter."""
        self.color_scheme = {
            DiffType.INSERT: "#c8e6c9",  # Green
            DiffType.DELETE: "#ffcdd2",  # Red
            DiffType.EQUAL: "#ffffff",   # White
        }

    def highlight_change(self, change: SectionChange) -> Dict:
        """
        Generate highlighted diff data for a section change.

        Args:
            change: The section change to highlight.

        Returns:
            Dictionary with diff segments, texts and key changes.
        """
        if change.change_type == ChangeType.ADDED:
            segments = [self._segment(change.new_content, DiffType.INSERT)]
        elif change.change_type == ChangeType.REMOVED:
            segments = [self._segment(change.old_content, DiffType.DELETE)]
        else:
            segments = self.compute_diff_segments(change.old_content, change.new_content)

        return {
            'type': change.change_type.value,
            'section_id': change.section_id,
            'segments': segments,
            'original_text': change.old_content,
            'new_text': change.new_content,
            'key_changes': self.extract_key_changes(segments),
        }

    def compute_diff_segments(self, original: str, new: str) -> List[Dict]:
        """
        Compute word-level diff segments between two texts.

        Adjacent tokens of the same kind are merged into one segment;
        a replacement yields a delete segment followed by an insert.
        """
        old_tokens = tokenize(original)
        new_tokens = tokenize(new)
        matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)
        segments: List[Dict] = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == 'equal':
                segments.append(self._segment("".join(old_tokens[i1:i2]), DiffType.EQUAL))
            if tag in ('delete', 'replace'):
                segments.append(self._segment("".join(old_tokens[i1:i2]), DiffType.DELETE))
            if tag in ('insert', 'replace'):
                segments.append(self._segment("".join(new_tokens[j1:j2]), DiffType.INSERT))

        return segments

    def extract_key_changes(self, segments: List[Dict]) -> List[str]:
        """
        Summarize the removed and added runs of a diff.

        Returns up to two lines, ``Removed: "..."`` and ``Added: "..."``,
        each quoting at most three runs longer than three characters.
        """
        key_changes = []
        removed = self._samples(segments, DiffType.DELETE)
        added = self._samples(segments, DiffType.INSERT)
        if removed:
            key_changes.append('Removed: "' + '", "'.join(removed) + '"')
        if added:
            key_changes.append('Added: "' + '", "'.join(added) + '"')
        return key_changes

    def generate_html_diff(self, change: SectionChange) -> str:
        """
        Generate HTML representation of the diff.

        Args:
            change: The section change to render.

        Returns:
            HTML string with escaped text and styled spans.
        """
        html_parts = []
        for segment in self.highlight_change(change)['segments']:
            text = html.escape(segment['text'])
            if segment['diff_type'] == DiffType.DELETE.value:
                html_parts.append(
                    f'<span class="diff-delete" style="background-color: {segment["color"]}; text-decoration: line-through;">{text}</span>'
                )
            elif segment['diff_type'] == DiffType.INSERT.value:
                html_parts.append(
                    f'<span class="diff-insert" style="background-color: {segment["color"]}; font-weight: bold;">{text}</span>'
                )
            else:
                html_parts.append(f'<span>{text}</span>')
        return ''.join(html_parts)

    def _segment(self, text: str, diff_type: DiffType) -> Dict:
        return {
            'text': text,
            'diff_type': diff_type.value,
            'color': self.color_scheme[diff_type],
            'original': diff_type != DiffType.INSERT,
            'new': diff_type != DiffType.DELETE,
        }

    def _samples(self, segments: List[Dict], diff_type: DiffType) -> List[str]:
        runs = [
            s['text'].strip() for s in segments
            if s['diff_type'] == diff_type.value
        ]
        runs = [r for r in runs if len(r) >= self.KEY_CHANGE_MIN_LENGTH]
        return [
            r[:self.KEY_CHANGE_MAX_LENGTH] + '...' if len(r) > self.KEY_CHANGE_MAX_LENGTH else r
            for r in runs[:self.KEY_CHANGE_SAMPLES]
        ]
