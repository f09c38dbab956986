"""Static recommendation tables.

``CATEGORY_RECOMMENDATIONS`` is appended when a category scores below the
medium band; ``QUESTION_RECOMMENDATIONS`` is appended when a single answer
signals a gap. Both are read-only; add entries here, never in the ranking code.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .types import Recommendation


def _rec(category: str, priority: str, title: str, description: str, resources: Tuple[str, ...], impact: str) -> Recommendation:
    return Recommendation(
        category=category,
        priority=priority,  # type: ignore[arg-type]
        title=title,
        description=description,
        impact=impact,
        resources=tuple(resources),
    )


CATEGORY_RECOMMENDATIONS: Mapping[str, Tuple[Recommendation, ...]] = MappingProxyType({
    "visual": (
        _rec(
            "visual", "high", "Improve Color Contrast",
            "Ensure text has sufficient contrast against background colors. Use contrast checking tools to verify compliance.",
            ("WebAIM Contrast Checker", "WCAG Color Contrast Guidelines"),
            "Critical for users with visual impairments and low vision",
        ),
        _rec(
            "visual", "high", "Add Alternative Text to Images",
            "Provide descriptive alt text for all images. For decorative images, use empty alt attributes.",
            ("Alt Text Best Practices Guide", "WebAIM Alternative Text"),
            "Essential for screen reader users",
        ),
    ),
    "auditory": (
        _rec(
            "auditory", "high", "Add Video Captions",
            "Provide accurate, synchronized captions for all video content.",
            ("How to Create Video Captions", "Caption Quality Guidelines"),
            "Critical for deaf and hard-of-hearing learners",
        ),
        _rec(
            "auditory", "medium", "Provide Audio Transcripts",
            "Create text transcripts for audio-only content like podcasts or lectures.",
            ("Transcript Creation Guide", "Audio Accessibility Standards"),
            "Helps deaf users and improves SEO",
        ),
    ),
    "motor": (
        _rec(
            "motor", "high", "Ensure Keyboard Navigation",
            "Make sure all interactive elements can be accessed and operated using only the keyboard.",
            ("Keyboard Navigation Testing", "WCAG Keyboard Guidelines"),
            "Essential for users who cannot use a mouse",
        ),
        _rec(
            "motor", "medium", "Improve Focus Indicators",
            "Ensure visible focus indicators for all interactive elements when navigating with keyboard.",
            ("Focus Indicator Design", "CSS Focus Styles"),
            "Helps keyboard users know where they are",
        ),
    ),
    "cognitive": (
        _rec(
            "cognitive", "high", "Simplify Navigation Structure",
            "Create clear, consistent navigation that helps users understand where they are and where they can go.",
            ("Navigation Design Principles", "Cognitive Load Theory"),
            "Reduces confusion for all users, especially those with cognitive disabilities",
        ),
        _rec(
            "cognitive", "medium", "Use Clear Language",
            "Write content using plain language principles. Avoid jargon and explain complex terms.",
            ("Plain Language Guidelines", "Writing for Accessibility"),
            "Makes content understandable for broader audience",
        ),
    ),
    "general": (
        _rec(
            "general", "medium", "Test with Assistive Technologies",
            "Regularly test your course with screen readers and other assistive technologies.",
            ("Screen Reader Testing Guide", "Assistive Technology Overview"),
            "Identifies real-world accessibility barriers",
        ),
    ),
})


QUESTION_RECOMMENDATIONS: Mapping[str, Tuple[Recommendation, ...]] = MappingProxyType({
    "color-contrast": (
        _rec(
            "visual", "high", "Fix Color Contrast Issues",
            "Use tools like WebAIM Contrast Checker to ensure text meets WCAG AA standards (4.5:1 for normal text, 3:1 for large text).",
            ("WebAIM Contrast Checker", "Color Universal Design"),
            "Makes text readable for users with low vision",
        ),
    ),
    "video-captions": (
        _rec(
            "auditory", "high", "Add Professional Captions",
            "Create accurate, properly timed captions for all video content. Consider professional captioning services for important content.",
            ("Rev.com Captioning", "YouTube Auto-Captions", "Caption Quality Standards"),
            "Makes video content accessible to deaf and hard-of-hearing users",
        ),
    ),
    "keyboard-navigation": (
        _rec(
            "motor", "high", "Implement Full Keyboard Support",
            "Ensure all interactive elements can be reached and activated using only the Tab, Enter, Space, and arrow keys.",
            ("Keyboard Navigation Patterns", "ARIA Authoring Practices"),
            "Essential for users with motor disabilities",
        ),
    ),
})


def category_recommendations(category: str, tier: str) -> Tuple[Recommendation, ...]:
    # both bands append the whole category list; each entry keeps its own priority
    if tier not in ("high", "medium"):
        return ()
    return CATEGORY_RECOMMENDATIONS.get(category, ())


def question_recommendations(question_id: str) -> Tuple[Recommendation, ...]:
    return QUESTION_RECOMMENDATIONS.get(question_id, ())
