# access_core/levels.py
from __future__ import annotations
from typing import Optional
from .types import AccessibilityLevel

EXCELLENT = AccessibilityLevel("Excellent", "Your course demonstrates outstanding accessibility practices", "#27ae60")
GOOD = AccessibilityLevel("Good", "Your course meets most accessibility standards with room for minor improvements", "#2ecc71")
FAIR = AccessibilityLevel("Fair", "Your course has basic accessibility features but needs significant improvements", "#f39c12")
POOR = AccessibilityLevel("Poor", "Your course has major accessibility barriers that need immediate attention", "#e67e22")
CRITICAL = AccessibilityLevel("Critical", "Your course has severe accessibility issues that prevent many users from accessing content", "#e74c3c")

def classify(score: Optional[float]) -> AccessibilityLevel:
    if score is None: return CRITICAL   # unavailable score
    s = float(score)
    if s >= 90: return EXCELLENT
    if s >= 80: return GOOD
    if s >= 70: return FAIR
    if s >= 60: return POOR
    return CRITICAL
