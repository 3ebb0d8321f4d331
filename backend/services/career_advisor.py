"""Template-based career advice. Deterministic; no model or network calls."""

from models.schemas.enums import SkillImportance
from models.schemas.match_result import SkillGap

# (lower bound inclusive, sentence), highest first
_SCORE_ADVICE: tuple[tuple[int, str], ...] = (
    (80, "This is an excellent match for your profile!"),
    (60, "This is a good match with some areas for improvement."),
    (40, "This job has potential but requires significant skill development."),
)
_LOW_SCORE_ADVICE = "Consider focusing on skill development before applying to similar roles."


def _score_sentence(score: int) -> str:
    for lower, sentence in _SCORE_ADVICE:
        if score >= lower:
            return sentence
    return _LOW_SCORE_ADVICE


def _experience_sentence(years: float) -> str:
    if years < 2:
        return "Consider gaining more hands-on experience through projects or internships."
    if years < 5:
        return (
            f"With {years:g} years of experience, you're well-positioned for "
            "mid-level roles. Consider leadership opportunities."
        )
    return (
        f"Your {years:g}+ years of experience make you a strong candidate "
        "for senior and leadership positions."
    )


def build_career_advice(score: int, skill_gaps: list[SkillGap], years_experience: float) -> str:
    """Score-band sentence, high-priority gaps, then an experience-band sentence."""
    parts = [_score_sentence(score)]

    high_priority = [gap.skill for gap in skill_gaps if gap.importance == SkillImportance.HIGH]
    if high_priority:
        parts.append(f"Focus on developing: {', '.join(high_priority)}.")

    parts.append(_experience_sentence(years_experience))
    return " ".join(parts)
