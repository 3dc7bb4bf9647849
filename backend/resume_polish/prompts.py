"""
Prompt templates for resume section polishing.
One template per section category; anything unrecognised gets the generic one.
"""
from enum import Enum
from typing import Dict, List, Tuple

SYSTEM_PROMPT = (
    "You are a senior resume consultant who specializes in helping job seekers "
    "optimize their resume content and improve resume quality and competitiveness."
)

RETURN_ONLY_TEXT = "Return only the polished text without additional explanations"


class SectionCategory(str, Enum):
    SKILLS = "skills"
    WORK_EXPERIENCE = "work_experience"
    PROJECT = "project"
    EDUCATION = "education"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> "SectionCategory":
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


# category -> (what is being polished, category-specific requirements)
TEMPLATES: Dict[SectionCategory, Tuple[str, List[str]]] = {
    SectionCategory.SKILLS: (
        "skills description",
        [
            "Use professional terminology and industry-standard expressions",
            "Highlight the depth and breadth of skills",
            "Quantify skill levels (if possible)",
            "Keep it concise and professional",
        ],
    ),
    SectionCategory.WORK_EXPERIENCE: (
        "work experience description",
        [
            "Use the STAR method (Situation-Task-Action-Result)",
            "Highlight specific achievements and data",
            "Start with action verbs to show initiative",
            "Demonstrate personal contribution and value",
        ],
    ),
    SectionCategory.PROJECT: (
        "project experience description",
        [
            "Clearly explain project background, scale, and complexity",
            "Highlight technology stack and architecture",
            "Emphasize personal role and key contributions",
            "Quantify project outcomes and impact",
        ],
    ),
    SectionCategory.EDUCATION: (
        "education experience description",
        [
            "Highlight academic achievements and honors",
            "Emphasize relevant coursework and research projects",
            "Demonstrate learning ability and professional depth",
            "Maintain professionalism and academic tone",
        ],
    ),
    SectionCategory.OTHER: (
        "content",
        [
            "Use professional and concise language",
            "Highlight key points and highlights",
            "Enhance persuasiveness and attractiveness",
            "Maintain authenticity",
        ],
    ),
}


def build_polish_prompt(text: str, section_type: str) -> str:
    """Render the user prompt for ``text`` using the template for ``section_type``."""
    subject, requirements = TEMPLATES[SectionCategory.parse(section_type)]
    numbered = "\n".join(
        f"{i}. {line}" for i, line in enumerate([*requirements, RETURN_ONLY_TEXT], start=1)
    )
    return (
        f"As a professional resume consultant, please help polish the following {subject}. "
        f"Requirements:\n{numbered}\n\nOriginal:\n{text}"
    )
