from typing import List

MORE_DETAIL = "Added more details and quantified information"
STRONGER_IMPACT = "Strengthened impact and achievement descriptions"
RICHER_TERMS = "Enriched professional expressions and terminology"
GENERAL_POLISH = "Optimized language expressions and professionalism"

IMPACT_MARKERS = ("improve", "optim", "enhance")


def derive_improvements(original: str, polished: str) -> List[str]:
    """Rough notes on what changed between ``original`` and ``polished``.

    Pure text comparison (length, a few keywords, word count); it says nothing
    about actual quality. Always returns at least one note.
    """
    improvements: List[str] = []

    if len(polished) > len(original):
        improvements.append(MORE_DETAIL)

    if any(marker in polished for marker in IMPACT_MARKERS):
        improvements.append(STRONGER_IMPACT)

    if len(polished.split()) > len(original.split()):
        improvements.append(RICHER_TERMS)

    if not improvements:
        improvements.append(GENERAL_POLISH)

    return improvements
