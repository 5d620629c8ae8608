from typing import Tuple

# exclusive upper bounds, checked in ascending order
EVIDENCE_LEVELS: Tuple[Tuple[float, str], ...] = (
    (0.01, "very strong evidence against null hypothesis"),
    (0.025, "strong evidence against null hypothesis"),
    (0.05, "reasonably strong evidence against null hypothesis"),
    (0.10, "borderline evidence against null hypothesis"),
)
NO_EVIDENCE = "no evidence against null hypothesis"


def classify_p_value(p: float) -> str:
    """Conventional wording for a p-value. NaN and p >= 0.10 give NO_EVIDENCE."""
    for bound, label in EVIDENCE_LEVELS:
        if p < bound:
            return label
    return NO_EVIDENCE
