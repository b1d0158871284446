"""Canned suggestions served when the model path fails or yields nothing usable."""

from __future__ import annotations

GENERIC_SUGGESTIONS: tuple[str, str, str] = (
    "Pair with dark jeans and crisp sneakers.",
    "Style with a neutral jacket and boots.",
    "Add a minimal accessory to finish the look.",
)

_CATEGORY_SUGGESTIONS: dict[str, tuple[str, str, str]] = {
    "T-Shirt": (
        "Pair with slim dark jeans and white canvas sneakers.",
        "Layer under a denim jacket.",
        "Tuck into high-waisted shorts for summer.",
    ),
    "Shirt": (
        "Roll the sleeves and pair with chinos and loafers.",
        "Wear open over a plain white tee.",
        "Tuck into tailored trousers with a leather belt.",
    ),
    "Pants": (
        "Match with a fitted knit and clean leather sneakers.",
        "Add a crisp shirt and a structured blazer for the office.",
        "Balance a wide leg with a cropped top.",
    ),
    "Jeans": (
        "Pair with a white tee and a camel coat.",
        "Cuff the hem to show off ankle boots.",
        "Dress them up with a silk blouse and heels.",
    ),
    "Dress": (
        "Add a denim jacket and ankle boots.",
        "Pair with delicate sandals.",
        "Tuck a slim belt at the waist for evening.",
    ),
    "Skirt": (
        "Pair with a tucked-in knit and knee-high boots.",
        "Balance with a loose tee and white sneakers.",
        "Add a cropped jacket to define the waist.",
    ),
    "Shoes": (
        "Let them stand out against a neutral outfit.",
        "Echo their color in a bag or belt.",
        "Pair with cropped trousers to show them off.",
    ),
    "Jacket": (
        "Layer over a simple tee and straight-leg jeans.",
        "Throw over a slip dress for contrast.",
        "Wear with matching trousers for a sharp set.",
    ),
}


def fallback_suggestions(category: str) -> list[str]:
    """Return exactly 3 suggestions for the category, or the generic set if unknown."""
    return list(_CATEGORY_SUGGESTIONS.get(category, GENERIC_SUGGESTIONS))
