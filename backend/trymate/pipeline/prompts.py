"""Styling prompt template."""

CATEGORIES: tuple[str, ...] = (
    "T-Shirt",
    "Shirt",
    "Pants",
    "Jeans",
    "Dress",
    "Skirt",
    "Shoes",
    "Jacket",
)

STYLING_PROMPT = (
    "You are a helpful fashion assistant. Analyze this image and provide exactly 3 "
    "short styling suggestions for a {category}. Write each suggestion as one "
    "sentence on its own line."
)


def build_prompt(category: str) -> str:
    """Embed the category verbatim in the styling instruction."""
    # str.replace rather than str.format so braces in the category stay literal
    return STYLING_PROMPT.replace("{category}", category)
