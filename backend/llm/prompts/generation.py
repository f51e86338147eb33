"""Prompts for blog post and code generation."""

BLOG_SYSTEM_PROMPT = (
    "You are a professional blog writer who writes structured, engaging, "
    "SEO-friendly blog posts with headings and proper formatting."
)

# Placeholders: {tone}, {topic}, {length_guide}
BLOG_PROMPT = (
    'Write a {tone} blog about "{topic}" in {length_guide}. '
    "Use clear headings, subheadings, and proper paragraph formatting."
)

BLOG_TONES = frozenset(
    {"professional", "casual", "friendly", "formal", "humorous", "inspirational"}
)

BLOG_LENGTH_GUIDES: dict[str, str] = {
    "short": "300-500 words",
    "medium": "700-1000 words",
    "long": "1500-2000 words",
}

# Placeholder: {language}
CODE_SYSTEM_PROMPT = (
    "You are an expert programmer. Generate clean, efficient, and well-commented "
    "code in {language}. Always provide the code inside triple backticks first, "
    "then a brief explanation."
)

# Language option values; the value itself is named in the prompt
CODE_LANGUAGES = frozenset(
    {
        "javascript",
        "typescript",
        "python",
        "java",
        "cpp",
        "go",
        "rust",
        "php",
        "ruby",
        "swift",
    }
)
