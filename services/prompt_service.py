STYLE_GUIDELINES = {
    "haiku": (
        "Follow the traditional 5-7-5 syllable pattern across three lines. "
        "Focus on nature, seasons, or moments of reflection. "
        "Include a seasonal reference or nature imagery."
    ),
    "sonnet": (
        "Write 14 lines in iambic pentameter with a clear rhyme scheme "
        "(ABAB CDCD EFEF GG for Shakespearean or ABBAABBA CDECDE for Petrarchan). "
        "Include a turn or shift in perspective."
    ),
    "free verse": (
        "Use natural speech rhythms without strict meter or rhyme. "
        "Focus on imagery, line breaks for emphasis, and organic structure "
        "that serves the poem's meaning."
    ),
    "limerick": (
        "Write exactly 5 lines with AABBA rhyme scheme. "
        "Lines 1, 2, and 5 should have 7-10 syllables. "
        "Lines 3 and 4 should have 5-7 syllables. Include humor or wit."
    ),
    "acrostic": (
        "Use the first letters of each line to spell out a word related to the theme. "
        "Make each line meaningful and connected to create a cohesive poem."
    ),
    "cinquain": (
        "Write 5 lines with a 2-4-6-8-2 syllable pattern. "
        "Focus on a single image or moment, building intensity toward the middle "
        "and resolving softly."
    ),
    "ballad": (
        "Tell a story in quatrains with ABAB or ABCB rhyme scheme. "
        "Use simple language and meter, focusing on narrative and emotion."
    ),
    "tanka": (
        "Write 5 lines with 5-7-5-7-7 syllable pattern. "
        "Often more personal and emotional than haiku, can include multiple images "
        "or a progression of thought."
    ),
}

GENERIC_GUIDELINE = (
    "Write with attention to rhythm, imagery, and emotional impact "
    "appropriate to the chosen style."
)


class PromptService:
    @staticmethod
    def get_style_guidelines(style: str) -> str:
        """Структурные требования к стилю; для неизвестного стиля - общая инструкция."""
        return STYLE_GUIDELINES.get(style.strip().lower(), GENERIC_GUIDELINE)

    @staticmethod
    def create_system_prompt(style: str, mood: str) -> str:
        return (
            "You are a gifted poet with expertise in various poetic forms and styles. "
            "Your task is to create beautiful, meaningful poetry that captures emotions "
            "and paints vivid imagery.\n"
            "\n"
            "Guidelines:\n"
            f"- Write in {style} style\n"
            f"- Convey a {mood} mood and emotional tone\n"
            "- Use rich, sensory language and metaphors\n"
            "- Create authentic, heartfelt expression\n"
            "- Ensure proper rhythm and flow\n"
            "- Make each line meaningful and purposeful\n"
            "- Avoid clichés and create original imagery\n"
            "\n"
            "Remember to follow the specific structural requirements of the chosen poetry "
            "style while maintaining emotional authenticity and creative expression."
        )

    @staticmethod
    def create_user_prompt(theme: str, style: str, mood: str) -> str:
        return (
            f"Create a {style} poem with a {mood} mood about: {theme.strip()}.\n"
            "\n"
            "Make the poem meaningful, creative, and emotionally resonant. "
            "Focus on vivid imagery and authentic expression.\n"
            "\n"
            f"{PromptService.get_style_guidelines(style)}\n"
            "\n"
            "Return only the poem text without any additional commentary, titles, or explanations."
        )
