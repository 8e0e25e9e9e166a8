# tests/test_prompt_service.py
"""
Tests for prompt construction and the style guidance table
"""
import pytest

from services.prompt_service import GENERIC_GUIDELINE, STYLE_GUIDELINES, PromptService


@pytest.mark.parametrize("style", sorted(STYLE_GUIDELINES))
def test_known_styles_use_table_entry(style):
    assert PromptService.get_style_guidelines(style) == STYLE_GUIDELINES[style]

def test_style_lookup_is_case_insensitive():
    assert PromptService.get_style_guidelines("Haiku") == STYLE_GUIDELINES["haiku"]
    assert PromptService.get_style_guidelines("  FREE VERSE ") == STYLE_GUIDELINES["free verse"]

def test_unknown_style_falls_back_to_generic_guidance():
    prompt = PromptService.create_user_prompt("autumn", "villanelle", "wistful")
    assert GENERIC_GUIDELINE in prompt
    for guidance in STYLE_GUIDELINES.values():
        assert guidance not in prompt

def test_table_content():
    assert "5-7-5 syllable" in STYLE_GUIDELINES["haiku"]
    assert "14 lines" in STYLE_GUIDELINES["sonnet"]
    assert "ABAB CDCD EFEF GG" in STYLE_GUIDELINES["sonnet"]
    assert "AABBA" in STYLE_GUIDELINES["limerick"]
    assert "2-4-6-8-2" in STYLE_GUIDELINES["cinquain"]
    assert "ABCB" in STYLE_GUIDELINES["ballad"]
    assert "5-7-5-7-7" in STYLE_GUIDELINES["tanka"]

def test_user_prompt_embeds_inputs_and_output_instruction():
    prompt = PromptService.create_user_prompt("  ocean waves  ", "haiku", "peaceful")
    assert "Create a haiku poem with a peaceful mood about: ocean waves." in prompt
    assert STYLE_GUIDELINES["haiku"] in prompt
    assert "Return only the poem text without any additional commentary, titles, or explanations." in prompt

def test_system_prompt_describes_role_style_and_mood():
    prompt = PromptService.create_system_prompt("sonnet", "romantic")
    assert prompt.startswith("You are a gifted poet")
    assert "- Write in sonnet style" in prompt
    assert "- Convey a romantic mood" in prompt
    assert "Avoid clichés" in prompt
    assert "structural requirements" in prompt
