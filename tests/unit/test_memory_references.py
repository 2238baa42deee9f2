"""
Keyword-overlap attribution of replies to memories
"""

from persona_engine.personas.references import extract_memory_references, find_reference
from tests.test_framework import MockDataGenerator


def _profile(**sections):
    data = MockDataGenerator.create_empty_profile_dict(style="Dry")
    for section, values in sections.items():
        data[section].update(values)
    return MockDataGenerator.create_profile(**data)


class TestFindReference:

    def test_full_phrase_match(self):
        assert find_reference("I love rock climbing", "rock climbing", "Hobby") == "Hobby: rock climbing"

    def test_match_is_case_insensitive_and_keeps_original_text(self):
        assert find_reference("ROCK CLIMBING rules", "Rock Climbing", "Hobby") == "Hobby: Rock Climbing"

    def test_single_long_word_is_enough(self):
        assert find_reference("the climbing wall was busy", "indoor bouldering or climbing", "Hobby") == (
            "Hobby: indoor bouldering or climbing"
        )

    def test_words_of_three_letters_or_fewer_do_not_count(self):
        assert find_reference("the cat sat on a mat", "my big red cat", "Like") is None

    def test_keyword_matches_as_substring(self):
        # "runs" is a substring of "reruns"; accepted imprecision
        assert find_reference("watching reruns", "morning runs", "Habit") == "Habit: morning runs"

    def test_no_overlap(self):
        assert find_reference("Have a lovely evening", "Rock climbing", "Hobby") is None

    def test_blank_item_never_matches(self):
        assert find_reference("anything at all", "   ", "Hobby") is None


class TestExtractMemoryReferences:

    def test_hobby_is_referenced(self):
        profile = _profile(preferences={"hobbies": ["rock climbing"]})
        assert "Hobby: rock climbing" in extract_memory_references("I love rock climbing", profile)

    def test_unrelated_reply_has_no_references(self):
        profile = _profile(
            preferences={"hobbies": ["rock climbing"], "likes": ["Quiet mornings"]},
            facts={"goals": ["Become senior engineer"]},
        )
        assert extract_memory_references("Yes.", profile) == []

    def test_labels_and_field_order(self):
        profile = _profile(
            preferences={"hobbies": ["painting"], "likes": ["coffee"], "dislikes": ["crowds"], "habits": ["journaling"]},
            emotionalPatterns={"commonEmotions": ["anxiety"], "stressTriggers": ["deadlines"], "joySources": ["sunsets"]},
            facts={"personalDetails": ["designer"], "relationships": ["sister"], "goals": ["freelance"], "values": ["honesty"]},
        )
        reply = (
            "honesty freelance sister designer sunsets deadlines anxiety journaling crowds coffee painting"
        )
        assert extract_memory_references(reply, profile) == [
            "Hobby: painting",
            "Like: coffee",
            "Dislike: crowds",
            "Habit: journaling",
            "Emotion: anxiety",
            "Stress Trigger: deadlines",
            "Joy Source: sunsets",
            "Personal Detail: designer",
            "Relationship: sister",
            "Goal: freelance",
            "Value: honesty",
        ]

    def test_communication_style_uses_keyword_rule(self):
        data = MockDataGenerator.create_empty_profile_dict(style="Direct and analytical")
        profile = MockDataGenerator.create_profile(**data)
        assert extract_memory_references("Your analytical side will help", profile) == [
            "Communication Style: Direct and analytical"
        ]

    def test_duplicates_are_recorded_once(self):
        profile = _profile(preferences={"hobbies": ["running", "running"]})
        assert extract_memory_references("keep running", profile) == ["Hobby: running"]

    def test_same_text_in_two_categories_is_kept_per_label(self):
        profile = _profile(preferences={"hobbies": ["cooking"]}, emotionalPatterns={"joySources": ["cooking"]})
        assert extract_memory_references("cooking tonight?", profile) == ["Hobby: cooking", "Joy Source: cooking"]
