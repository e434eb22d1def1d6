import pytest

from app.ai.classifier import (
    classify,
    detect_emotional_tone,
    detect_flow,
    detect_relationship,
    detect_tone,
    detect_urgency,
    extract_topics,
    formality_score,
    summarize,
)
from app.ai.models import (
    ConversationContext,
    ConversationFlow,
    EmotionalTone,
    Relationship,
    Tone,
    Urgency,
)
from conftest import msg


class TestDetectTone:
    def test_formal_only(self):
        assert detect_tone([msg("a", "Bonjour monsieur, merci")]) == Tone.FORMAL

    def test_equal_counts_resolve_to_informal(self):
        assert detect_tone([msg("a", "bonjour salut")]) == Tone.INFORMAL

    def test_formal_must_dominate(self):
        # 2 formal vs 1.5 weighted informal: neither side wins
        assert detect_tone([msg("a", "Bonjour merci salut")]) == Tone.NEUTRAL

    def test_no_signal_is_neutral(self):
        assert detect_tone([msg("a", "le chat dort")]) == Tone.NEUTRAL

    def test_word_boundaries(self):
        # "cool" inside "alcool" does not count
        assert detect_tone([msg("a", "de l'alcool")]) == Tone.NEUTRAL

    def test_case_insensitive(self):
        assert detect_tone([msg("a", "SALUT")]) == Tone.INFORMAL


class TestDetectRelationship:
    def test_formal_tone_is_professional(self):
        messages = [msg("a", "Bonjour madame, merci pour maman")]
        assert detect_relationship(messages, Tone.FORMAL) == Relationship.PROFESSIONAL

    def test_role_keyword(self):
        messages = [msg("a", "Salut, mon chef veut le rapport")]
        assert detect_relationship(messages, Tone.INFORMAL) == Relationship.PROFESSIONAL

    def test_family(self):
        messages = [msg("a", "Salut, maman arrive")]
        assert detect_relationship(messages, Tone.INFORMAL) == Relationship.FAMILY

    def test_family_before_colleague(self):
        messages = [msg("a", "Salut, papa a une réunion")]
        assert detect_relationship(messages, Tone.INFORMAL) == Relationship.FAMILY

    def test_colleague(self):
        messages = [msg("a", "Salut, la réunion est décalée")]
        assert detect_relationship(messages, Tone.INFORMAL) == Relationship.COLLEAGUE

    def test_couple(self):
        messages = [msg("a", "coucou mon amour")]
        assert detect_relationship(messages, Tone.INFORMAL) == Relationship.COUPLE

    def test_singular_parent(self):
        messages = [msg("a", "mon parent arrive")]
        assert detect_relationship(messages, Tone.NEUTRAL) == Relationship.FAMILY

    def test_default_friend(self):
        messages = [msg("a", "on se voit plus tard")]
        assert detect_relationship(messages, Tone.NEUTRAL) == Relationship.FRIEND


class TestExtractTopics:
    def test_single_topic(self):
        assert extract_topics([msg("a", "On va au resto puis au cinéma")]) == ("leisure",)

    def test_inflected_form(self):
        assert extract_topics([msg("a", "Mes projets avancent")]) == ("work",)

    def test_declaration_order(self):
        messages = [msg("a", "Demain on part en voyage pour le travail")]
        assert extract_topics(messages) == ("work", "appointment", "travel")

    def test_general_when_nothing_matches(self):
        assert extract_topics([msg("a", "Salut, ça va ?")]) == ("general",)

    def test_substring_match_inside_other_words(self):
        # "cher" inside "chercher" is a known false positive
        assert extract_topics([msg("a", "Je dois chercher les clés")]) == ("money",)


class TestDetectEmotionalTone:
    def test_positive_words_and_emoji(self):
        assert detect_emotional_tone([msg("a", "Trop bien merci 😊")]) == EmotionalTone.POSITIVE

    def test_repeated_words_count_each_time(self):
        messages = [msg("a", "super mais triste, tellement triste")]
        assert detect_emotional_tone(messages) == EmotionalTone.NEGATIVE

    def test_exclamation_bonus_is_capped(self):
        messages = [msg("a", "Non!!!!!! 😢😢")]
        assert detect_emotional_tone(messages) == EmotionalTone.NEGATIVE

    def test_neutral(self):
        assert detect_emotional_tone([msg("a", "Le train part à 8h")]) == EmotionalTone.NEUTRAL


class TestDetectFlow:
    def test_single_message_is_start(self):
        assert detect_flow([msg("a", "hello")], "me") == ConversationFlow.START

    def test_questioning(self, friends_chat):
        assert detect_flow(friends_chat, "bob") == ConversationFlow.QUESTIONING

    def test_active(self):
        messages = [
            msg("me", "a"), msg("other", "b"), msg("me", "c"),
            msg("other", "d"), msg("me", "e"),
        ]
        assert detect_flow(messages, "me") == ConversationFlow.ACTIVE

    def test_questions_take_priority_over_activity(self):
        messages = [
            msg("me", "a ?"), msg("other", "b"), msg("me", "c ?"),
            msg("other", "d"), msg("me", "e"),
        ]
        assert detect_flow(messages, "me") == ConversationFlow.QUESTIONING

    def test_prolonged(self):
        messages = [msg("me" if i % 2 else "other", f"message {i}") for i in range(21)]
        assert detect_flow(messages, "me") == ConversationFlow.PROLONGED

    def test_fluid(self):
        messages = [msg("other", "a"), msg("me", "b"), msg("other", "c")]
        assert detect_flow(messages, "me") == ConversationFlow.FLUID


class TestDetectUrgency:
    def test_urgent(self):
        assert detect_urgency([msg("a", "C'est urgent")]) == Urgency.URGENT

    def test_only_last_three_messages(self):
        messages = [msg("a", "C'est urgent"), msg("a", "x"), msg("a", "y"), msg("a", "z")]
        assert detect_urgency(messages) == Urgency.NORMAL

    def test_low(self):
        assert detect_urgency([msg("a", "Réponds quand tu peux")]) == Urgency.LOW

    def test_high_beats_low(self):
        assert detect_urgency([msg("a", "tranquille mais vite")]) == Urgency.URGENT


class TestFormalityScore:
    def test_no_signal(self):
        assert formality_score([msg("a", "le chat dort")]) == 0.5

    def test_distinct_entries_only(self):
        assert formality_score([msg("a", "merci merci merci salut")]) == 0.5

    def test_fully_formal(self):
        assert formality_score([msg("a", "Bonjour madame")]) == 1.0

    def test_substring_hits(self):
        # "salutations" also contains the informal "salut"
        assert formality_score([msg("a", "salutations")]) == 0.5


class TestSummarize:
    def test_beginning_with_question(self, friends_chat):
        summary = summarize(friends_chat, "bob", ("general",))
        assert summary == "beginning, question awaiting reply"

    def test_ongoing_with_topic_and_enthusiasm(self):
        messages = [
            msg("other", "a"), msg("me", "b"), msg("other", "c"),
            msg("me", "d"), msg("other", "On se fait un resto !"),
        ]
        summary = summarize(messages, "me", ("leisure",))
        assert summary == "ongoing about leisure, enthusiastic message received"

    def test_first_two_topics_only(self):
        summary = summarize([msg("me", "x")], "me", ("work", "appointment", "travel"))
        assert summary == "beginning about work and appointment"

    def test_active_discussion(self):
        messages = [msg("me", "x")] * 11
        assert summarize(messages, "me", ("general",)) == "active discussion"

    def test_long_discussion(self):
        messages = [msg("me", "x")] * 31
        assert summarize(messages, "me", ("general",)) == "long discussion"


class TestClassify:
    def test_empty_conversation(self):
        context = classify([], "me", "Me")
        assert context == ConversationContext.empty()
        assert context.message_count == 0
        assert context.conversation_summary == "new conversation"
        assert context.topics == ("general",)

    def test_idempotent(self, friends_chat):
        assert classify(friends_chat, "bob", "Bob") == classify(friends_chat, "bob", "Bob")

    def test_friends_scenario(self, friends_chat):
        context = classify(friends_chat, "bob", "Bob")
        assert context.tone == Tone.INFORMAL
        assert context.relationship == Relationship.FRIEND
        assert context.emotional_tone in (EmotionalTone.NEUTRAL, EmotionalTone.POSITIVE)
        assert context.topics == ("general",)
        assert context.message_count == 2
        assert context.last_speaker == "self"

    def test_professional_scenario(self, client_request):
        context = classify(client_request, "me", "Camille")
        assert context.tone == Tone.FORMAL
        assert context.relationship == Relationship.PROFESSIONAL
        assert context.conversation_flow == ConversationFlow.START
        assert context.last_speaker == "M. Durand"

    def test_formal_with_role_keyword_stays_professional(self):
        context = classify([msg("a", "Bonjour monsieur le directeur, cordialement")], "me")
        assert context.relationship == Relationship.PROFESSIONAL

    def test_to_dict_uses_plain_values(self, friends_chat):
        data = classify(friends_chat, "bob", "Bob").to_dict()
        assert data["tone"] == "informal"
        assert data["topics"] == ["general"]
        assert data["last_speaker"] == "self"
