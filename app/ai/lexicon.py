# Copyright (c) 2026 Tyler Martin
# Licensed under FSL-1.1-ALv2 (see LICENSE)

from types import MappingProxyType

from app.ai.models import Relationship, ResponseKind

# Scoring weights
INFORMAL_WEIGHT = 1.5
FORMAL_DOMINANCE = 2
EMOJI_WEIGHT = 2
MAX_EXCLAMATION_BONUS = 3
POSITIVE_DOMINANCE = 1.5

FORMAL_INDICATORS = (
    "bonjour", "bonsoir", "merci", "cordialement", "sincèrement",
    "pourriez", "veuillez", "je vous prie", "permettez", "monsieur",
    "madame", "respectueusement", "bien à vous", "salutations",
)

INFORMAL_INDICATORS = (
    "salut", "coucou", "ouais", "cool", "lol", "mdr", "ptdr",
    "tkt", "jsp", "wsh", "bg", "oklm", "yo", "hey", "cc",
    "tranquille", "grave", "trop", "genre", "quoi", "nan",
)

POSITIVE_WORDS = (
    "content", "super", "génial", "cool", "parfait", "merci",
    "top", "excellent", "bravo", "magnifique", "incroyable",
    "heureux", "ravi", "adorable", "formidable", "chouette",
)

NEGATIVE_WORDS = (
    "désolé", "dommage", "problème", "malheureusement", "triste",
    "inquiet", "stressé", "difficile", "compliqué", "ennuyeux",
    "frustrant", "décevant", "mauvais", "terrible", "horrible",
)

POSITIVE_EMOJIS = (
    "😊", "😂", "😄", "😃", "🙂", "❤️", "💕", "👍", "🎉", "✨", "🥳", "😁", "🤗", "💪", "👏",
)

NEGATIVE_EMOJIS = (
    "😢", "😔", "😡", "💔", "😤", "😞", "😟", "😰", "😭", "🙁", "😕", "😣",
)

# Declaration order is the order topics are reported in.
TOPIC_KEYWORDS = MappingProxyType({
    "work": (
        "travail", "projet", "réunion", "bureau", "chef", "collègue",
        "deadline", "meeting", "boss", "boulot", "job",
    ),
    "appointment": (
        "rdv", "rendez-vous", "voir", "rencontrer", "heure", "demain",
        "ce soir", "samedi", "dimanche", "week-end",
    ),
    "leisure": (
        "film", "série", "jeu", "sport", "musique", "concert", "soirée",
        "sortie", "resto", "bar",
    ),
    "food": (
        "manger", "restaurant", "bouffe", "dîner", "déjeuner", "petit-dej",
        "café", "boire", "faim",
    ),
    "travel": (
        "voyage", "vacances", "partir", "destination", "avion", "train",
        "hôtel", "plage", "montagne",
    ),
    "family": (
        "famille", "parents", "maman", "papa", "frère", "soeur", "enfants",
        "bébé", "mariage",
    ),
    "health": (
        "santé", "médecin", "malade", "hôpital", "docteur", "fatigue",
        "repos", "dormir",
    ),
    "money": (
        "argent", "payer", "prix", "cher", "budget", "économies", "acheter",
        "vendre",
    ),
})

HIGH_URGENCY = (
    "urgent", "vite", "rapidement", "asap", "immédiatement", "maintenant",
    "tout de suite", "dépêche",
)

LOW_URGENCY = (
    "quand tu peux", "pas pressé", "tranquille", "à l'occasion", "un jour",
)

# Checked in order, first match wins. A formal tone short-circuits to
# professional before any of these run.
RELATIONSHIP_PATTERNS = (
    (Relationship.PROFESSIONAL, r"\b(patron|chef|manager|directeur|client)\b"),
    (Relationship.FAMILY, r"\b(maman|papa|famille|parents?|frère|soeur)\b"),
    (Relationship.COLLEAGUE, r"\b(collègue|bureau|travail|réunion|projet)\b"),
    (Relationship.COUPLE, r"\b(chéri|bébé|mon amour|ma puce|mon coeur)\b"),
)

# Only consulted for messages containing a question mark, in order.
QUESTION_PATTERNS = (
    (ResponseKind.TEMPORAL, r"\b(quand|quelle heure|à quelle)\b"),
    (ResponseKind.LOCATION, r"\b(où|quel endroit|quel lieu)\b"),
    (ResponseKind.EXPLANATORY, r"\b(comment|pourquoi|explique)\b"),
    (
        ResponseKind.PROPOSAL,
        r"\b(tu veux|on fait|ça te dit|pourriez-vous|pouvez-vous|peux-tu|tu peux|tu pourrais)\b",
    ),
)

VALIDATION_PATTERN = r"\b(ok|d'accord|parfait|super|bien|entendu)\b"

RESPONSE_DESCRIPTIONS = MappingProxyType({
    ResponseKind.TEMPORAL: "Time question - needs a date or time",
    ResponseKind.LOCATION: "Place question - needs a location",
    ResponseKind.EXPLANATORY: "Explanatory question - needs details",
    ResponseKind.PROPOSAL: "Proposal or request - needs an acceptance or a refusal",
    ResponseKind.OPEN: "Open question - needs an informative answer",
    ResponseKind.EXCLAMATION: "Exclamation - an enthusiastic reaction fits",
    ResponseKind.VALIDATION: "Acknowledgement - can close the topic or move it forward",
    ResponseKind.AFFIRMATION: "Statement - a contextual reply fits",
})

# (upper bound on message count, label); anything longer is a long discussion.
SUMMARY_BUCKETS = (
    (3, "beginning"),
    (10, "ongoing"),
    (30, "active discussion"),
)
LONG_DISCUSSION = "long discussion"
