"""Keyword response engine.

Every inbound message is lowercased and run through ``RULES`` in order; the
first rule whose predicate matches supplies the reply. The last rule always
matches, so ``select_response`` answers any string.

``random_response`` is a separate path that ignores the message entirely and
picks one of the generic replies in ``dialogue_script.fallback_responses``.
"""
import random
import re
from collections import namedtuple

from .dialogue_script import RESPONSES, fallback_responses

Rule = namedtuple("Rule", ["name", "predicate", "response"])

SHORT_MESSAGE_LENGTH = 10

NEGATIVE_WORDS = ("bad", "terrible", "awful", "horrible")
POSITIVE_WORDS = ("good", "better", "okay", "alright")
QUESTION_WORDS = ("what", "how", "why", "who", "when", "where")


def contains_any(*phrases):
    return lambda text: any(phrase in text for phrase in phrases)


def feeling(*adjectives):
    return lambda text: "feel" in text and any(word in text for word in adjectives)


def _is_greeting(text):
    # "hi" and "hey" sit inside "this", "think", "they"; match them as words.
    return re.search(r"\b(hi|hello|hey)\b", text) is not None


def _is_sad_why(text):
    return contains_any("sad", "depressed", "down", "blue")(text) and "why" in text


def _is_short_acknowledgment(text):
    return len(text) < SHORT_MESSAGE_LENGTH and contains_any("yes", "no", "ok", "okay")(text)


def _is_question(text):
    return "?" in text and contains_any(*QUESTION_WORDS)(text)


def _always(text):
    return True


RULES = (
    Rule("greeting", _is_greeting, RESPONSES["greeting"]),
    Rule("gratitude", contains_any("thank", "thanks", "appreciate"), RESPONSES["gratitude"]),
    Rule("uncertainty", contains_any("dont know", "don't know", "not sure", "confused"), RESPONSES["uncertainty"]),
    Rule("sadness_why", _is_sad_why, RESPONSES["sadness_why"]),
    Rule("sadness", contains_any("sad", "depressed", "down", "blue"), RESPONSES["sadness"]),
    Rule("loneliness", contains_any("lonely", "alone", "isolated", "onely"), RESPONSES["loneliness"]),
    Rule("anxiety", contains_any("anxious", "worried", "nervous", "panic"), RESPONSES["anxiety"]),
    Rule("help", contains_any("help", "how can you help", "what can you do"), RESPONSES["help"]),
    Rule("identity", contains_any("name", "what are you", "who are you"), RESPONSES["identity"]),
    Rule("duration", contains_any("how long", "time limit", "stop working"), RESPONSES["duration"]),
    Rule("stress", contains_any("stressed", "overwhelmed", "pressure"), RESPONSES["stress"]),
    Rule("anger", contains_any("angry", "mad", "frustrated", "irritated"), RESPONSES["anger"]),
    Rule("negative_feeling", feeling(*NEGATIVE_WORDS), RESPONSES["negative_feeling"]),
    Rule("positive_feeling", feeling(*POSITIVE_WORDS), RESPONSES["positive_feeling"]),
    Rule("sleep", contains_any("sleep", "tired", "exhausted", "insomnia"), RESPONSES["sleep"]),
    Rule("relationships", contains_any("relationship", "partner", "friend", "family", "breakup", "divorce"), RESPONSES["relationships"]),
    Rule("work_school", contains_any("work", "job", "school", "study", "career", "boss", "colleague"), RESPONSES["work_school"]),
    Rule("coping", contains_any("cope", "coping", "self-care", "therapy", "meditation", "exercise"), RESPONSES["coping"]),
    Rule("acknowledgment", _is_short_acknowledgment, RESPONSES["acknowledgment"]),
    Rule("off_topic", contains_any("time", "weather", "superhero", "movie", "food", "sport"), RESPONSES["off_topic"]),
    Rule("question", _is_question, RESPONSES["question"]),
    Rule("fallback", _always, RESPONSES["fallback"]),
)


def match_rule(utterance, rules=RULES):
    """Return the first rule matching ``utterance``, or None if none does."""
    text = (utterance or "").lower()
    for rule in rules:
        if rule.predicate(text):
            return rule
    return None


def select_response(utterance):
    return match_rule(utterance).response


def random_response():
    return random.choice(fallback_responses)
