import logging
from typing import List, Tuple

from models import PhonemeRule

logger = logging.getLogger(__name__)

# German pronunciation hazards an English speaker typically trips over.
GERMAN_PHONEMES: Tuple[PhonemeRule, ...] = (
    PhonemeRule(
        id="umlaut_ue",
        pattern=r"ü",
        name="ü (Umlaut)",
        ipa="/yː/",
        tip='Say "ee" but round your lips like saying "oo".',
        common_mistake='Saying "u" or "i" instead.',
        examples=("für", "über", "grün", "Tür"),
    ),
    PhonemeRule(
        id="umlaut_oe",
        pattern=r"ö",
        name="ö (Umlaut)",
        ipa="/øː/",
        tip='Say "eh" but round your lips like saying "o".',
        common_mistake='Saying "o" or "e" instead.',
        examples=("schön", "hören", "möchten", "Löffel"),
    ),
    PhonemeRule(
        id="umlaut_ae",
        pattern=r"ä",
        name="ä (Umlaut)",
        ipa="/ɛː/",
        tip='Like the "e" in "bed" but slightly longer.',
        common_mistake='Saying "a" instead.',
        examples=("Mädchen", "Käse", "spät", "wählen"),
    ),
    # ich-Laut: any "ch" that does not follow a back vowel
    PhonemeRule(
        id="ch_ich",
        pattern=r"(?<![aou])ch",
        name="ch (soft/ich-Laut)",
        ipa="/ç/",
        tip='A soft "h" with your tongue near the roof of your mouth, think of saying "hue".',
        common_mistake='Saying "sh" or a hard "k" instead.',
        examples=("ich", "mich", "nicht", "Mädchen"),
    ),
    # ach-Laut: "ch" after a, o or u
    PhonemeRule(
        id="ch_ach",
        pattern=r"(?<=[aou])ch",
        name="ch (hard/ach-Laut)",
        ipa="/x/",
        tip="A throaty sound, like gently clearing your throat.",
        common_mistake='Saying "k" instead.',
        examples=("ach", "Buch", "noch", "Nacht"),
    ),
    PhonemeRule(
        id="sch",
        pattern=r"sch",
        name="sch",
        ipa="/ʃ/",
        tip='Like English "sh" but with more rounded lips.',
        common_mistake="Not rounding the lips enough.",
        examples=("schön", "Schule", "Tisch", "waschen"),
    ),
    PhonemeRule(
        id="sp_st",
        pattern=r"\b(?:sp|st)",
        name="sp/st at word start",
        ipa="/ʃp/, /ʃt/",
        tip='Pronounced "shp" and "sht" at the beginning of words.',
        common_mistake='Saying "sp" and "st" like in English.',
        examples=("sprechen", "spielen", "Straße", "Stelle"),
    ),
    PhonemeRule(
        id="z",
        pattern=r"z",
        name="z",
        ipa="/ts/",
        tip='Pronounced like the "ts" in "cats".',
        common_mistake='Saying "z" like in English "zoo".',
        examples=("Zeit", "Zimmer", "Zug", "zehn"),
    ),
    PhonemeRule(
        id="v",
        pattern=r"v",
        name="v",
        ipa="/f/",
        tip='Usually pronounced like "f" in German words.',
        common_mistake='Saying "v" like in English.',
        examples=("Vater", "verstehen", "vier", "viel"),
    ),
    PhonemeRule(
        id="w",
        pattern=r"w",
        name="w",
        ipa="/v/",
        tip='Pronounced like English "v".',
        common_mistake='Saying "w" like in English.',
        examples=("was", "wir", "wann", "Wasser"),
    ),
    PhonemeRule(
        id="uvular_r",
        pattern=r"r",
        name="r (uvular)",
        ipa="/ʁ/",
        tip="A soft gargling sound from the back of the throat.",
        common_mistake='Using the English "r" sound.',
        examples=("rot", "richtig", "Frau", "Brot"),
    ),
    PhonemeRule(
        id="ei",
        pattern=r"ei",
        name="ei",
        ipa="/aɪ/",
        tip='Pronounced like "eye" in English.',
        common_mistake='Saying "ee" instead.',
        examples=("mein", "Wein", "Zeit", "nein"),
    ),
    PhonemeRule(
        id="ie",
        pattern=r"ie",
        name="ie",
        ipa="/iː/",
        tip='Pronounced like a long "ee" sound.',
        common_mistake='Confusing it with "ei".',
        examples=("die", "wie", "Liebe", "spielen"),
    ),
    PhonemeRule(
        id="eu_aeu",
        pattern=r"eu|äu",
        name="eu/äu",
        ipa="/ɔɪ/",
        tip='Pronounced like the "oy" in "boy".',
        common_mistake='Saying "e-u" as two separate sounds.',
        examples=("heute", "Freund", "Häuser", "träumen"),
    ),
    PhonemeRule(
        id="eszett",
        pattern=r"ß",
        name="ß (Eszett)",
        ipa="/s/",
        tip='A sharp "ss" sound, never voiced.',
        common_mistake='Reading it as "b" or a voiced "z".',
        examples=("Straße", "groß", "heißen", "weiß"),
    ),
)

# Sounds worth a dedicated coaching tip in the feedback
CHALLENGING_PHONEME_IDS = frozenset(
    {"umlaut_ue", "umlaut_oe", "umlaut_ae", "ch_ich", "ch_ach", "uvular_r"}
)

_RULES_BY_ID = {rule.id: rule for rule in GERMAN_PHONEMES}


def get_rule(rule_id: str) -> PhonemeRule:
    """Return the rule registered under ``rule_id``; raises KeyError if unknown."""
    return _RULES_BY_ID[rule_id]


class PhonemeDetector:
    def __init__(self, rules: Tuple[PhonemeRule, ...] = GERMAN_PHONEMES):
        self.rules = rules

    def detect(self, text: str) -> List[PhonemeRule]:
        """Detect German pronunciation hazards present anywhere in text.

        Every rule is checked against the lowercased text; rules are reported
        once each, in table order.
        """
        normalized = (text or "").lower()
        if not normalized.strip():
            return []

        found = []
        seen = set()
        for rule in self.rules:
            if rule.id in seen:
                continue
            if rule.matches(normalized):
                seen.add(rule.id)
                found.append(rule)

        logger.debug(f"Detected {len(found)} phoneme rules in {normalized!r}")
        return found
