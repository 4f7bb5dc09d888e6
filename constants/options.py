"""Option values offered by the intake wizard.

Single-choice steps store the option id (or, where the id and the label
coincide, the label itself) under the step's answer key. Multi-select steps
store one boolean per option under a prefixed key, see ``AnswerKeys``.
"""

from __future__ import annotations

from typing import Final

# (id, label) pairs for the first question.
SERVICE_OPTIONS: Final[tuple[tuple[str, str], ...]] = (
    ("live", "Live geluid voor een evenement"),
    ("studio", "Studio opname"),
    ("nabewerking", "Audio Nabewerking"),
    ("advies", "Audio Advies"),
    ("anders", "Anders"),
)

LIVE_TYPE_OPTIONS: Final[tuple[tuple[str, str], ...]] = (
    ("organize", "Ik organiseer een evenement - help me met techniek"),
    ("hire", "Ik wil je direct inhuren als technicus"),
)

HIRE_ROLE_OPTIONS: Final[tuple[str, ...]] = (
    "FOH Technicus",
    "Monitor Technicus",
    "Stagehand / Crew",
    "Systeemontwerper",
    "Anders",
)

EVENT_CONCERT: Final[str] = "Concert / Festival"
EVENT_CONCERT_SHORT: Final[str] = "concert"
EVENT_TYPE_OPTIONS: Final[tuple[str, ...]] = (
    EVENT_CONCERT,
    "Bedrijfsevent",
    "Privéfeest / Bruiloft",
    "Presentatie / Congres",
)

LIVE_MUSIC_OPTIONS: Final[tuple[tuple[str, str], ...]] = (
    ("ja", "Ja, live muziek"),
    ("nee", "Nee, alleen spraak"),
)

BAND_SMALL: Final[str] = "Band (2-5 personen)"
BAND_LARGE: Final[str] = "Band (6+ personen)"
PERFORMER_OPTIONS: Final[tuple[str, ...]] = (
    "Solo artiest / DJ",
    "Duo / Trio",
    BAND_SMALL,
    BAND_LARGE,
    "Meerdere acts",
)
BAND_PERFORMERS: Final[frozenset[str]] = frozenset({BAND_SMALL, BAND_LARGE})

INSTRUMENT_OPTIONS: Final[tuple[str, ...]] = (
    "Drums",
    "Basgitaar",
    "Gitaar",
    "Keys / Piano",
    "Zang",
    "Blazers",
    "Percussie",
    "Elektronisch",
)

EQUIPMENT_UNKNOWN: Final[str] = "Weet ik niet"
EQUIPMENT_NONE: Final[str] = "Niks aanwezig"
EQUIPMENT_OPTIONS: Final[tuple[str, ...]] = (
    "Speakers (PA)",
    "Mengtafel",
    "Microfoons",
    "Monitoren",
    EQUIPMENT_UNKNOWN,
    EQUIPMENT_NONE,
)

STUDIO_TYPE_OPTIONS: Final[tuple[str, ...]] = (
    "Zang / Vocals",
    "Band / Instrumenten",
    "Podcast / Stem",
    "Voice-over",
)

NABEWERKING_TYPE_OPTIONS: Final[tuple[str, ...]] = (
    "Mixing",
    "Mastering",
    "Podcast Editing",
    "Restauratie / Ruisonderdrukking",
)

ADVIES_WHO_OPTIONS: Final[tuple[str, ...]] = (
    "Muzikant / Producer",
    "Organisator",
    "Bedrijf",
    "Particulier",
)

ADVIES_GOAL_OPTIONS: Final[tuple[tuple[str, str], ...]] = (
    ("event", "Technisch ontwerp voor een event"),
    ("aanschaffen", "Aanschaf van eigen apparatuur"),
    ("verbeteren", "Optimalisatie van een ruimte"),
    ("anders", "Iets anders"),
)

ADVIES_RUIMTE_OPTIONS: Final[tuple[str, ...]] = (
    "Home Studio",
    "Kantoor / Vergaderruimte",
    "Horeca / Venue",
    "Oefenruimte",
)

ADVIES_DOEL_OPTIONS: Final[tuple[str, ...]] = (
    "Geluidsisolatie",
    "Akoestische behandeling",
    "Speaker optimalisatie",
)

ADVIES_METHODE_OPTIONS: Final[tuple[str, ...]] = (
    "Video Call",
    "Op locatie (Eindhoven/Utrecht)",
    "Telefonisch",
)

ADVIES_GEBRUIK_OPTIONS: Final[tuple[str, ...]] = (
    "Live optredens",
    "Recording / Studio",
    "Hifi / Luisteren",
)

KOPEN_TYPE_OPTIONS: Final[tuple[str, ...]] = (
    "Speakers",
    "Mengtafel",
    "Microfoons",
    "Interfaces",
    "Bekabeling",
    "Anders",
)

CONTACT_PREF_OPTIONS: Final[tuple[tuple[str, str], ...]] = (
    ("email", "E-mail"),
    ("telefoon", "Bellen"),
    ("whatsapp", "WhatsApp"),
)
