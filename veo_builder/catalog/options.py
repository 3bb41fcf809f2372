"""Enumerations describing the selectable values of every prompt field."""

from __future__ import annotations

from enum import Enum


class Subject(str, Enum):
    PERSON = "A person"
    ANIMAL = "An animal"
    CITYSCAPE = "A cityscape"
    NATURAL_LANDSCAPE = "A natural landscape"
    OBJECT = "An object"
    VEHICLE = "A vehicle"
    BUILDING = "A building"
    CREATURE = "A creature"


class SubjectAge(str, Enum):
    CHILD = "Child"
    TEENAGE = "Teenage"
    YOUNG = "Young"
    MIDDLE_AGED = "Middle-aged"
    ELDERLY = "Elderly"


class SubjectGender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "Non-binary"


class SubjectAppearance(str, Enum):
    TALL = "Tall"
    SHORT = "Short"
    ATHLETIC = "Athletic"
    SLENDER = "Slender"
    CURLY_HAIRED = "Curly-haired"
    BEARDED = "Bearded"
    FRECKLED = "Freckled"


class SubjectClothing(str, Enum):
    CASUAL = "Casual clothes"
    BUSINESS_SUIT = "A business suit"
    EVENING_DRESS = "An evening dress"
    SPORTSWEAR = "Sportswear"
    UNIFORM = "A uniform"
    ARMOR = "Medieval armor"
    SPACESUIT = "A spacesuit"


class Action(str, Enum):
    WALKING = "Walking"
    RUNNING = "Running"
    TALKING = "Talking"
    FLYING = "Flying"
    STANDING_STILL = "Standing still"
    INTERACTING = "Interacting with an object"
    DANCING = "Dancing"
    FIGHTING = "Fighting"
    SLEEPING = "Sleeping"
    WORKING = "Working"


class Style(str, Enum):
    CINEMATIC = "Cinematic"
    ANIMATED = "Animated"
    DOCUMENTARY = "Documentary"
    FILM_NOIR = "Film Noir"
    SCI_FI = "Sci-Fi"
    FANTASY = "Fantasy"
    ABSTRACT = "Abstract"
    REALISTIC = "Realistic"
    SURREAL = "Surreal"
    VINTAGE = "Vintage"


class CameraMotion(str, Enum):
    WIDE_SHOT = "Wide shot"
    CLOSE_UP = "Close-up"
    MEDIUM_SHOT = "Medium shot"
    TRACKING_SHOT = "Tracking shot"
    DOLLY_IN = "Dolly in"
    PAN_LEFT = "Pan left"
    PAN_RIGHT = "Pan right"
    TILT_UP = "Tilt up"
    TILT_DOWN = "Tilt down"
    AERIAL_VIEW = "Aerial view"
    STATIC_SHOT = "Static shot"


class Ambiance(str, Enum):
    CALM = "Calm"
    DRAMATIC = "Dramatic"
    SUSPENSEFUL = "Suspenseful"
    UPLIFTING = "Uplifting"
    MYSTERIOUS = "Mysterious"
    JOYFUL = "Joyful"
    MELANCHOLIC = "Melancholic"
    ENERGETIC = "Energetic"
    PEACEFUL = "Peaceful"
    INTENSE = "Intense"


class Audio(str, Enum):
    NO_AUDIO = "No audio"
    SOFT_MUSIC = "Soft music"
    EPIC_ORCHESTRAL = "Epic orchestral music"
    DIALOGUE = "Dialogue"
    CITY_SOUNDS = "Ambient city sounds"
    NATURE_SOUNDS = "Nature sounds"
    ELECTRONIC_MUSIC = "Electronic music"
    CLASSICAL_MUSIC = "Classical music"
    SOUND_EFFECTS = "Sound effects only"


class Closing(str, Enum):
    FADE_OUT = "Fade out"
    TEXT_OVERLAY = "Text overlay"
    LOGO_REVEAL = "Zoom out to reveal logo"
    STATIC_SHOT = "Static shot"
    CUT_TO_BLACK = "Cut to black"
    FREEZE_FRAME = "Freeze frame"
    DISSOLVE = "Dissolve"


# Keyed by the camelCase field name used on the wire.
CATALOGS: dict[str, type[Enum]] = {
    "subject": Subject,
    "subjectAge": SubjectAge,
    "subjectGender": SubjectGender,
    "subjectAppearance": SubjectAppearance,
    "subjectClothing": SubjectClothing,
    "action": Action,
    "style": Style,
    "cameraMotion": CameraMotion,
    "ambiance": Ambiance,
    "audio": Audio,
    "closing": Closing,
}

# Fields the user types into; never checked against a catalog.
FREE_TEXT_FIELDS = frozenset({"customSubject", "customAction", "context"})


def catalog_values(field: str) -> list[str]:
    """Return the selectable values of ``field`` in display order."""

    catalog = CATALOGS.get(field)
    if catalog is None:
        raise KeyError(f"No catalog for field {field!r}")
    return [member.value for member in catalog]


def is_catalog_value(field: str, value: str) -> bool:
    """Return ``True`` when ``value`` is one of the fixed options of ``field``.

    Free-text fields accept anything and always return ``True``.
    """

    if field in FREE_TEXT_FIELDS:
        return True
    return value in catalog_values(field)


def as_dict() -> dict[str, list[str]]:
    return {field: catalog_values(field) for field in CATALOGS}
