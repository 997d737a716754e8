"""
Game Manifest Schemas

Pydantic models describing the shape of a generated game manifest and its
dialogue and quiz scenes.
"""

from gatekeeper.schemas.scenes import (
    DIALOGUE_SCENE,
    IDENTIFIER_PATTERN,
    QUIZ_SCENE,
    SCENE_MODELS,
    SCENE_TYPES,
    Character,
    CulturalContext,
    DialogueScene,
    DialogueTurn,
    Emotion,
    QuestionType,
    QuizOption,
    QuizQuestion,
    QuizScene,
    Scene,
)
from gatekeeper.schemas.manifest import (
    CulturalAdaptation,
    DifficultyLevel,
    GameManifest,
    Language,
)

__all__ = [
    "GameManifest",
    "CulturalAdaptation",
    "DifficultyLevel",
    "Language",
    "Scene",
    "DialogueScene",
    "QuizScene",
    "Character",
    "DialogueTurn",
    "QuizQuestion",
    "QuizOption",
    "Emotion",
    "CulturalContext",
    "QuestionType",
    "IDENTIFIER_PATTERN",
    "DIALOGUE_SCENE",
    "QUIZ_SCENE",
    "SCENE_TYPES",
    "SCENE_MODELS",
]
