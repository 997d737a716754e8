"""
GameManifest Container Schema

Root schema of a generated training unit. A manifest carries the unit
metadata and an ordered list of dialogue and quiz scenes.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gatekeeper.schemas.scenes import IDENTIFIER_PATTERN, Scene, json_number


VERSION_PATTERN = r"^\d+\.\d+\.\d+$"


class DifficultyLevel(str, Enum):
    """Target difficulty of a training unit."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Language(str, Enum):
    """Languages a manifest can be delivered in."""
    SWEDISH = "sv"
    GERMAN = "de"
    FRENCH = "fr"
    DUTCH = "nl"
    ENGLISH = "en"


class CulturalAdaptation(BaseModel):
    """Municipality specific adaptation of a manifest.

    Attributes:
        municipality: Municipality the unit is adapted for
        region: Region of the municipality
        specific_terminology: Optional mapping of generic terms to local ones
    """
    municipality: str = Field(..., max_length=100)
    region: str = Field(..., max_length=100)
    specific_terminology: Optional[Dict[str, str]] = Field(
        None,
        description="Generic term to local term mapping"
    )


class GameManifest(BaseModel):
    """A complete generated training unit.

    The declared ``total_duration`` must match the sum of the scene
    durations; that invariant spans several scenes and is enforced by the
    business rules, not here.

    Attributes:
        game_id: Token identifier of the unit
        game_version: Semantic version (major.minor.patch)
        title: Unit title (max 200 characters)
        description: Unit description (max 2000 characters)
        target_audience: Who the unit is written for
        learning_objectives: 1-20 learning objectives
        scenes: 1-100 dialogue or quiz scenes, in play order
        total_duration: Total duration in seconds (5 minutes to 2 hours)
        difficulty_level: Beginner, intermediate or advanced
        language: Delivery language code
        cultural_adaptation: Optional municipality adaptation
    """
    game_id: str = Field(..., description="Game identifier", pattern=IDENTIFIER_PATTERN)
    game_version: str = Field(..., description="Semantic version", pattern=VERSION_PATTERN)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., max_length=2000)
    target_audience: str = Field(..., max_length=500)
    learning_objectives: List[str] = Field(..., min_length=1, max_length=20)
    scenes: List[Scene] = Field(..., min_length=1, max_length=100)
    total_duration: json_number(ge=300, le=7200) = Field(..., description="Total duration in seconds")
    difficulty_level: DifficultyLevel
    language: Language
    cultural_adaptation: Optional[CulturalAdaptation] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "game_id": "onboarding-101",
                "game_version": "1.0.0",
                "title": "Municipal onboarding",
                "description": "First day at the municipal office.",
                "target_audience": "New municipal employees",
                "learning_objectives": ["Know the office routines"],
                "scenes": [
                    {
                        "scene_id": "quiz-1",
                        "scene_type": "QuizScene",
                        "title": "Routines",
                        "questions": [
                            {
                                "question_id": "q1",
                                "question_type": "true_false",
                                "question_text": "Is the office open on Sundays?",
                                "options": [
                                    {"option_id": "yes", "text": "Yes", "is_correct": False},
                                    {"option_id": "no", "text": "No", "is_correct": True}
                                ]
                            }
                        ],
                        "passing_score": 70,
                        "scene_duration": 300
                    }
                ],
                "total_duration": 300,
                "difficulty_level": "beginner",
                "language": "sv"
            }
        }
    )
