"""
Scene Schemas

Pydantic models for the two scene variants of a game manifest. A scene is
either a dialogue sequence between characters or a quiz made of questions,
discriminated by the ``scene_type`` field.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)


# Plain token alphabet shared by every identifier field
IDENTIFIER_PATTERN = r"^[a-zA-Z0-9_-]+$"

DIALOGUE_SCENE = "DialogueScene"
QUIZ_SCENE = "QuizScene"

SCENE_TYPES = (DIALOGUE_SCENE, QUIZ_SCENE)


def _keep_integer(value: Any, handler: ValidatorFunctionWrapHandler) -> Union[int, float]:
    number = handler(value)
    # strict float validation accepts ints; hand back the submitted int
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return number


def _as_submitted(value):
    return value


def json_number(ge: Optional[float] = None, le: Optional[float] = None) -> Any:
    """Annotated type for a finite JSON number within optional bounds.

    Booleans, numeric strings, NaN and infinity are rejected. Integers stay
    integers, so a dumped model reproduces the submitted numbers.
    """
    bounds = {}
    if ge is not None:
        bounds["ge"] = ge
    if le is not None:
        bounds["le"] = le
    return Annotated[
        float,
        Field(strict=True, allow_inf_nan=False, **bounds),
        WrapValidator(_keep_integer),
        PlainSerializer(_as_submitted),
    ]


class Emotion(str, Enum):
    """Emotion a character displays while speaking a dialogue turn."""
    NEUTRAL = "neutral"
    HAPPY = "happy"
    SAD = "sad"
    CONFIDENT = "confident"
    CONCERNED = "concerned"
    EXCITED = "excited"


class CulturalContext(str, Enum):
    """Cultural setting a dialogue scene has been written for."""
    SWEDISH = "swedish"
    GERMAN = "german"
    FRENCH = "french"
    DUTCH = "dutch"


class QuestionType(str, Enum):
    """Answer model of a quiz question.

    - MULTIPLE_CHOICE: exactly one answer is expected
    - TRUE_FALSE: two options, one of them correct
    - MULTIPLE_SELECT: any number of correct options may be picked
    """
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    MULTIPLE_SELECT = "multiple_select"


class Character(BaseModel):
    """A character taking part in a dialogue scene.

    Attributes:
        character_id: Token identifier referenced by dialogue turns
        name: Display name (max 100 characters)
        role: Role in the scenario, e.g. "Case worker" (max 100 characters)
        avatar_description: Optional prompt-like avatar description
        personality_traits: Optional list of up to 10 traits
    """
    character_id: str = Field(..., description="Character identifier", pattern=IDENTIFIER_PATTERN)
    name: str = Field(..., description="Display name", min_length=1, max_length=100)
    role: str = Field(..., description="Role in the scenario", min_length=1, max_length=100)
    avatar_description: Optional[str] = Field(None, description="Avatar description", max_length=500)
    personality_traits: Optional[List[str]] = Field(
        None,
        description="Personality traits",
        max_length=10
    )


class DialogueTurn(BaseModel):
    """A single line spoken in a dialogue scene."""
    speaker: str = Field(..., description="Speaker label", min_length=1)
    character_id: str = Field(..., description="Speaking character", pattern=IDENTIFIER_PATTERN)
    text: str = Field(..., description="Spoken text", min_length=1, max_length=5000)
    emotion: Optional[Emotion] = Field(None, description="Displayed emotion")
    timing: Optional[json_number(ge=0)] = Field(
        None,
        description="Offset in seconds from the start of the scene"
    )


class QuizOption(BaseModel):
    """An answer option of a quiz question."""
    option_id: str = Field(..., description="Option identifier", pattern=IDENTIFIER_PATTERN)
    text: str = Field(..., description="Option text", min_length=1, max_length=500)
    is_correct: bool = Field(..., description="Whether this option is a correct answer", strict=True)
    feedback: Optional[str] = Field(None, description="Feedback shown after answering", max_length=1000)


class QuizQuestion(BaseModel):
    """A quiz question with 2 to 6 answer options.

    Whether at least one option is marked correct is a business rule, checked
    after the structure is known to be valid.
    """
    question_id: str = Field(..., description="Question identifier", pattern=IDENTIFIER_PATTERN)
    question_type: QuestionType = Field(..., description="Answer model")
    question_text: str = Field(..., description="Question text", min_length=10, max_length=1000)
    options: List[QuizOption] = Field(..., description="Answer options", min_length=2, max_length=6)
    explanation: Optional[str] = Field(None, description="Explanation of the answer", max_length=2000)
    learning_objective: Optional[str] = Field(
        None,
        description="Learning objective this question covers",
        max_length=500
    )
    points: Optional[json_number(ge=1, le=100)] = Field(None, description="Points awarded")
    time_limit: Optional[json_number(ge=10, le=300)] = Field(None, description="Time limit in seconds")


class DialogueScene(BaseModel):
    """A dialogue sequence between 1-10 characters (30 seconds to 30 minutes).

    Attributes:
        scene_id: Token identifier, unique within the manifest
        scene_type: Always "DialogueScene"
        title: Scene title (max 200 characters)
        description: Optional description (max 1000 characters)
        characters: Characters appearing in the scene
        dialogue_turns: Ordered dialogue lines (1-100)
        learning_objectives: Optional objectives covered by the scene
        scene_duration: Duration in seconds (30-1800)
        cultural_context: Optional cultural setting
    """
    scene_id: str = Field(..., description="Scene identifier", pattern=IDENTIFIER_PATTERN)
    scene_type: Literal["DialogueScene"]
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    characters: List[Character] = Field(..., min_length=1, max_length=10)
    dialogue_turns: List[DialogueTurn] = Field(..., min_length=1, max_length=100)
    learning_objectives: Optional[List[str]] = Field(None, max_length=10)
    scene_duration: json_number(ge=30, le=1800) = Field(..., description="Duration in seconds")
    cultural_context: Optional[CulturalContext] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "scene_id": "intro",
                "scene_type": "DialogueScene",
                "title": "Welcome to the office",
                "characters": [
                    {"character_id": "anna", "name": "Anna Svensson", "role": "Case worker"}
                ],
                "dialogue_turns": [
                    {"speaker": "Anna", "character_id": "anna", "text": "Hej! Welcome."}
                ],
                "scene_duration": 120,
                "cultural_context": "swedish"
            }
        }
    )


class QuizScene(BaseModel):
    """A quiz of 1-50 questions (1 minute to 1 hour)."""
    scene_id: str = Field(..., description="Scene identifier", pattern=IDENTIFIER_PATTERN)
    scene_type: Literal["QuizScene"]
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    questions: List[QuizQuestion] = Field(..., min_length=1, max_length=50)
    passing_score: json_number(ge=0, le=100) = Field(..., description="Score in percent required to pass")
    scene_duration: json_number(ge=60, le=3600) = Field(..., description="Duration in seconds")
    feedback_immediate: Optional[bool] = Field(None, strict=True)
    allow_retry: Optional[bool] = Field(None, strict=True)


Scene = Annotated[Union[DialogueScene, QuizScene], Field(discriminator="scene_type")]

# Maps the discriminator value to the model, used when a caller already
# knows which kind of scene it submits.
SCENE_MODELS: Dict[str, type] = {
    DIALOGUE_SCENE: DialogueScene,
    QUIZ_SCENE: QuizScene,
}
