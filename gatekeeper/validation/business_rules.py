"""
Business Rule Validator

Semantic checks that span several fields or entities of a structurally
valid manifest:
- Every quiz question has at least one correct option
- True/false questions have exactly two options
- Scene IDs are unique across the manifest
- The declared total duration matches the sum of scene durations
- Dialogue turns reference characters declared in their scene

Also collects the non-fatal quality warnings attached to accepted content.
"""

import math
from typing import List, Optional

from gatekeeper.config.schema import ValidatorConfig
from gatekeeper.schemas import (
    DialogueScene,
    GameManifest,
    QuestionType,
    QuizScene,
    Scene,
)
from gatekeeper.utils.formatting import format_number


def check_business_rules(
    manifest: GameManifest,
    config: Optional[ValidatorConfig] = None,
) -> List[str]:
    """Run every business rule over a structurally valid manifest.

    Args:
        manifest: Manifest that passed structural validation.
        config: Validator configuration (defaults if omitted).

    Returns:
        List of violation messages (empty if the manifest is consistent).
    """
    config = config or ValidatorConfig()
    errors: List[str] = []

    for scene in manifest.scenes:
        errors.extend(check_scene_rules(scene, config))
    errors.extend(_check_unique_scene_ids(manifest))
    errors.extend(_check_total_duration(manifest, config))

    return errors


def check_scene_rules(scene: Scene, config: Optional[ValidatorConfig] = None) -> List[str]:
    """Run the rules that only need a single scene."""
    config = config or ValidatorConfig()
    errors: List[str] = []

    if isinstance(scene, QuizScene):
        for question in scene.questions:
            if not any(option.is_correct for option in question.options):
                errors.append(f"Question {question.question_id} has no correct answer")
            if question.question_type == QuestionType.TRUE_FALSE and len(question.options) != 2:
                errors.append(
                    f"Question {question.question_id} is true_false "
                    f"but has {len(question.options)} options"
                )
    elif isinstance(scene, DialogueScene) and config.enforce_character_references:
        errors.extend(_unknown_character_references(scene))

    return errors


def _check_unique_scene_ids(manifest: GameManifest) -> List[str]:
    """Report each duplicated scene ID once, at its first repeat."""
    errors = []
    seen = set()
    reported = set()
    for scene in manifest.scenes:
        if scene.scene_id in seen and scene.scene_id not in reported:
            errors.append(f"Duplicate scene ID: {scene.scene_id}")
            reported.add(scene.scene_id)
        seen.add(scene.scene_id)
    return errors


def _check_total_duration(manifest: GameManifest, config: ValidatorConfig) -> List[str]:
    scenes_total = math.fsum(scene.scene_duration for scene in manifest.scenes)
    if abs(scenes_total - manifest.total_duration) > config.duration_tolerance_seconds:
        return [
            f"Total duration mismatch: manifest says {format_number(manifest.total_duration)}s "
            f"but scenes total {format_number(scenes_total)}s"
        ]
    return []


def _unknown_character_references(scene: DialogueScene) -> List[str]:
    declared = {character.character_id for character in scene.characters}
    return [
        f"Dialogue turn {index} in scene {scene.scene_id} "
        f"references unknown character {turn.character_id}"
        for index, turn in enumerate(scene.dialogue_turns)
        if turn.character_id not in declared
    ]


def collect_warnings(
    manifest: GameManifest,
    config: Optional[ValidatorConfig] = None,
) -> List[str]:
    """Collect non-fatal quality warnings for an accepted manifest."""
    config = config or ValidatorConfig()
    warnings: List[str] = []
    for scene in manifest.scenes:
        warnings.extend(collect_scene_warnings(scene, config))
    return warnings


def collect_scene_warnings(scene: Scene, config: Optional[ValidatorConfig] = None) -> List[str]:
    """Collect non-fatal quality warnings for a single scene.

    - Scenes shorter than ``short_scene_seconds``
    - Quizzes with more than ``max_quiz_questions`` questions
    - Undeclared character references, unless they are enforced as errors
    """
    config = config or ValidatorConfig()
    warnings: List[str] = []

    if scene.scene_duration < config.short_scene_seconds:
        warnings.append(
            f"Scene {scene.scene_id} is very short ({format_number(scene.scene_duration)}s)"
        )

    if isinstance(scene, QuizScene) and len(scene.questions) > config.max_quiz_questions:
        warnings.append(
            f"Quiz {scene.scene_id} has {len(scene.questions)} questions - consider splitting"
        )

    if isinstance(scene, DialogueScene) and not config.enforce_character_references:
        warnings.extend(_unknown_character_references(scene))

    return warnings


def check_content_size(size_bytes: int, config: Optional[ValidatorConfig] = None) -> List[str]:
    """Warn when serialized content exceeds the configured size advisory."""
    config = config or ValidatorConfig()
    limit_kb = config.manifest_size_warning_kb
    if limit_kb and size_bytes > limit_kb * 1024:
        return [f"Manifest size {round(size_bytes / 1024)}KB exceeds recommended {limit_kb}KB"]
    return []
