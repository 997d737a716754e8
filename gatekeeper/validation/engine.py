"""
Content Validator

Central orchestrator for generated content. Runs structural validation,
business rules, warning collection and sanitization, records statistics for
every call, and returns a ValidationResult. Nothing is raised across this
boundary: unexpected faults become a generic failure result.
Supports single manifests, single scenes, files and batches (glob).
"""

import glob
import json
import logging
import os
import time
from typing import Any, Callable, List, Optional

from gatekeeper.config.schema import ValidatorConfig
from gatekeeper.errors import ManifestLoadError
from gatekeeper.schemas import DIALOGUE_SCENE, QUIZ_SCENE
from gatekeeper.utils.logging_config import logging_config
from gatekeeper.validation.business_rules import (
    check_business_rules,
    check_content_size,
    check_scene_rules,
    collect_scene_warnings,
    collect_warnings,
)
from gatekeeper.validation.error_formatter import format_errors, recovery_suggestion
from gatekeeper.validation.report import ErrorKind, StructuralError, ValidationResult
from gatekeeper.validation.sanitizer import sanitize_content
from gatekeeper.validation.schema_validator import (
    StructuralOutcome,
    validate_scene_structure,
    validate_structure,
)
from gatekeeper.validation.stats import StatsSnapshot, ValidationStats


logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown validation error"

CONTENT_GAME = "game"
CONTENT_SCENE = "scene"
CONTENT_DIALOGUE = "dialogue"
CONTENT_QUIZ = "quiz"

CONTENT_TYPES = [CONTENT_GAME, CONTENT_SCENE, CONTENT_DIALOGUE, CONTENT_QUIZ]

# Scene variant forced by each scene-level content type
_FORCED_SCENE_TYPES = {
    CONTENT_SCENE: None,
    CONTENT_DIALOGUE: DIALOGUE_SCENE,
    CONTENT_QUIZ: QUIZ_SCENE,
}


class ContentValidator:
    """Validation gate for machine-generated game manifests.

    One instance owns its statistics; create one per process (or per test)
    and share it between threads.
    """

    def __init__(
        self,
        config: Optional[ValidatorConfig] = None,
        stats: Optional[ValidationStats] = None,
    ):
        """Initialize the validator.

        Args:
            config: Validator configuration (defaults if omitted).
            stats: Statistics tracker to record into (a new one if omitted).
        """
        self.config = config or ValidatorConfig()
        self.stats = stats or ValidationStats(top_errors_limit=self.config.top_errors_limit)

    def validate_manifest(self, content: Any) -> ValidationResult:
        """Validate a complete game manifest.

        Args:
            content: Untyped candidate manifest, typically parsed JSON.

        Returns:
            ValidationResult; ``sanitized_content`` is set only on success.
        """
        return self._run(self._validate_manifest, content)

    async def validate_manifest_async(self, content: Any) -> ValidationResult:
        """Async wrapper for request-handling runtimes.

        Validation is CPU-bound and runs to completion without yielding;
        impose an external timeout if bounded latency is needed.
        """
        return self.validate_manifest(content)

    def validate_content(self, content: Any, content_type: str = CONTENT_GAME) -> ValidationResult:
        """Validate content of the given type.

        Args:
            content: Untyped candidate content.
            content_type: 'game' for a full manifest, 'scene' for a single
                scene dispatched on its ``scene_type``, 'dialogue' or 'quiz'
                for a single scene of that variant.

        Returns:
            ValidationResult for the content. An unknown content_type yields
            a failed result with error_kind ``unknown``.
        """
        if content_type == CONTENT_GAME:
            return self.validate_manifest(content)
        if content_type not in _FORCED_SCENE_TYPES:
            start = time.time()
            return self._finish(ValidationResult(
                success=False,
                errors=[f"Unknown content type: {content_type}. Valid types: {CONTENT_TYPES}"],
                error_kind=ErrorKind.UNKNOWN,
            ), start)
        scene_type = _FORCED_SCENE_TYPES[content_type]
        return self._run(lambda c: self._validate_scene(c, scene_type), content)

    def validate_file(
        self,
        file_path: str,
        content_type: str = CONTENT_GAME,
    ) -> ValidationResult:
        """Validate a JSON file.

        Args:
            file_path: Path to the JSON file to validate.
            content_type: Content type, see validate_content.

        Returns:
            ValidationResult with ``source`` set to the file path.
        """
        start = time.time()
        try:
            data = self._load_json(file_path)
        except ManifestLoadError as e:
            result = ValidationResult(
                success=False,
                errors=[f"root: {e}"],
                suggestion=e.suggestion or "Check that the file exists and is readable.",
                error_kind=ErrorKind.STRUCTURAL,
            )
            result = self._finish(result, start)
        else:
            result = self.validate_content(data, content_type)

        result.source = file_path
        return result

    def validate_batch(
        self,
        pattern: str,
        content_type: str = CONTENT_GAME,
    ) -> List[ValidationResult]:
        """Validate multiple files matching a glob pattern.

        Args:
            pattern: Glob pattern (e.g., 'manifests/*.json').
            content_type: Content type, see validate_content.

        Returns:
            List of ValidationResult, one per file.
        """
        files = sorted(glob.glob(pattern, recursive=True))
        if not files:
            start = time.time()
            result = self._finish(ValidationResult(
                success=False,
                errors=[f"No files matching pattern: {pattern}"],
                error_kind=ErrorKind.STRUCTURAL,
            ), start)
            result.source = pattern
            return [result]

        results = [self.validate_file(fp, content_type) for fp in files]
        passed = sum(1 for r in results if r.success)
        logger.info(f"Batch validation: {passed}/{len(results)} passed for {pattern}")
        return results

    def get_stats(self) -> StatsSnapshot:
        """Return the current statistics snapshot."""
        return self.stats.snapshot()

    def _run(self, pipeline: Callable[[Any], ValidationResult], content: Any) -> ValidationResult:
        start = time.time()
        try:
            result = pipeline(content)
        except Exception:
            logger.exception("Unexpected error during content validation")
            result = ValidationResult(
                success=False,
                errors=[UNKNOWN_ERROR_MESSAGE],
                error_kind=ErrorKind.UNKNOWN,
            )
        return self._finish(result, start)

    def _finish(self, result: ValidationResult, start: float) -> ValidationResult:
        elapsed = time.time() - start
        result.duration_ms = int(elapsed * 1000)
        self.stats.record(result)

        if result.success:
            logger.debug(f"Content accepted with {len(result.warnings)} warning(s)")
        else:
            logger.warning(
                f"Content rejected ({result.error_kind.value}): "
                f"{len(result.errors)} error(s), first: {result.errors[0]}"
            )
        logging_config.log_operation_timing("Content validation", elapsed)
        return result

    def _validate_manifest(self, content: Any) -> ValidationResult:
        outcome = validate_structure(content)
        if not outcome.ok:
            return self._structural_failure(outcome.errors)

        manifest = outcome.value
        rule_errors = check_business_rules(manifest, self.config)
        if rule_errors:
            return ValidationResult(
                success=False,
                errors=rule_errors,
                error_kind=ErrorKind.BUSINESS_RULE,
            )

        warnings = collect_warnings(manifest, self.config)
        return self._accept(manifest, warnings)

    def _validate_scene(self, content: Any, scene_type: Optional[str]) -> ValidationResult:
        outcome: StructuralOutcome = validate_scene_structure(content, scene_type)
        if not outcome.ok:
            return self._structural_failure(outcome.errors)

        scene = outcome.value
        rule_errors = check_scene_rules(scene, self.config)
        if rule_errors:
            return ValidationResult(
                success=False,
                errors=rule_errors,
                error_kind=ErrorKind.BUSINESS_RULE,
            )

        warnings = collect_scene_warnings(scene, self.config)
        return self._accept(scene, warnings)

    def _structural_failure(self, errors: List[StructuralError]) -> ValidationResult:
        return ValidationResult(
            success=False,
            errors=format_errors(errors),
            suggestion=recovery_suggestion(errors),
            error_kind=ErrorKind.STRUCTURAL,
        )

    def _accept(self, model, warnings: List[str]) -> ValidationResult:
        """Build the success result with a sanitized copy of the model."""
        # exclude_unset keeps the submitted shape: absent optionals stay absent
        sanitized = sanitize_content(model.model_dump(mode="json", exclude_unset=True))
        size_bytes = len(json.dumps(sanitized, ensure_ascii=False).encode("utf-8"))
        warnings.extend(check_content_size(size_bytes, self.config))
        return ValidationResult(
            success=True,
            warnings=warnings,
            sanitized_content=sanitized,
        )

    def _load_json(self, file_path: str) -> Any:
        """Load and parse a JSON file.

        Raises:
            ManifestLoadError: If the file is missing, unreadable or not JSON.
        """
        if not os.path.exists(file_path):
            raise ManifestLoadError(f"File not found: {file_path}", path=file_path)
        if not os.path.isfile(file_path):
            raise ManifestLoadError(f"Path is not a file: {file_path}", path=file_path)

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ManifestLoadError(
                f"Invalid JSON: {e}",
                path=file_path,
                suggestion="Check that the file contains valid JSON.",
            ) from e
        except (IOError, UnicodeDecodeError) as e:
            raise ManifestLoadError(f"Cannot read file: {e}", path=file_path) from e
