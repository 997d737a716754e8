"""
Centralized Help Text Constants

CLI help text constants and exit codes, kept in one place so the command
and its tests agree on them.
"""

# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    VALIDATION_FAILED = 1
    MISSING_REQUIRED_OPTION = 2
    INVALID_CONFIGURATION = 3


VALIDATE_HELP = "Validate generated game manifests before deployment."

VALIDATE_INPUT_HELP = "JSON file to validate"
VALIDATE_BATCH_HELP = "Glob pattern for batch validation (e.g., 'manifests/*.json')"
VALIDATE_TYPE_HELP = (
    "Content type: a full game manifest, a single scene dispatched on its "
    "scene_type, or a dialogue/quiz scene (default: game)"
)
VALIDATE_STRICT_HELP = "Fail on warnings in addition to errors"
VALIDATE_REPORT_HELP = "Write a JSON report to this path"
VALIDATE_SANITIZED_HELP = "Write the sanitized content of a valid --input file to this path"
VALIDATE_STATS_HELP = "Print validation statistics after the run"
CONFIG_HELP = "Path to a YAML configuration file"
LOG_LEVEL_HELP = "Logging level (default: from configuration, otherwise info)"
