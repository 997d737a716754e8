"""
Property-based tests for the ContentValidator.

- Arbitrary JSON-like input never raises and is rejected as structural
- Accepted manifests carry sanitized copies of their text
- The duration rule fires exactly when the mismatch exceeds the tolerance
- Statistics always add up
"""

from hypothesis import given, settings, strategies as st

from gatekeeper.validation.engine import ContentValidator
from gatekeeper.validation.report import ErrorKind
from gatekeeper.validation.sanitizer import sanitize_text
from tests.fixtures.manifests import make_dialogue_scene, make_manifest, make_quiz_scene


json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.floats() | st.text(max_size=20),
    lambda children: st.lists(children, max_size=5) | st.dictionaries(st.text(max_size=10), children, max_size=5),
    max_leaves=30,
)

titles = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    min_size=1,
    max_size=200,
)

dialogue_durations = st.integers(min_value=30, max_value=1800)
quiz_durations = st.integers(min_value=60, max_value=3600)


class TestValidationProperties:

    @given(content=json_values)
    @settings(max_examples=200)
    def test_arbitrary_input_rejected_without_raising(self, content):
        validator = ContentValidator()

        result = validator.validate_manifest(content)

        assert not result.success
        assert result.error_kind is ErrorKind.STRUCTURAL
        assert result.errors
        assert result.suggestion
        assert result.sanitized_content is None

    @given(title=titles)
    @settings(max_examples=100)
    def test_accepted_title_is_sanitized(self, title):
        validator = ContentValidator()

        result = validator.validate_manifest(make_manifest(title=title))

        assert result.success
        assert result.sanitized_content["title"] == sanitize_text(title)

    @given(
        dialogue_duration=dialogue_durations,
        quiz_duration=quiz_durations,
        total_duration=st.integers(min_value=300, max_value=7200),
    )
    @settings(max_examples=200)
    def test_duration_rule_matches_tolerance(self, dialogue_duration, quiz_duration, total_duration):
        validator = ContentValidator()
        scenes = [make_dialogue_scene(scene_duration=dialogue_duration), make_quiz_scene(scene_duration=quiz_duration)]

        result = validator.validate_manifest(make_manifest(scenes=scenes, total_duration=total_duration))

        mismatch = abs(dialogue_duration + quiz_duration - total_duration) > 60
        assert result.success is not mismatch
        if mismatch:
            assert result.errors[0].startswith("Total duration mismatch")

    @given(contents=st.lists(st.sampled_from(["valid", "mismatch", "garbage"]), max_size=15))
    @settings(max_examples=30)
    def test_statistics_add_up(self, contents):
        validator = ContentValidator()
        inputs = {
            "valid": make_manifest(),
            "mismatch": make_manifest(total_duration=1200),
            "garbage": None,
        }

        for kind in contents:
            validator.validate_manifest(inputs[kind])

        stats = validator.get_stats()
        assert stats.total == len(contents)
        assert stats.successes == contents.count("valid")
        assert stats.successes + stats.failures == stats.total
        assert sum(stats.error_counts.values()) == len(contents) - contents.count("valid")
        if stats.total:
            assert stats.success_rate == stats.successes / stats.total * 100
        else:
            assert stats.success_rate == 0
