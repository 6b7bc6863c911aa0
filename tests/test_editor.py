"""
Test the mode-specific editors.

Tests:
1. Factory and defaults per mode
2. Input normalization and tier checks
3. Feedback merging and submission gating
4. Submission builds a ClusteringConfig
"""

import asyncio
import math

import pytest

from hdbscan_params import (
    AdvancedEditor,
    BasicEditor,
    ClusteringConfig,
    Mode,
    SubmissionBlockedError,
    SuperAdvancedEditor,
    create_editor,
    schema_for,
)
from hdbscan_params.editor import normalize_input


@pytest.mark.parametrize('mode,editor_class', [
    ('basic', BasicEditor),
    ('advanced', AdvancedEditor),
    ('super-advanced', SuperAdvancedEditor),
])
def test_create_editor(mode, editor_class):
    editor = create_editor(mode)
    assert type(editor) is editor_class
    assert editor.mode is Mode.from_string(mode)


def test_create_editor_unknown_mode():
    with pytest.raises(ValueError):
        create_editor('expert')


@pytest.mark.parametrize('mode', list(Mode))
def test_defaults_are_valid(mode):
    editor = create_editor(mode)
    editor.mount()
    feedback = editor.feedback()
    assert feedback.is_valid
    assert feedback.field_errors == {}
    assert set(editor.params) <= set(schema_for(mode).field_names)


def test_basic_defaults_can_be_submitted():
    editor = BasicEditor()
    editor.mount()
    assert editor.can_submit


@pytest.mark.parametrize('mode', [Mode.ADVANCED, Mode.SUPER_ADVANCED])
def test_default_alpha_is_flagged(mode):
    # alpha defaults to 1.0, above the high-alpha threshold
    strict = create_editor(mode)
    relaxed = create_editor(mode, block_on_dependency_issues=False)
    strict.mount()
    relaxed.mount()

    assert any('alpha' in w for w in strict.feedback().warnings)
    assert not strict.can_submit
    assert relaxed.can_submit


@pytest.mark.parametrize('mode', list(Mode))
def test_layout_covers_every_field(mode):
    editor = create_editor(mode)
    layout = editor.get_layout()
    laid_out = [name for section in layout.sections for name in section.fields]
    assert sorted(laid_out) == sorted(schema_for(mode).field_names)


def test_layout_option_labels():
    layout = SuperAdvancedEditor().get_layout().to_dict()
    assert layout['optionLabels']['clusterSelectionMethod']['eom'] == 'Excess of Mass (EOM)'
    assert set(layout['optionLabels']['algorithm']) == {'auto', 'ball_tree', 'kd_tree', 'brute'}


def test_initial_params_override_defaults():
    editor = BasicEditor({'minClusterSize': 20})
    assert editor.params == {'minClusterSize': 20}


@pytest.mark.parametrize('value,expected', [
    ('', None),
    (None, None),
    (math.nan, None),
    (0, 0),
    (0.0, 0.0),
    ('eom', 'eom'),
    (False, False),
])
def test_normalize_input(value, expected):
    assert normalize_input(value) == expected


def test_field_outside_tier_is_rejected():
    editor = BasicEditor()
    with pytest.raises(KeyError):
        editor.update_param('algorithm', 'kd_tree')
    with pytest.raises(KeyError):
        editor.update_params({'minSamples': 3, 'alpha': 0.5})
    assert editor.params == BasicEditor.default_params


def test_cleared_input_unsets_field_and_zero_is_kept():
    async def scenario():
        editor = BasicEditor(debounce_ms=10)
        editor.mount()
        editor.update_param('minSamples', '')
        assert 'minSamples' not in editor.params

        editor.update_param('minSamples', 0)
        await asyncio.sleep(0.05)
        return editor

    editor = asyncio.run(scenario())
    assert editor.params['minSamples'] == 0
    assert editor.feedback().field_errors == {'minSamples': ('minSamples must be at least 1',)}


def test_dependency_error_blocks_submission():
    submitted = []

    async def scenario():
        editor = BasicEditor(debounce_ms=10, on_submit=submitted.append)
        editor.mount()
        editor.update_param('minSamples', 8)
        assert editor.feedback().is_validating
        assert not editor.can_submit
        await asyncio.sleep(0.05)
        return editor

    editor = asyncio.run(scenario())
    feedback = editor.feedback()
    assert feedback.is_valid
    assert not feedback.is_validating
    assert feedback.has_dependency_issues
    assert len(feedback.general_errors) == 1
    assert not feedback.can_submit

    with pytest.raises(SubmissionBlockedError) as excinfo:
        editor.submit()
    assert excinfo.value.feedback.general_errors == feedback.general_errors
    assert submitted == []


def test_relaxed_policy_allows_dependency_warnings():
    strict = BasicEditor({'minClusterSize': 6, 'minSamples': 6})
    relaxed = BasicEditor({'minClusterSize': 6, 'minSamples': 6},
                          block_on_dependency_issues=False)
    strict.mount()
    relaxed.mount()

    assert not strict.can_submit
    assert relaxed.can_submit


def test_relaxed_policy_still_blocks_dependency_errors():
    editor = BasicEditor({'minClusterSize': 6, 'minSamples': 8},
                         block_on_dependency_issues=False)
    editor.mount()
    assert not editor.can_submit


def test_structural_error_blocks_submission():
    editor = BasicEditor({'minClusterSize': 1})
    editor.mount()
    with pytest.raises(SubmissionBlockedError, match="do not match the schema"):
        editor.submit()


def test_feedback_merges_both_channels():
    editor = BasicEditor({'minClusterSize': 3, 'minSamples': 3})
    editor.mount()
    feedback = editor.feedback()

    assert feedback.warnings[0].startswith('A very small minClusterSize')
    assert 'equal to minClusterSize' in feedback.warnings[1]
    assert feedback.suggestions == ('Consider setting minSamples to 2 for more flexibility.',)
    assert feedback.to_dict()['hasDependencyIssues'] is True


def test_submit_validates_immediately_and_applies_defaults():
    submitted = []

    async def scenario():
        with AdvancedEditor(debounce_ms=1000, on_submit=submitted.append) as editor:
            editor.update_params({'alpha': 0.5, 'metric': 'manhattan'})
            editor.update_param('clusterSelectionEpsilon', None)
            assert editor.live.is_validating
            return editor.submit(name='manhattan run')

    config = asyncio.run(scenario())
    assert isinstance(config, ClusteringConfig)
    assert submitted == [config]
    assert config.name == 'manhattan run'
    assert config.mode is Mode.ADVANCED
    assert config.parameters == {
        'minClusterSize': 6,
        'minSamples': 2,
        'metric': 'manhattan',
        'alpha': 0.5,
        'clusterSelectionEpsilon': 0.0,
    }


def test_submit_default_name():
    config = SuperAdvancedEditor(block_on_dependency_issues=False).submit()
    assert config.name == 'super-advanced configuration'
    assert config.parameters['leafSize'] == 30


def test_context_manager_disposes_live_validation():
    with BasicEditor() as editor:
        assert editor.feedback().is_valid
    assert editor.live.is_disposed
