"""
Test cross-field dependency rules.

Tests:
1. minSamples against minClusterSize (error, warning)
2. Epsilon, alpha, leaf size, core distance jobs and single cluster warnings
3. Rules only read real numbers
4. DependencyWatcher recomputes on value changes only
"""

import numpy as np

from hdbscan_params.validation.dependencies import (
    DependencyValidator,
    DependencyWatcher,
    validate_dependencies,
)
from hdbscan_params.validation.validator import validate_structure


def test_clean_params_have_no_issues(basic_params):
    result = validate_dependencies(basic_params)
    assert not result.has_issues
    assert result.to_dict() == {
        'errors': [],
        'warnings': [],
        'suggestions': [],
        'hasIssues': False,
    }


def test_min_samples_above_min_cluster_size_is_an_error():
    result = validate_dependencies({'minClusterSize': 6, 'minSamples': 8})
    assert len(result.errors) == 1
    assert 'minSamples cannot exceed minClusterSize' in result.errors[0]
    assert result.suggestions == ('Set minSamples to 6 or less so clusters can form.',)
    assert result.has_issues


def test_min_samples_equal_to_min_cluster_size_is_a_warning():
    result = validate_dependencies({'minClusterSize': 6, 'minSamples': 6})
    assert result.errors == ()
    assert len(result.warnings) == 1
    assert 'equal to minClusterSize' in result.warnings[0]
    assert result.suggestions == ('Consider setting minSamples to 5 for more flexibility.',)


def test_high_epsilon():
    result = validate_dependencies({'minClusterSize': 6, 'clusterSelectionEpsilon': 0.6})
    assert len(result.warnings) == 1
    assert 'clusterSelectionEpsilon' in result.warnings[0]
    assert len(result.suggestions) == 1


def test_epsilon_threshold_is_exclusive():
    assert not validate_dependencies({'clusterSelectionEpsilon': 0.5}).has_issues


def test_extreme_alpha():
    low = validate_dependencies({'alpha': 0.05})
    high = validate_dependencies({'alpha': 0.95})
    assert 'too many small clusters' in low.warnings[0]
    assert 'few large clusters' in high.warnings[0]
    assert low.suggestions == () and high.suggestions == ()
    assert not validate_dependencies({'alpha': 0.5}).has_issues


def test_small_leaf_size_for_tree_algorithms():
    result = validate_dependencies({'algorithm': 'kd_tree', 'leafSize': 5})
    assert 'kd_tree' in result.warnings[0]
    assert len(result.suggestions) == 1


def test_leaf_size_ignored_without_tree():
    assert not validate_dependencies({'algorithm': 'brute', 'leafSize': 5}).has_issues
    assert not validate_dependencies({'algorithm': 'auto', 'leafSize': 5}).has_issues
    assert not validate_dependencies({'leafSize': 5}).has_issues


def test_many_core_dist_jobs():
    assert validate_dependencies({'coreDistNJobs': 9}).warnings
    assert not validate_dependencies({'coreDistNJobs': 8}).has_issues


def test_single_cluster_with_large_min_cluster_size():
    result = validate_dependencies({'allowSingleCluster': True, 'minClusterSize': 60})
    assert 'single giant cluster' in result.warnings[0]
    assert not validate_dependencies(
        {'allowSingleCluster': False, 'minClusterSize': 60}
    ).has_issues


def test_single_cluster_accepts_numpy_booleans():
    params = {'allowSingleCluster': np.bool_(True), 'minClusterSize': 60}
    assert validate_structure(params, 'super-advanced').is_valid
    assert 'single giant cluster' in validate_dependencies(params).warnings[0]

    params['allowSingleCluster'] = np.bool_(False)
    assert not validate_dependencies(params).has_issues


def test_single_cluster_ignores_truthy_non_booleans():
    assert not validate_dependencies(
        {'allowSingleCluster': 1, 'minClusterSize': 60}
    ).has_issues


def test_every_applicable_rule_fires_in_order():
    result = validate_dependencies({
        'minClusterSize': 60,
        'minSamples': 60,
        'clusterSelectionEpsilon': 0.9,
        'alpha': 0.01,
        'algorithm': 'ball_tree',
        'leafSize': 2,
        'coreDistNJobs': 16,
        'allowSingleCluster': True,
    })
    assert result.errors == ()
    assert len(result.warnings) == 6
    assert 'equal to minClusterSize' in result.warnings[0]
    assert 'clusterSelectionEpsilon' in result.warnings[1]
    assert 'alpha' in result.warnings[2]
    assert 'leafSize' in result.warnings[3]
    assert 'coreDistNJobs' in result.warnings[4]
    assert 'allowSingleCluster' in result.warnings[5]


def test_structurally_broken_values_do_not_raise():
    result = DependencyValidator().validate({
        'minClusterSize': 'six',
        'minSamples': None,
        'alpha': True,
        'algorithm': 3,
        'leafSize': 'x',
    })
    assert not result.has_issues


def test_watcher_caches_until_values_change(basic_params):
    calls = []

    class CountingValidator(DependencyValidator):
        def validate(self, params):
            calls.append(dict(params))
            return super().validate(params)

    watcher = DependencyWatcher(CountingValidator())
    assert watcher.result is None

    first = watcher(basic_params)
    assert watcher(dict(basic_params)) is first
    assert len(calls) == 1

    # In-place edits are detected
    basic_params['minSamples'] = 9
    second = watcher(basic_params)
    assert len(calls) == 2
    assert second.errors
    assert watcher.result is second
