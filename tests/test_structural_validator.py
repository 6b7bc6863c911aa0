"""
Test structural validation against the per-mode schemas.

Tests:
1. Required fields and optional fields set to None
2. Type checks (numbers, booleans, enum members)
3. Integrality and inclusive bounds
4. Mode nesting: fields outside the active tier are ignored
"""

import math

import numpy as np
import pytest

from hdbscan_params.validation.validator import (
    StructuralValidator,
    is_number,
    validate_structure,
)


def test_valid_basic_params(basic_params):
    result = validate_structure(basic_params, 'basic')
    assert result.is_valid
    assert result.errors == {}


def test_valid_super_advanced_params(super_advanced_params):
    assert validate_structure(super_advanced_params, 'super-advanced').is_valid


def test_missing_required_field():
    result = validate_structure({}, 'basic')
    assert not result.is_valid
    assert result.errors == {'minClusterSize': ('minClusterSize is required',)}


def test_required_field_set_to_none():
    result = validate_structure({'minClusterSize': None}, 'basic')
    assert result.errors['minClusterSize'] == ('minClusterSize is required',)


def test_optional_field_set_to_none_is_absent():
    result = validate_structure({'minClusterSize': 6, 'minSamples': None}, 'basic')
    assert result.is_valid


@pytest.mark.parametrize('value', ['6', True, math.nan, math.inf, [6]])
def test_non_numeric_values(value):
    result = validate_structure({'minClusterSize': value}, 'basic')
    assert result.errors['minClusterSize'] == ('minClusterSize must be a finite number',)


def test_type_error_suppresses_range_checks():
    result = validate_structure({'minClusterSize': 6, 'minSamples': -math.inf}, 'basic')
    assert result.errors == {'minSamples': ('minSamples must be a finite number',)}


def test_non_integral_value():
    result = validate_structure({'minClusterSize': 6.5}, 'basic')
    assert result.errors['minClusterSize'] == ('minClusterSize must be an integer',)


def test_integral_float_is_accepted():
    assert validate_structure({'minClusterSize': 6.0}, 'basic').is_valid


def test_integer_and_range_messages_accumulate():
    result = validate_structure({'minClusterSize': 1.5}, 'basic')
    assert result.errors['minClusterSize'] == (
        'minClusterSize must be an integer',
        'minClusterSize must be at least 2',
    )


@pytest.mark.parametrize('value,message', [
    (1, 'minClusterSize must be at least 2'),
    (1001, 'minClusterSize cannot exceed 1000'),
])
def test_min_cluster_size_bounds(value, message):
    result = validate_structure({'minClusterSize': value}, 'basic')
    assert result.errors['minClusterSize'] == (message,)


@pytest.mark.parametrize('value', [2, 1000])
def test_bounds_are_inclusive(value):
    assert validate_structure({'minClusterSize': value}, 'basic').is_valid


def test_min_samples_bounds():
    low = validate_structure({'minClusterSize': 6, 'minSamples': 0}, 'basic')
    high = validate_structure({'minClusterSize': 6, 'minSamples': 101}, 'basic')
    assert low.errors == {'minSamples': ('minSamples must be at least 1',)}
    assert high.errors == {'minSamples': ('minSamples cannot exceed 100',)}


def test_real_bounds(advanced_params):
    params = {**advanced_params, 'alpha': 1.5, 'clusterSelectionEpsilon': -0.1}
    result = validate_structure(params, 'advanced')
    assert result.errors == {
        'alpha': ('alpha cannot exceed 1',),
        'clusterSelectionEpsilon': ('clusterSelectionEpsilon must be at least 0',),
    }


def test_epsilon_has_no_upper_bound(advanced_params):
    params = {**advanced_params, 'clusterSelectionEpsilon': 1e6}
    assert validate_structure(params, 'advanced').is_valid


def test_invalid_enum_member(advanced_params):
    result = validate_structure({**advanced_params, 'metric': 'chebyshev'}, 'advanced')
    assert result.errors['metric'] == (
        'metric must be one of: euclidean, manhattan, cosine, haversine',
    )


def test_invalid_boolean(super_advanced_params):
    params = {**super_advanced_params, 'approxMinSpanTree': 'yes', 'predictionData': 1}
    result = validate_structure(params, 'super-advanced')
    assert result.errors == {
        'approxMinSpanTree': ('approxMinSpanTree must be a boolean',),
        'predictionData': ('predictionData must be a boolean',),
    }


def test_field_outside_tier_is_ignored():
    params = {'minClusterSize': 6, 'algorithm': 'invalid_value'}
    assert validate_structure(params, 'basic').is_valid

    result = validate_structure(params, 'super-advanced')
    assert not result.is_valid
    assert 'algorithm' in result.errors


def test_numpy_scalars_are_accepted(super_advanced_params):
    params = {
        **super_advanced_params,
        'minClusterSize': np.int64(12),
        'alpha': np.float32(0.25),
        'allowSingleCluster': np.bool_(True),
    }
    assert validate_structure(params, 'super-advanced').is_valid


def test_huge_integer_is_out_of_range():
    result = validate_structure({'minClusterSize': 10 ** 400}, 'basic')
    assert result.errors['minClusterSize'] == ('minClusterSize cannot exceed 1000',)


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        StructuralValidator().validate({'minClusterSize': 6}, 'expert')


def test_is_number():
    assert is_number(3)
    assert is_number(0.5)
    assert not is_number(False)
    assert not is_number(math.nan)
    assert not is_number('3')
