"""
Shared fixtures for the test suite.
"""

import pytest


@pytest.fixture
def basic_params():
    """Editor defaults of the basic mode."""
    return {'minClusterSize': 6, 'minSamples': 2}


@pytest.fixture
def advanced_params(basic_params):
    return {
        **basic_params,
        'metric': 'euclidean',
        'alpha': 0.5,
        'clusterSelectionEpsilon': 0.0,
    }


@pytest.fixture
def super_advanced_params(advanced_params):
    return {
        **advanced_params,
        'algorithm': 'auto',
        'leafSize': 30,
        'approxMinSpanTree': True,
        'genMinSpanTree': False,
        'coreDistNJobs': 1,
        'clusterSelectionMethod': 'eom',
        'allowSingleCluster': False,
        'predictionData': False,
        'matchReferenceImplementation': False,
    }
