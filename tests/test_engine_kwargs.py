"""
Test conversion of submitted configurations to engine keyword arguments.
"""

from datetime import timezone

from hdbscan_params import ClusteringConfig, Mode, to_engine_kwargs
from hdbscan_params.params.config import ENGINE_KWARGS
from hdbscan_params.params.schema import FIELD_DESCRIPTORS


def test_every_field_has_an_engine_name():
    assert set(ENGINE_KWARGS) == set(FIELD_DESCRIPTORS)


def test_basic_kwargs():
    assert to_engine_kwargs({'minClusterSize': 6, 'minSamples': 2}, 'basic') == {
        'min_cluster_size': 6,
        'min_samples': 2,
    }


def test_unset_min_samples_is_dropped():
    assert to_engine_kwargs({'minClusterSize': 6}, 'basic') == {'min_cluster_size': 6}


def test_defaults_are_applied_for_the_tier():
    kwargs = to_engine_kwargs({'minClusterSize': 6}, 'super-advanced')
    assert kwargs['cluster_selection_method'] == 'eom'
    assert kwargs['approx_min_span_tree'] is True
    assert kwargs['leaf_size'] == 30
    assert kwargs['core_dist_n_jobs'] == 1


def test_unknown_names_are_dropped():
    assert to_engine_kwargs({'minClusterSize': 6, 'colour': 'red'}) == {'min_cluster_size': 6}


def test_clustering_config():
    config = ClusteringConfig(
        name='demo',
        mode=Mode.ADVANCED,
        parameters={'minClusterSize': 12, 'metric': 'cosine'},
    )
    assert config.created_at.tzinfo is timezone.utc
    assert config.to_engine_kwargs() == {
        'min_cluster_size': 12,
        'metric': 'cosine',
        'alpha': 1.0,
        'cluster_selection_epsilon': 0.0,
    }

    data = config.to_dict()
    assert data['id'] == config.config_id
    assert data['mode'] == 'advanced'
    assert set(data) == {'id', 'name', 'mode', 'parameters', 'createdAt'}


def test_config_ids_are_unique():
    first = ClusteringConfig(name='a', mode=Mode.BASIC, parameters={})
    second = ClusteringConfig(name='b', mode=Mode.BASIC, parameters={})
    assert first.config_id != second.config_id
