"""Unit tests for reading the static defaults files."""

from __future__ import annotations

import pytest

from cluster_profiles.defaults import load_amazon_images, load_defaults, read_files
from cluster_profiles.errors import DefaultsLoadError


def test_load_defaults_maps_camel_case_keys(defaults_dir):
    defaults = load_defaults(defaults_dir / "defaults.yaml")

    assert defaults.default_node_pool_name == "pool1"
    ec2 = defaults.distributions.ec2
    assert ec2.location == "us-west-2"
    assert ec2.master_instance_type == "m4.xlarge"
    assert ec2.node_pools.spot_price == "0.2"
    assert ec2.node_pools.max_count == 4
    assert defaults.distributions.acsk.zone_id == "eu-central-1a"
    assert defaults.distributions.gke.master_version == "1.11.6"


def test_missing_keys_fall_back_to_zero_values(tmp_path):
    path = tmp_path / "defaults.yaml"
    path.write_text("defaultNodePoolName: pool1\ndistributions:\n  aks:\n    location: eastus\n")

    defaults = load_defaults(path)

    aks = defaults.distributions.aks
    assert aks.location == "eastus"
    assert aks.version == ""
    assert aks.node_pools.count == 0
    assert aks.node_pools.autoscaling is False
    assert defaults.distributions.oke.node_pools.shape == ""


def test_empty_file_loads_as_empty_defaults(tmp_path):
    path = tmp_path / "defaults.yaml"
    path.write_text("")

    defaults = load_defaults(path)

    assert defaults.default_node_pool_name == ""


def test_missing_file_raises(tmp_path):
    with pytest.raises(DefaultsLoadError, match="cannot read"):
        load_defaults(tmp_path / "nope.yaml")


def test_non_mapping_document_raises(tmp_path):
    path = tmp_path / "defaults.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(DefaultsLoadError, match="must be a mapping"):
        load_defaults(path)


def test_malformed_yaml_raises(tmp_path):
    path = tmp_path / "images.yaml"
    path.write_text("ec2: [unclosed\n")

    with pytest.raises(DefaultsLoadError, match="invalid YAML"):
        load_amazon_images(path)


def test_wrong_types_raise(tmp_path):
    path = tmp_path / "defaults.yaml"
    path.write_text("distributions:\n  ec2:\n    nodePools:\n      count: many\n")

    with pytest.raises(DefaultsLoadError, match="invalid defaults"):
        load_defaults(path)


def test_read_files_returns_both_tables(defaults_dir):
    defaults, images = read_files(
        defaults_dir / "defaults.yaml",
        defaults_dir / "defaults-amazon-images.yaml",
    )

    assert defaults.default_node_pool_name == "pool1"
    assert images.ec2 == {"us-west-2": "ami-123"}
    assert images.eks == {"us-west-2": "ami-eks-456"}
