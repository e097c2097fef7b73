"""Unit tests for building default profiles from the static defaults."""

from __future__ import annotations

import copy

import pytest

from cluster_profiles.config import DefaultsConfig
from cluster_profiles.defaults import build_default_profile, get_amazon_image
from cluster_profiles.defaults.builder import _BUILDERS
from cluster_profiles.errors import DefaultsLoadError, NotSupportedDistributionError
from cluster_profiles.models.cluster import Distribution
from tests.samples import AMAZON_IMAGES_YAML, DEFAULTS_YAML, write_defaults


@pytest.fixture
def defaults_config(defaults_dir) -> DefaultsConfig:
    return DefaultsConfig(dir=str(defaults_dir))


@pytest.mark.parametrize(
    ("distribution", "cloud"),
    [
        ("acsk", "alibaba"),
        ("aks", "azure"),
        ("ec2", "amazon"),
        ("eks", "amazon"),
        ("gke", "google"),
        ("oke", "oracle"),
    ],
)
def test_each_distribution_has_single_default_pool(defaults_config, distribution, cloud):
    request = build_default_profile(distribution, defaults_config)

    assert request.cloud == cloud
    block = getattr(request.properties, distribution)
    assert block is not None
    assert list(block.node_pools) == ["pool1"]

    others = {"acsk", "aks", "ec2", "eks", "gke", "oke"} - {distribution}
    for other in others:
        assert getattr(request.properties, other) is None


def test_unknown_distribution_raises(defaults_config):
    with pytest.raises(NotSupportedDistributionError) as exc_info:
        build_default_profile("bogus", defaults_config)

    assert exc_info.value.status_code == 400
    assert exc_info.value.error == "not supported distribution"


def test_ec2_image_resolved_by_location(defaults_config):
    request = build_default_profile("ec2", defaults_config)

    ec2 = request.properties.ec2
    assert request.location == "us-west-2"
    assert ec2.node_pools["pool1"].image == "ami-123"
    assert ec2.master.image == "ami-123"
    assert ec2.master.instance_type == "m4.xlarge"
    pool = ec2.node_pools["pool1"]
    assert pool.instance_type == "m4.large"
    assert pool.spot_price == "0.2"
    assert (pool.count, pool.min_count, pool.max_count) == (2, 1, 4)


def test_ec2_unknown_location_yields_empty_image(tmp_path):
    defaults = copy.deepcopy(DEFAULTS_YAML)
    defaults["distributions"]["ec2"]["location"] = "ap-south-1"
    write_defaults(tmp_path, defaults, AMAZON_IMAGES_YAML)

    request = build_default_profile("ec2", DefaultsConfig(dir=str(tmp_path)))

    assert request.properties.ec2.node_pools["pool1"].image == ""
    assert request.properties.ec2.master.image == ""


def test_eks_uses_eks_image_table(defaults_config):
    request = build_default_profile("eks", defaults_config)

    eks = request.properties.eks
    assert eks.version == "1.10"
    assert eks.node_pools["pool1"].image == "ami-eks-456"
    assert eks.node_pools["pool1"].spot_price == "0.3"


def test_aks_fields(defaults_config):
    request = build_default_profile("aks", defaults_config)

    aks = request.properties.aks
    assert request.location == "eastus"
    assert aks.kubernetes_version == "1.11.5"
    pool = aks.node_pools["pool1"]
    assert pool.autoscaling is True
    assert (pool.count, pool.min_count, pool.max_count) == (1, 1, 3)
    assert pool.instance_type == "Standard_B2s"


def test_gke_fields(defaults_config):
    request = build_default_profile("gke", defaults_config)

    gke = request.properties.gke
    assert gke.node_version == "1.11.5"
    assert gke.master.version == "1.11.6"
    assert gke.node_pools["pool1"].instance_type == "n1-standard-2"


def test_acsk_fields(defaults_config):
    request = build_default_profile("acsk", defaults_config)

    acsk = request.properties.acsk
    assert acsk.region_id == "eu-central-1"
    assert acsk.zone_id == "eu-central-1a"
    assert acsk.master_system_disk_category == "cloud_efficiency"
    pool = acsk.node_pools["pool1"]
    assert pool.instance_type == "ecs.sn1ne.xlarge"
    assert pool.system_disk_category == "cloud_ssd"
    assert pool.image == "centos_7"


def test_oke_fields(defaults_config):
    request = build_default_profile("oke", defaults_config)

    oke = request.properties.oke
    assert oke.version == "v1.11.5"
    pool = oke.node_pools["pool1"]
    assert pool.shape == "VM.Standard1.1"
    assert pool.image == "Oracle-Linux-7.5"
    assert pool.count == 1


def test_pool_key_follows_configured_name(tmp_path):
    defaults = copy.deepcopy(DEFAULTS_YAML)
    defaults["defaultNodePoolName"] = "workers"
    write_defaults(tmp_path, defaults, AMAZON_IMAGES_YAML)

    request = build_default_profile("gke", DefaultsConfig(dir=str(tmp_path)))

    assert list(request.properties.gke.node_pools) == ["workers"]


def test_defaults_are_read_on_every_call(tmp_path):
    write_defaults(tmp_path, DEFAULTS_YAML, AMAZON_IMAGES_YAML)
    config = DefaultsConfig(dir=str(tmp_path))
    assert build_default_profile("ec2", config).properties.ec2.master.image == "ami-123"

    write_defaults(tmp_path, DEFAULTS_YAML, {"ec2": {"us-west-2": "ami-789"}})

    assert build_default_profile("ec2", config).properties.ec2.master.image == "ami-789"


def test_missing_images_file_raises(tmp_path):
    write_defaults(tmp_path, DEFAULTS_YAML, AMAZON_IMAGES_YAML)
    (tmp_path / "defaults-amazon-images.yaml").unlink()

    with pytest.raises(DefaultsLoadError):
        build_default_profile("gke", DefaultsConfig(dir=str(tmp_path)))


def test_serialized_request_uses_camel_case(defaults_config):
    request = build_default_profile("ec2", defaults_config)

    data = request.model_dump(by_alias=True, exclude_none=True)

    assert "name" not in data
    pool = data["properties"]["ec2"]["nodePools"]["pool1"]
    assert pool["instanceType"] == "m4.large"
    assert pool["spotPrice"] == "0.2"
    assert pool["minCount"] == 1


def test_get_amazon_image():
    assert get_amazon_image({"us-west-2": "ami-123"}, "us-west-2") == "ami-123"
    assert get_amazon_image({"us-west-2": "ami-123"}, "eu-west-1") == ""


def test_every_distribution_has_a_builder():
    assert set(_BUILDERS) == set(Distribution)
