"""Default profile builder.

Turns the static defaults of one distribution into a complete cluster
creation request with a single node pool named after the configured
default node pool name.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from cluster_profiles.config import DefaultsConfig, get_settings
from cluster_profiles.defaults.loader import (
    AmazonImages,
    Defaults,
    read_files,
)
from cluster_profiles.errors import NotSupportedDistributionError
from cluster_profiles.models.cluster import (
    ACSKNodePool,
    ACSKProperties,
    AKSNodePool,
    AKSProperties,
    AmazonNodePool,
    Cloud,
    ClusterProperties,
    CreateClusterRequest,
    Distribution,
    EC2Master,
    EC2Properties,
    EKSProperties,
    GKEMaster,
    GKENodePool,
    GKEProperties,
    OKENodePool,
    OKEProperties,
)

logger = structlog.get_logger()


def get_amazon_image(images: dict[str, str], location: str) -> str:
    """Image for a location, or "" when the table has no entry for it."""
    return images.get(location, "")


def _acsk_request(defaults: Defaults, _images: AmazonImages) -> CreateClusterRequest:
    acsk = defaults.distributions.acsk
    pool = acsk.node_pools
    return CreateClusterRequest(
        location=acsk.location,
        cloud=Cloud.ALIBABA.value,
        properties=ClusterProperties(
            acsk=ACSKProperties(
                region_id=acsk.region_id,
                zone_id=acsk.zone_id,
                master_instance_type=acsk.master_instance_type,
                master_system_disk_category=acsk.master_system_disk_category,
                node_pools={
                    defaults.default_node_pool_name: ACSKNodePool(
                        instance_type=pool.instance_type,
                        system_disk_category=pool.system_disk_category,
                        count=pool.count,
                        image=pool.image,
                    ),
                },
            ),
        ),
    )


def _aks_request(defaults: Defaults, _images: AmazonImages) -> CreateClusterRequest:
    aks = defaults.distributions.aks
    pool = aks.node_pools
    return CreateClusterRequest(
        location=aks.location,
        cloud=Cloud.AZURE.value,
        properties=ClusterProperties(
            aks=AKSProperties(
                kubernetes_version=aks.version,
                node_pools={
                    defaults.default_node_pool_name: AKSNodePool(
                        autoscaling=pool.autoscaling,
                        min_count=pool.min_count,
                        max_count=pool.max_count,
                        count=pool.count,
                        instance_type=pool.instance_type,
                    ),
                },
            ),
        ),
    )


def _ec2_request(defaults: Defaults, images: AmazonImages) -> CreateClusterRequest:
    ec2 = defaults.distributions.ec2
    pool = ec2.node_pools
    image = get_amazon_image(images.ec2, ec2.location)
    return CreateClusterRequest(
        location=ec2.location,
        cloud=Cloud.AMAZON.value,
        properties=ClusterProperties(
            ec2=EC2Properties(
                node_pools={
                    defaults.default_node_pool_name: AmazonNodePool(
                        instance_type=pool.instance_type,
                        spot_price=pool.spot_price,
                        autoscaling=pool.autoscaling,
                        min_count=pool.min_count,
                        max_count=pool.max_count,
                        count=pool.count,
                        image=image,
                    ),
                },
                master=EC2Master(
                    instance_type=ec2.master_instance_type,
                    image=image,
                ),
            ),
        ),
    )


def _eks_request(defaults: Defaults, images: AmazonImages) -> CreateClusterRequest:
    eks = defaults.distributions.eks
    pool = eks.node_pools
    image = get_amazon_image(images.eks, eks.location)
    return CreateClusterRequest(
        location=eks.location,
        cloud=Cloud.AMAZON.value,
        properties=ClusterProperties(
            eks=EKSProperties(
                version=eks.version,
                node_pools={
                    defaults.default_node_pool_name: AmazonNodePool(
                        instance_type=pool.instance_type,
                        spot_price=pool.spot_price,
                        autoscaling=pool.autoscaling,
                        min_count=pool.min_count,
                        max_count=pool.max_count,
                        count=pool.count,
                        image=image,
                    ),
                },
            ),
        ),
    )


def _gke_request(defaults: Defaults, _images: AmazonImages) -> CreateClusterRequest:
    gke = defaults.distributions.gke
    pool = gke.node_pools
    return CreateClusterRequest(
        location=gke.location,
        cloud=Cloud.GOOGLE.value,
        properties=ClusterProperties(
            gke=GKEProperties(
                node_version=gke.node_version,
                node_pools={
                    defaults.default_node_pool_name: GKENodePool(
                        autoscaling=pool.autoscaling,
                        min_count=pool.min_count,
                        max_count=pool.max_count,
                        count=pool.count,
                        instance_type=pool.instance_type,
                    ),
                },
                master=GKEMaster(version=gke.master_version),
            ),
        ),
    )


def _oke_request(defaults: Defaults, _images: AmazonImages) -> CreateClusterRequest:
    oke = defaults.distributions.oke
    pool = oke.node_pools
    return CreateClusterRequest(
        location=oke.location,
        cloud=Cloud.ORACLE.value,
        properties=ClusterProperties(
            oke=OKEProperties(
                version=oke.version,
                node_pools={
                    defaults.default_node_pool_name: OKENodePool(
                        version=pool.version,
                        count=pool.count,
                        image=pool.image,
                        shape=pool.shape,
                    ),
                },
            ),
        ),
    )


_BUILDERS: dict[Distribution, Callable[[Defaults, AmazonImages], CreateClusterRequest]] = {
    Distribution.ACSK: _acsk_request,
    Distribution.AKS: _aks_request,
    Distribution.EC2: _ec2_request,
    Distribution.EKS: _eks_request,
    Distribution.GKE: _gke_request,
    Distribution.OKE: _oke_request,
}


def build_default_profile(
    distribution: str,
    config: DefaultsConfig | None = None,
) -> CreateClusterRequest:
    """Build the default cluster creation request of a distribution.

    Args:
        distribution: Distribution key (acsk, aks, ec2, eks, gke, oke)
        config: Where the defaults files live; settings when omitted

    Returns:
        Fully populated creation request

    Raises:
        NotSupportedDistributionError: Unknown distribution key
        DefaultsLoadError: Defaults files missing or malformed
    """
    if config is None:
        config = get_settings().defaults

    defaults, images = read_files(config.defaults_path, config.amazon_images_path)

    try:
        key = Distribution(distribution)
    except ValueError as exc:
        raise NotSupportedDistributionError() from exc

    logger.info("defaults.build_profile", distribution=key.value)
    return _BUILDERS[key](defaults, images)
