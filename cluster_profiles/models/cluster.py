"""Cluster creation wire models.

These are the JSON shapes exchanged with API callers: the per-distribution
property blocks, the cluster creation request and the profile
request/response envelopes. JSON keys are camelCase; attributes are
snake_case. Unset fields are ``None`` and are dropped from responses.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Cloud(str, Enum):
    """Cloud provider tags."""

    ALIBABA = "alibaba"
    AMAZON = "amazon"
    AZURE = "azure"
    GOOGLE = "google"
    ORACLE = "oracle"


class Distribution(str, Enum):
    """Cluster distributions, one property block each."""

    ACSK = "acsk"
    AKS = "aks"
    EC2 = "ec2"
    EKS = "eks"
    GKE = "gke"
    OKE = "oke"


DISTRIBUTION_CLOUDS: dict[Distribution, Cloud] = {
    Distribution.ACSK: Cloud.ALIBABA,
    Distribution.AKS: Cloud.AZURE,
    Distribution.EC2: Cloud.AMAZON,
    Distribution.EKS: Cloud.AMAZON,
    Distribution.GKE: Cloud.GOOGLE,
    Distribution.OKE: Cloud.ORACLE,
}


class WireModel(BaseModel):
    """Base for camelCase JSON models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -- Alibaba ACSK --


class ACSKNodePool(WireModel):
    instance_type: str | None = None
    system_disk_category: str | None = None
    count: int | None = None
    image: str | None = None


class ACSKProperties(WireModel):
    region_id: str | None = None
    zone_id: str | None = None
    master_instance_type: str | None = None
    master_system_disk_category: str | None = None
    node_pools: dict[str, ACSKNodePool] | None = None


# -- Azure AKS --


class AKSNodePool(WireModel):
    autoscaling: bool | None = None
    min_count: int | None = None
    max_count: int | None = None
    count: int | None = None
    instance_type: str | None = None


class AKSProperties(WireModel):
    kubernetes_version: str | None = None
    node_pools: dict[str, AKSNodePool] | None = None


# -- Amazon EC2 / EKS --


class AmazonNodePool(WireModel):
    """Node pool shared by EC2 and EKS."""

    instance_type: str | None = None
    spot_price: str | None = None
    autoscaling: bool | None = None
    min_count: int | None = None
    max_count: int | None = None
    count: int | None = None
    image: str | None = None


class EC2Master(WireModel):
    instance_type: str | None = None
    image: str | None = None


class EC2Properties(WireModel):
    node_pools: dict[str, AmazonNodePool] | None = None
    master: EC2Master | None = None


class EKSProperties(WireModel):
    version: str | None = None
    node_pools: dict[str, AmazonNodePool] | None = None


# -- Google GKE --


class GKENodePool(WireModel):
    autoscaling: bool | None = None
    min_count: int | None = None
    max_count: int | None = None
    count: int | None = None
    instance_type: str | None = None


class GKEMaster(WireModel):
    version: str | None = None


class GKEProperties(WireModel):
    node_version: str | None = None
    node_pools: dict[str, GKENodePool] | None = None
    master: GKEMaster | None = None


# -- Oracle OKE --


class OKENodePool(WireModel):
    version: str | None = None
    count: int | None = None
    min_count: int | None = None
    max_count: int | None = None
    image: str | None = None
    shape: str | None = None


class OKEProperties(WireModel):
    version: str | None = None
    node_pools: dict[str, OKENodePool] | None = None


class ClusterProperties(WireModel):
    """Provider property blocks; callers populate exactly one."""

    acsk: ACSKProperties | None = None
    aks: AKSProperties | None = None
    ec2: EC2Properties | None = None
    eks: EKSProperties | None = None
    gke: GKEProperties | None = None
    oke: OKEProperties | None = None


class CreateClusterRequest(WireModel):
    """Cluster creation request, as produced for a default profile."""

    name: str | None = None
    location: str
    cloud: str
    properties: ClusterProperties


class ClusterProfileRequest(WireModel):
    """Create/update payload for a stored profile."""

    name: str = Field(min_length=1)
    location: str = ""
    cloud: str
    properties: ClusterProperties = Field(default_factory=ClusterProperties)


class ClusterProfileResponse(WireModel):
    """Stored profile projection."""

    name: str
    location: str
    cloud: str
    properties: ClusterProperties
