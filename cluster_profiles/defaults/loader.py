"""Static distribution defaults.

Two YAML files describe what a fresh cluster of each distribution looks like:

- defaults.yaml: default node pool name plus one block per distribution
- defaults-amazon-images.yaml: machine image per location for EC2 and EKS

Both are read on every call; nothing is cached.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from cluster_profiles.errors import DefaultsLoadError

logger = structlog.get_logger()


class _DefaultsModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DefaultsACSKNodePools(_DefaultsModel):
    autoscaling: bool = False
    count: int = 0
    min_count: int = 0
    max_count: int = 0
    image: str = ""
    instance_type: str = ""
    system_disk_category: str = ""


class DefaultsAKSNodePools(_DefaultsModel):
    autoscaling: bool = False
    count: int = 0
    min_count: int = 0
    max_count: int = 0
    instance_type: str = ""


class DefaultsAmazonNodePools(_DefaultsModel):
    instance_type: str = ""
    spot_price: str = ""
    autoscaling: bool = False
    count: int = 0
    min_count: int = 0
    max_count: int = 0


class DefaultsGKENodePools(_DefaultsModel):
    autoscaling: bool = False
    count: int = 0
    min_count: int = 0
    max_count: int = 0
    instance_type: str = ""


class DefaultsOKENodePools(_DefaultsModel):
    version: str = ""
    count: int = 0
    min_count: int = 0
    max_count: int = 0
    image: str = ""
    shape: str = ""


class DefaultsACSK(_DefaultsModel):
    location: str = ""
    region_id: str = ""
    zone_id: str = ""
    master_instance_type: str = ""
    master_system_disk_category: str = ""
    node_pools: DefaultsACSKNodePools = Field(default_factory=DefaultsACSKNodePools)


class DefaultsAKS(_DefaultsModel):
    location: str = ""
    version: str = ""
    node_pools: DefaultsAKSNodePools = Field(default_factory=DefaultsAKSNodePools)


class DefaultsEC2(_DefaultsModel):
    location: str = ""
    master_instance_type: str = ""
    node_pools: DefaultsAmazonNodePools = Field(default_factory=DefaultsAmazonNodePools)


class DefaultsEKS(_DefaultsModel):
    location: str = ""
    version: str = ""
    node_pools: DefaultsAmazonNodePools = Field(default_factory=DefaultsAmazonNodePools)


class DefaultsGKE(_DefaultsModel):
    location: str = ""
    master_version: str = ""
    node_version: str = ""
    node_pools: DefaultsGKENodePools = Field(default_factory=DefaultsGKENodePools)


class DefaultsOKE(_DefaultsModel):
    location: str = ""
    version: str = ""
    node_pools: DefaultsOKENodePools = Field(default_factory=DefaultsOKENodePools)


class DefaultsDistributions(_DefaultsModel):
    acsk: DefaultsACSK = Field(default_factory=DefaultsACSK)
    aks: DefaultsAKS = Field(default_factory=DefaultsAKS)
    ec2: DefaultsEC2 = Field(default_factory=DefaultsEC2)
    eks: DefaultsEKS = Field(default_factory=DefaultsEKS)
    gke: DefaultsGKE = Field(default_factory=DefaultsGKE)
    oke: DefaultsOKE = Field(default_factory=DefaultsOKE)


class Defaults(_DefaultsModel):
    """Root of defaults.yaml."""

    default_node_pool_name: str = ""
    distributions: DefaultsDistributions = Field(default_factory=DefaultsDistributions)


class AmazonImages(_DefaultsModel):
    """Root of defaults-amazon-images.yaml: location -> image id per distribution."""

    ec2: dict[str, str] = Field(default_factory=dict)
    eks: dict[str, str] = Field(default_factory=dict)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise DefaultsLoadError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except yaml.YAMLError as exc:
        raise DefaultsLoadError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DefaultsLoadError(f"invalid YAML in {path}: top level must be a mapping")
    return data


def load_defaults(path: str | Path) -> Defaults:
    """Load distribution defaults from a YAML file."""
    path = Path(path)
    try:
        return Defaults.model_validate(_read_yaml(path))
    except PydanticValidationError as exc:
        raise DefaultsLoadError(f"invalid defaults in {path}: {exc}") from exc


def load_amazon_images(path: str | Path) -> AmazonImages:
    """Load the Amazon image lookup table from a YAML file."""
    path = Path(path)
    try:
        return AmazonImages.model_validate(_read_yaml(path))
    except PydanticValidationError as exc:
        raise DefaultsLoadError(f"invalid image table in {path}: {exc}") from exc


def read_files(
    defaults_path: str | Path,
    amazon_images_path: str | Path,
) -> tuple[Defaults, AmazonImages]:
    """Read both defaults files."""
    logger.debug(
        "defaults.read",
        defaults_path=str(defaults_path),
        amazon_images_path=str(amazon_images_path),
    )
    defaults = load_defaults(defaults_path)
    images = load_amazon_images(amazon_images_path)
    return defaults, images
