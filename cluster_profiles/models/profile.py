"""ClusterProfile data model.

A stored, named cluster-creation template.
- Unique per (distribution, name)
- The property block of its distribution is kept serialized in properties_json
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import Column, Field, SQLModel

from cluster_profiles.utils.datetime import utcnow


class ClusterProfile(SQLModel, table=True):
    """Cluster profile - persisted cluster-creation template."""

    __tablename__ = "cluster_profiles"
    __table_args__ = (
        UniqueConstraint("distribution", "name", name="uq_cluster_profiles_distribution_name"),
    )

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    cloud: str
    distribution: str = Field(index=True)  # aks | ec2 | eks | gke | oke
    location: str = Field(default="")

    # JSON-encoded provider property block (camelCase keys)
    properties_json: str = Field(default="{}", sa_column=Column(Text, nullable=False))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
