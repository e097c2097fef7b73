"""Static distribution defaults and the default profile builder."""

from cluster_profiles.defaults.builder import build_default_profile, get_amazon_image
from cluster_profiles.defaults.loader import (
    AmazonImages,
    Defaults,
    load_amazon_images,
    load_defaults,
    read_files,
)

__all__ = [
    "AmazonImages",
    "Defaults",
    "build_default_profile",
    "get_amazon_image",
    "load_amazon_images",
    "load_defaults",
    "read_files",
]
