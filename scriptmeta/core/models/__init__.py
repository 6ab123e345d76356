"""
Domain models for script metadata.

All models are re-exported here for convenient access:

    from scriptmeta.core.models import MetadataBlock, DependencySpecifier, Settings
"""

from scriptmeta.core.models.metadata import BlockLine, DependencySpecifier, MetadataBlock
from scriptmeta.core.models.settings import (
    DependencySettings,
    EncodingSettings,
    ScanSettings,
    Settings,
)


__all__ = [
    # metadata.py
    "BlockLine",
    "DependencySpecifier",
    "MetadataBlock",
    # settings.py
    "DependencySettings",
    "EncodingSettings",
    "ScanSettings",
    "Settings",
]
