from .color_types import (
    ColorKind,
    ChannelType,
    ChannelInfo,
    ColorTriple,
    HUE_FAMILIES,
    hue_family,
    HUE_CHANNEL_INDEX,
)
from .cel_types import CelIndex

__all__ = [
    "ColorKind",
    "ChannelType",
    "ChannelInfo",
    "ColorTriple",
    "HUE_FAMILIES",
    "hue_family",
    "HUE_CHANNEL_INDEX",
    "CelIndex",
]
