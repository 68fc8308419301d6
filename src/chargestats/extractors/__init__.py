"""Secondary log extractors feeding the charge-session parser."""

from chargestats.extractors.pca import PcaChargeExtractor, PcaSummary
from chargestats.extractors.wireless import WirelessChargeExtractor

__all__ = ["PcaChargeExtractor", "PcaSummary", "WirelessChargeExtractor"]
