"""Wire encoders for metric batches."""

from sfxlambda.core.encoding.datapoints import encode_datapoints

__all__ = ["encode_datapoints"]
