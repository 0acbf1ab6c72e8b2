"""Parsing and validation of raw EDR time/speed channels."""

from .demo import DEMO_RECORD, demo_channels
from .parser import parse_channel, parse_channels, split_tokens
from .samples import MIN_SAMPLES, Sample, SampleSet, build_sample_set

__all__ = [
    "DEMO_RECORD",
    "MIN_SAMPLES",
    "Sample",
    "SampleSet",
    "build_sample_set",
    "demo_channels",
    "parse_channel",
    "parse_channels",
    "split_tokens",
]
