"""Testing utilities – fakes for exercising instrumented code."""
from mp_metrics.testing.fakes import RecordingDataStore

__all__ = ["RecordingDataStore"]
