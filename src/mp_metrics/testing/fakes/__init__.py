"""Testing fakes – in-memory doubles."""
from mp_metrics.testing.fakes.data_store import RecordingDataStore

__all__ = ["RecordingDataStore"]
