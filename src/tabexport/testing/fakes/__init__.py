"""Testing fakes – in-memory doubles for kernel and export ports."""
from tabexport.kernel.time import FrozenClock
from tabexport.testing.fakes.clock import FakeClock
from tabexport.testing.fakes.sink import Emission, RecordingBlobSink

__all__ = [
    "Emission",
    "FakeClock",
    "FrozenClock",
    "RecordingBlobSink",
]
