"""Kernel time – Clock port + implementations."""
from tabexport.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
