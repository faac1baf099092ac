"""
zkscrypto Global Parameters

The spending key generator and the Rescue constants are derived once per
process. The first caller builds them under a lock; later calls read the
cached instance without locking.
"""

from __future__ import annotations
import logging
import threading
import time
from dataclasses import dataclass
from typing import Optional

from zkscrypto.constants import GENERATOR_TAG, RESCUE_TAG
from zkscrypto.crypto.curve import Point, hash_to_point, compress
from zkscrypto.crypto.rescue import RescueParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CryptoParams:
    """Process-wide curve and hash parameters."""
    generator: Point
    rescue: RescueParams


_params: Optional[CryptoParams] = None
_lock = threading.Lock()


def _build_params() -> CryptoParams:
    started = time.perf_counter()

    generator = hash_to_point(GENERATOR_TAG)
    rescue = RescueParams.generate(RESCUE_TAG)

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug(
        f"Crypto parameters initialized in {elapsed_ms:.1f} ms "
        f"(generator={compress(generator).hex()[:16]}..., {rescue})"
    )
    return CryptoParams(generator=generator, rescue=rescue)


def get_params() -> CryptoParams:
    """Return the process-wide parameters, building them on first use."""
    global _params
    params = _params
    if params is None:
        with _lock:
            if _params is None:
                _params = _build_params()
            params = _params
    return params


def is_initialized() -> bool:
    return _params is not None
