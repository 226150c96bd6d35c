"""Progress helpers (tqdm integration)."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, TypeVar

from tqdm import tqdm

T = TypeVar("T")


def iter_progress(
    iterable: Iterable[T],
    total: Optional[int] = None,
    desc: Optional[str] = None,
    enabled: bool = True,
) -> Iterator[T]:
    """Wrap iterable with tqdm if enabled, else return as-is."""
    if not enabled:
        return iter(iterable)

    formatted_desc = f"· {desc:<12} " if desc else ""
    return iter(
        tqdm(
            iterable,
            total=total,
            desc=formatted_desc,
            bar_format="{desc}: {percentage:3.0f}%|{bar:30}| {n_fmt}/{total_fmt}",
            ncols=80,
        )
    )


class ReadProgress:
    """Running read counter fed by the aggregation driver.

    Called as ``progress(total_reads, accepted_reads)``. With ``enabled`` the
    counts drive a tqdm counter; otherwise they are logged at DEBUG.
    """

    def __init__(
        self,
        desc: str = "Reads",
        enabled: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.enabled = enabled
        self.logger = logger
        self.total = 0
        self.accepted = 0
        self._bar: Optional[tqdm] = None
        if enabled:
            self._bar = tqdm(desc=f"· {desc:<12} ", unit=" reads", ncols=80)

    def __call__(self, total: int, accepted: int) -> None:
        step = total - self.total
        self.total = total
        self.accepted = accepted
        if self._bar is not None:
            self._bar.update(step)
            self._bar.set_postfix(accepted=accepted, refresh=False)
        elif self.logger is not None:
            self.logger.debug(f"Processed {total:,} reads ({accepted:,} accepted)")

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None

    def __enter__(self) -> "ReadProgress":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
