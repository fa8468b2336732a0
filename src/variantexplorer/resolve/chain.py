"""Ordered fallback chain: first success wins, otherwise collect every failure.

Each strategy is a named zero-argument coroutine factory. Strategies run
strictly one after another; a strategy that raises is recorded and the next
one is tried. Strategies whose ``applies`` flag is false are recorded as
skipped without running.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

from variantexplorer.errors import StrategiesExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Strategy(Generic[T]):
    """One resolution attempt."""

    name: str
    run: Callable[[], Awaitable[T]]
    applies: bool = True
    skip_reason: str = "not applicable"


async def run_chain(strategies: list[Strategy[T]], subject: str = "variant") -> T:
    """Run strategies in order and return the first result.

    Args:
        strategies: Strategies in priority order
        subject: Label used in log lines and the exhaustion message

    Returns:
        Result of the first strategy that completes without raising

    Raises:
        StrategiesExhaustedError: Every strategy failed or was skipped; carries
            one reason per strategy
    """
    reasons: list[str] = []

    for strategy in strategies:
        if not strategy.applies:
            reasons.append(f"{strategy.name}: skipped ({strategy.skip_reason})")
            continue

        logger.debug(f"Trying {strategy.name} for {subject}")
        try:
            result = await strategy.run()
        except StrategiesExhaustedError as e:
            reasons.append(f"{strategy.name}: {e.detail}")
            reasons.extend(f"  {reason}" for reason in e.reasons)
            continue
        except Exception as e:
            logger.info(f"{strategy.name} failed for {subject}: {e}")
            reasons.append(f"{strategy.name}: {e}")
            continue

        logger.info(f"Resolved {subject} via {strategy.name}")
        return result

    raise StrategiesExhaustedError(f"All resolution strategies failed for {subject}", reasons)
