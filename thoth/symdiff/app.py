# thoth-symdiff
# Copyright(C) 2022 Red Hat, Inc.
#
# This program is free software: you can redistribute it and / or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

"""Benchmark the ordered symmetric difference traversals against a hashed baseline."""

from __future__ import annotations

import logging
import os
import re
import timeit
from enum import Enum
from importlib_metadata import version
from typing import Any, Callable, Dict, List, Tuple, cast

import click
from thoth.common import init_logging

from prometheus_client import CollectorRegistry, Gauge, push_to_gateway
from .baseline import build_left
from .baseline import build_right
from .baseline import hashed_symmetric_difference
from .lazy_set_ops import symmetric_difference
from .lazy_set_ops import symmetric_difference_for_each
from .lazy_set_ops import symmetric_difference_split

prometheus_registry = CollectorRegistry()

__component_version__ = version("thoth-symdiff")

init_logging()
_LOGGER = logging.getLogger("thoth.symdiff")
_CORE_LOGGER = logging.getLogger("thoth.symdiff.lazy_set_ops")

_DEFAULT_SIZE = 1000
_DEFAULT_REPEAT = 100
_DEFAULT_DIVISORS = "13,23"
_TIMEIT_ROUNDS = 3
_THOTH_DEPLOYMENT_NAME = os.getenv("THOTH_DEPLOYMENT_NAME", "local")
_THOTH_METRICS_PUSHGATEWAY_URL = os.getenv("PROMETHEUS_PUSHGATEWAY_URL")

# Metrics symdiff bench
_METRIC_INFO = Gauge(
    "thoth_symdiff_bench_info",
    "Thoth symmetric difference benchmark information",
    ["env", "version"],
    registry=prometheus_registry,
)

_METRIC_BENCH_SECONDS = Gauge(
    "thoth_symdiff_bench_seconds",
    "Best time of one symmetric difference run per variant",
    ["variant", "env", "version"],
    registry=prometheus_registry,
)

_METRIC_BENCH_ITEMS = Gauge(
    "thoth_symdiff_bench_items",
    "Number of items produced by one symmetric difference run per variant",
    ["variant", "env", "version"],
    registry=prometheus_registry,
)

_METRIC_INFO.labels(_THOTH_DEPLOYMENT_NAME, __component_version__).inc()


class _Variant(Enum):
    INTERNAL = "internal"
    INTERNAL_SPLIT = "internal_split"
    EXTERNAL = "external"
    HASHED = "hashed"


def _parse_divisors(ctx, param, value: str) -> Tuple[int, int]:
    _match = re.fullmatch(r"\s*(\d+)\s*,\s*(\d+)\s*", value)
    if not _match or 0 in (int(_match.group(1)), int(_match.group(2))):
        raise click.BadParameter("Divisors must be two positive integers separated by a comma, e.g. 13,23")
    else:
        return cast(Tuple[int, int], tuple(int(x) for x in _match.groups()))


def _run_variant(variant: _Variant, left: List[int], right: List[int]) -> List[Any]:
    """Run one variant to completion and return the values it produced, in production order."""
    result: List[Any] = []

    if variant is _Variant.INTERNAL:
        symmetric_difference_for_each(left, right, lambda item: result.append(item.value))
    elif variant is _Variant.INTERNAL_SPLIT:
        symmetric_difference_split(left, right, result.append, result.append)
    elif variant is _Variant.EXTERNAL:
        result.extend(item.value for item in symmetric_difference(left, right))
    else:
        result.extend(hashed_symmetric_difference(left, right))

    return result


def _runner(variant: _Variant, left: List[int], right: List[int]) -> Callable[[], None]:
    # Consume without collecting so the timings cover the traversal only.
    if variant is _Variant.INTERNAL:
        return lambda: symmetric_difference_for_each(left, right, _discard)
    elif variant is _Variant.INTERNAL_SPLIT:
        return lambda: symmetric_difference_split(left, right, _discard, _discard)
    elif variant is _Variant.EXTERNAL:

        def _external() -> None:
            for _ in symmetric_difference(left, right):
                pass

        return _external
    else:

        def _hashed() -> None:
            for _ in hashed_symmetric_difference(left, right):
                pass

        return _hashed


def _discard(_: Any) -> None:
    return None


def _check_variants(left: List[int], right: List[int]) -> Dict[_Variant, int]:
    """Check every variant against the hashed baseline, return the number of items each produced."""
    expected = sorted(hashed_symmetric_difference(left, right))
    items = {}

    for variant in _Variant:
        produced = _run_variant(variant, left, right)
        items[variant] = len(produced)
        if variant is _Variant.HASHED:
            produced = sorted(produced)
        if produced != expected:
            _LOGGER.error(
                "Variant %r produced %d items that do not match the %d expected ones",
                variant.value,
                len(produced),
                len(expected),
            )
            raise click.ClickException(f"Variant {variant.value!r} does not match the hashed symmetric difference")

        _LOGGER.debug("Variant %r produced %d items", variant.value, len(produced))

    return items


@click.command()
@click.option("--debug", is_flag=True, help="Run in a debug mode", envvar="THOTH_SYMDIFF_DEBUG", default=False)
@click.option(
    "--size",
    type=click.IntRange(min=0),
    help="Upper bound of the generated benchmark inputs.",
    envvar="THOTH_SYMDIFF_BENCH_SIZE",
    default=_DEFAULT_SIZE,
)
@click.option(
    "--divisors",
    type=str,
    help="Multiples of these numbers are left out of the left and right input respectively.",
    envvar="THOTH_SYMDIFF_BENCH_DIVISORS",
    default=_DEFAULT_DIVISORS,
    callback=_parse_divisors,
)
@click.option(
    "--repeat",
    type=click.IntRange(min=1),
    help="Number of runs per timing round.",
    envvar="THOTH_SYMDIFF_BENCH_REPEAT",
    default=_DEFAULT_REPEAT,
)
def bench(debug: bool, size: int, divisors: Tuple[int, int], repeat: int) -> None:
    """Compare internal and external iteration of the ordered symmetric difference."""
    if debug:
        _LOGGER.setLevel(logging.DEBUG)
        _LOGGER.debug("Debug mode is on.")

    _LOGGER.info("Running symmetric difference benchmark in version %r", __component_version__)

    left = build_left(size, divisors[0])
    right = build_right(size, divisors[1])
    _LOGGER.info("Inputs built: %d left and %d right values", len(left), len(right))

    items = _check_variants(left, right)

    timings: Dict[_Variant, float] = {}
    # Keep merge core debug records out of the timed runs.
    core_level = _CORE_LOGGER.level
    _CORE_LOGGER.setLevel(logging.INFO)
    try:
        for variant in _Variant:
            rounds = timeit.Timer(_runner(variant, left, right)).repeat(repeat=_TIMEIT_ROUNDS, number=repeat)
            timings[variant] = min(rounds) / repeat
            _LOGGER.debug("Variant %r rounds: %s", variant.value, rounds)
    finally:
        _CORE_LOGGER.setLevel(core_level)

    _LOGGER.info("Summary of the benchmark:")
    for variant in _Variant:
        _LOGGER.info("%s: %.3f us per run, %d items", variant.value, timings[variant] * 1e6, items[variant])

    fastest = min(timings, key=timings.__getitem__)
    _LOGGER.info("Fastest variant: %s", fastest.value)

    for variant in _Variant:
        _METRIC_BENCH_SECONDS.labels(
            variant=variant.value,
            env=_THOTH_DEPLOYMENT_NAME,
            version=__component_version__,
        ).set(timings[variant])
        _METRIC_BENCH_ITEMS.labels(
            variant=variant.value,
            env=_THOTH_DEPLOYMENT_NAME,
            version=__component_version__,
        ).set(items[variant])

    if _THOTH_METRICS_PUSHGATEWAY_URL:
        try:
            _LOGGER.info(f"Submitting metrics to Prometheus pushgateway {_THOTH_METRICS_PUSHGATEWAY_URL}")
            push_to_gateway(
                _THOTH_METRICS_PUSHGATEWAY_URL,
                job="symdiff-bench",
                registry=prometheus_registry,
            )
        except Exception as e:
            _LOGGER.exception(f"An error occurred pushing the metrics: {str(e)}")

    _LOGGER.info("Symmetric difference benchmark has finished successfully")
