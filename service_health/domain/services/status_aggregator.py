"""Domain service folding per-probe statuses into one overall status."""

from typing import Iterable

from service_health.domain.entities.health import ProbeStatus


def aggregate_status(statuses: Iterable[ProbeStatus]) -> ProbeStatus:
    """Return the most severe status present, ``pass`` when there is none.

    Severity is ordered ``fail`` > ``warn`` > ``pass``, so the result does
    not depend on the order of ``statuses``.
    """

    has_warning = False

    for status in statuses:
        if status == ProbeStatus.FAIL:
            return ProbeStatus.FAIL
        if status == ProbeStatus.WARN:
            has_warning = True

    if has_warning:
        return ProbeStatus.WARN
    return ProbeStatus.PASS
