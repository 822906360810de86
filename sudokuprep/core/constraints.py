"""Deduction rules applied between domain sweeps."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Mapping, Optional

from .model import Domain, Value


def forced_value(domain: Domain) -> Optional[Value]:
    """Naked single: the only value left in ``domain``, else None."""
    if len(domain) == 1:
        return next(iter(domain))
    return None


def peer_unique_value(index: int, domain: Domain, peers: Iterable[int],
                      domains: Mapping[int, Domain]) -> Optional[Value]:
    """Return the one value of ``domain`` no undetermined peer can take.

    ``peers`` is every cell sharing a row, column or block with ``index``;
    cells without an entry in ``domains`` are already determined and ignored.
    """
    remaining = set(domain)
    for peer in peers:
        if peer != index and peer in domains:
            remaining -= domains[peer]
            if not remaining:
                return None
    return forced_value(frozenset(remaining))


def unit_unique_value(index: int, domain: Domain, units: Iterable[Iterable[int]],
                      domains: Mapping[int, Domain]) -> Optional[Value]:
    """Classic hidden single, checked one unit at a time.

    A value missing from every other undetermined cell of any single unit is
    forced, even if a peer in another unit could still take it.
    """
    for members in units:
        value = peer_unique_value(index, domain, members, domains)
        if value is not None:
            return value
    return None


HiddenSingleRule = Callable[[int, Domain, Iterable[Iterable[int]], Mapping[int, Domain]], Optional[Value]]


def _peers_scope(index, domain, units, domains):
    return peer_unique_value(index, domain, (p for members in units for p in members), domains)


HIDDEN_SINGLE_SCOPES: Dict[str, HiddenSingleRule] = {
    "peers": _peers_scope,
    "unit": unit_unique_value,
}
