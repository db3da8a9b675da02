"""Integrity checks for the person registry."""

import networkx as nx

from graph import build_graph, parent_graph


def find_parent_cycles(manager) -> list[list[int]]:
    """Return every cycle formed by parent links, each as a list of person ids."""
    return [sorted(cycle) for cycle in nx.simple_cycles(parent_graph(build_graph(manager)))]


def validate_registry(manager) -> list[str]:
    """
    Validate the registry for:
    - Cycles in parent-child relationships (a person who is their own ancestor)
    - Marital statuses referencing unknown persons
    - Marital statuses that are not reciprocated by the partner

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    for cycle in find_parent_cycles(manager):
        warnings.append(f"Cycle detected in parent-child relationships: {cycle}")

    for person in manager:
        partner_id = person.marital_status.partner_id
        if partner_id is None:
            continue
        partner = manager.lookup(partner_id)
        if partner is None:
            warnings.append(
                f"Dangling: {person.id} has status {person.marital_status} "
                f"but {partner_id} is not registered"
            )
        elif partner.marital_status.partner_id != person.id:
            warnings.append(
                f"Inconsistent: {person.id} has status {person.marital_status} "
                f"but {partner_id} has status {partner.marital_status}"
            )

    return warnings
