"""NetworkX projection of the person registry."""

import networkx as nx

from models import MaritalState


def build_graph(manager) -> nx.DiGraph:
    """
    Build a NetworkX directed graph from the registry.

    Nodes are person ids. PARENT_OF edges run parent -> child; a SPOUSE_OF edge is
    added once per couple, from the smaller id to the larger one, for every person
    whose status references a registered partner.
    """
    G = nx.DiGraph()

    # Note: use 'person_name' instead of 'name' to avoid conflict with pydot
    for person in manager:
        G.add_node(
            person.id,
            person_name=f"{person.first_name} {person.last_name}",
            given_name=person.first_name,
            surname=person.last_name,
            sex=person.gender.value,
            birth_date=person.birthday,
        )

    for person in manager:
        for parent_id in (person.mother_id, person.father_id):
            if parent_id is not None:
                G.add_edge(parent_id, person.id, relationship_type="PARENT_OF")

        status = person.marital_status
        if status.state is not MaritalState.SINGLE and status.partner_id in manager:
            a, b = sorted((person.id, status.partner_id))
            G.add_edge(a, b, relationship_type="SPOUSE_OF", status=status.state.value)

    return G


def parent_graph(G: nx.DiGraph) -> nx.DiGraph:
    """Return the subgraph holding only PARENT_OF edges (all nodes kept)."""
    P = nx.DiGraph()
    P.add_nodes_from(G.nodes(data=True))
    P.add_edges_from(
        (u, v) for u, v, d in G.edges(data=True) if d.get("relationship_type") == "PARENT_OF"
    )
    return P
