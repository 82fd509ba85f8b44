import networkx as nx
import random

from typing import Any, Callable

from kruskal import Edge, Graph, MinimumSpanningTree

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def to_nx_graph(graph: Graph | MinimumSpanningTree) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(graph.vertices)
    for edge in graph.edges:
        g.add_edge(edge.u, edge.v, weight=edge.weight)
    return g

def from_nx_graph(g: nx.Graph,
                  decide_weight: Callable[[Any, Any], int],
                  nodename_to_label: Callable[[Any], str]= lambda x: str(x)) -> Graph:
    edges = []
    for (a, b) in g.edges:
        # Convert node names to labels
        u = nodename_to_label(a)
        v = nodename_to_label(b)
        edges.append(Edge(u, v, decide_weight(a, b)))
    return Graph(edges)

def to_output_file(g: nx.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   nodename_to_label: Callable[[Any], str]= lambda x: str(x)) -> None:
    graph = from_nx_graph(g, decide_weight, nodename_to_label)
    with open(fname, 'w') as f:
        f.write(f'# {len(graph.vertices)} vertices, {len(graph.edges)} edges\n')

        for edge in graph.edges:
            f.write(f'{edge.u} {edge.v} {edge.weight}\n')


if __name__ == '__main__':
    import os

    OUTDIR = 'testfiles'
    os.makedirs(OUTDIR, exist_ok=True)

    ## Generate Connected Caveman Graphs (replacement edges only between caves)

    caveman_100 = nx.connected_caveman_graph(10, 10)
    to_output_file(caveman_100, arbitrary_weight(1, 500), f'{OUTDIR}/conn_caveman_n100.txt')

    ## Trees have no replacement edge for any removal

    tree_63 = nx.balanced_tree(2, 5)
    to_output_file(tree_63, arbitrary_weight(1, 500), f'{OUTDIR}/tree_n63.txt')
