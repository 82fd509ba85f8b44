import argparse
import sys

from typing import Iterable, Optional, TextIO

from kruskal import (Edge, Graph, GraphFormatError, GraphNotConnectedError,
                     MinimumSpanningTree, kruskal, parse_weight)


class ReplacementResult:
    def __init__(self,
                 removed: Edge,
                 components: list[frozenset],
                 replacement: Optional[Edge],
                 edges: Optional[list[Edge]]) -> None:
        self.removed = removed
        self.components = components
        self.replacement = replacement
        self.edges = edges

    @property
    def total_weight(self) -> Optional[int]:
        if self.edges is None:
            return None
        return sum(e.weight for e in self.edges)


def find_components(edges: Iterable[Edge], vertices: Iterable[str]) -> list[frozenset]:
    '''
    Partition `vertices` into the connected components of the forest `edges`.
    Largest component first; equal sizes are ordered by smallest member label.
    '''
    vertices = sorted(vertices)
    adjacency = {v: set() for v in vertices}
    for edge in edges:
        adjacency[edge.u].add(edge.v)
        adjacency[edge.v].add(edge.u)

    components = []
    visited = set()
    for vertex in vertices:
        if vertex in visited:
            continue

        component = set()
        stack = [vertex]
        visited.add(vertex)
        while stack:
            current = stack.pop()
            component.add(current)
            for neighbor in sorted(adjacency[current]):
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

        components.append(frozenset(component))

    components.sort(key=lambda c: (-len(c), min(c)))
    return components


def crosses_components(edge: Edge, a: frozenset, b: frozenset) -> bool:
    return (edge.u in a and edge.v in b) or (edge.v in a and edge.u in b)


def find_replacement_edge(edges: Iterable[Edge], components: list[frozenset]) -> Optional[Edge]:
    if len(components) < 2:
        return None

    a, b = components[0], components[1]
    crossing = [e for e in edges if crosses_components(e, a, b)]
    if not crossing:
        return None

    return min(crossing)


def choose_edge_to_remove(mst: MinimumSpanningTree, requested: Optional[Edge] = None) -> Optional[Edge]:
    if requested is None:
        return mst.heaviest_edge()

    # endpoints and weight must both match
    for edge in mst.edges:
        if edge.matches(requested):
            return edge
    return None


def replace_edge(graph: Graph,
                 mst: MinimumSpanningTree,
                 removed: Edge,
                 exclude_removed: bool = False) -> Optional[ReplacementResult]:
    '''
    Drop `removed` from the tree and reconnect the two sides with the cheapest
    crossing edge of `graph`. The removed edge itself is a candidate unless
    `exclude_removed` is set, which models the edge as failed.
    Returns None when `removed` does not match an edge of `mst`.
    '''
    for edge in mst.edges:
        if edge.matches(removed):
            break
    else:
        return None

    removed = edge
    remaining = [e for e in mst.edges if e is not removed]

    candidates = graph.edges
    if exclude_removed:
        candidates = [e for e in graph.edges if e != removed]

    components = find_components(remaining, mst.vertices)
    replacement = find_replacement_edge(candidates, components)

    if replacement is None:
        return ReplacementResult(removed, components, None, None)

    return ReplacementResult(removed, components, replacement, sorted(remaining + [replacement]))


def format_component(component: frozenset) -> str:
    return '[' + ', '.join(sorted(component)) + ']'


def run(graph: Graph,
        requested: Optional[Edge] = None,
        out: Optional[TextIO] = None,
        show_input: bool = True,
        exclude_removed: bool = False) -> Optional[ReplacementResult]:
    if out is None:
        out = sys.stdout

    if show_input:
        print('Input graph edges (u v w):', file=out)
        for edge in graph.edges:
            print(f'  {edge}', file=out)
        print(file=out)

    mst = kruskal(graph)

    print('Initial MST edges:', file=out)
    for edge in mst.edges:
        print(f'  {edge}', file=out)
    print(f'Total weight: {mst.total_weight}', file=out)
    print(file=out)

    removed = choose_edge_to_remove(mst, requested)
    if removed is None:
        if requested is not None:
            print('Requested edge to remove was not found in the MST.', file=out)
        else:
            print('No edge selected for removal. Exiting.', file=out)
        return None

    print(f'Removing edge: {removed}', file=out)
    print(file=out)

    result = replace_edge(graph, mst, removed, exclude_removed)

    print('Components after removal:', file=out)
    for i, component in enumerate(result.components):
        print(f'  Component {i + 1}: {format_component(component)}', file=out)
    print(file=out)

    if len(result.components) < 2:
        print('No replacement needed: removal did not disconnect the tree.', file=out)
        return None

    if result.replacement is None:
        print('No replacement edge found. The graph cannot remain connected.', file=out)
        return result

    print(f'Replacement edge selected: {result.replacement}', file=out)
    print(file=out)

    print('Updated MST edges:', file=out)
    for edge in result.edges:
        print(f'  {edge}', file=out)
    print(f'Total weight: {result.total_weight}', file=out)

    return result


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='mst-replace',
                                     description='Remove an MST edge and find the cheapest reconnecting edge')
    parser.add_argument('-g', '--graph',
                        default='graph.txt',
                        help='the graph file, one "<u> <v> <weight>" edge per line')
    parser.add_argument('--remove',
                        nargs=3,
                        metavar=('U', 'V', 'WEIGHT'),
                        help='the MST edge to remove (default: the heaviest MST edge)')
    parser.add_argument('--exclude-removed',
                        action='store_true',
                        help='treat the removed edge as failed so it cannot be chosen as its own replacement')
    parser.add_argument('-q', '--quiet',
                        action='store_true',
                        help='do not echo the input graph')

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    requested = None
    if args.remove is not None:
        u, v, w = args.remove
        try:
            requested = Edge(u, v, parse_weight(w))
        except ValueError as e:
            print(f'ERROR: invalid edge to remove: {e}', file=sys.stderr)
            return 2

    try:
        graph = Graph.from_file(args.graph)
        run(graph, requested, show_input=not args.quiet, exclude_removed=args.exclude_removed)
    except (OSError, GraphFormatError, GraphNotConnectedError) as e:
        print(f'ERROR: {e}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
