import argparse
import random

import numpy as np


def vertex_label(i: int) -> str:
    # A, B, ..., Z, AA, AB, ...
    label = ''
    i += 1
    while i > 0:
        i, rem = divmod(i - 1, 26)
        label = chr(ord('A') + rem) + label
    return label


def generate(nvertices: int,
             density: float,
             min_weight: int,
             max_weight: int,
             connected: bool = False,
             rng: random.Random | None = None) -> np.ndarray:
    rng = rng or random.Random()
    max_edges = nvertices * (nvertices-1) // 2
    total_edges = min(int(density * max_edges), max_edges)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)
    placed = 0

    if connected:
        # Random spanning tree: attach each vertex to an earlier one
        order = list(range(nvertices))
        rng.shuffle(order)
        for k in range(1, nvertices):
            a, b = sorted((order[k], order[rng.randint(0, k-1)]))
            adj_matrix[a, b] = rng.randint(min_weight, max_weight)
        placed = max(nvertices - 1, 0)

    for _ in range(max(total_edges - placed, 0)):
        # Generate a random edge
        new_spot = False

        # keep trying until an unoccupied spot is found
        while not new_spot:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if adj_matrix[i, j] == 0:
                new_spot = True

        # Only bother filling upper triangle for undirected graphs
        adj_matrix[i, j] = rng.randint(min_weight, max_weight)

    return adj_matrix


def write_graph(adj_matrix: np.ndarray, fname: str) -> int:
    nvertices = adj_matrix.shape[0]
    rows, cols = np.nonzero(np.triu(adj_matrix, k=1))

    with open(fname, 'w') as f:
        f.write(f'# {nvertices} vertices, {len(rows)} edges\n')
        for i, j in zip(rows.tolist(), cols.tolist()):
            f.write(f'{vertex_label(i)} {vertex_label(j)} {adj_matrix[i, j]}\n')

    return len(rows)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate weighted graphs for MST edge replacement')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-c', '--connected', action='store_true',
                        help='lay down a random spanning tree first so the graph is connected')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    if args.min_weight < 1:
        # zero marks an empty slot in the adjacency matrix
        parser.error('--min-weight must be at least 1')

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density}')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    adj_matrix = generate(args.nvertices,
                          args.density,
                          args.min_weight,
                          args.max_weight,
                          connected=args.connected,
                          rng=random.Random(args.seed))

    if args.verbose:
        print()
        print('Graph adjacency matrix:')
        print(adj_matrix)

    nedges = write_graph(adj_matrix, args.outfile)
    if not args.quiet:
        print(f'Wrote {nedges} edges to {args.outfile}')

'''
File format:

# <comment>
<u> <v> <w>
<u> <v> <w>
...

'''
