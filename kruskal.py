import re
import sys

from typing import Hashable, Iterable, Optional


class GraphFormatError(ValueError):
    pass


class GraphNotConnectedError(ValueError):
    pass


_WEIGHT_RE = re.compile(r'[+-]?[0-9]+')


def parse_weight(token: str) -> int:
    # ASCII digits only, no underscores
    if not _WEIGHT_RE.fullmatch(token):
        raise ValueError(f'invalid integer weight: {token!r}')
    return int(token)


class UnionFind:
    def __init__(self, vertices: Iterable[Hashable]) -> None:
        self.parent = {v: v for v in vertices}
        self.rank = {v: 0 for v in self.parent}

    def find(self, vertex: Hashable) -> Hashable:
        # raises KeyError for vertices outside the universe
        root = vertex
        while self.parent[root] != root:
            root = self.parent[root]

        # second pass: point everything on the path straight at the root
        while self.parent[vertex] != root:
            self.parent[vertex], vertex = root, self.parent[vertex]

        return root

    def union(self, i: Hashable, j: Hashable) -> bool:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.rank[i] < self.rank[j]:
            self.parent[i] = j
        elif self.rank[i] > self.rank[j]:
            self.parent[j] = i
        else:
            self.parent[j] = i
            self.rank[i] += 1
        return True

    def same_set(self, i: Hashable, j: Hashable) -> bool:
        return self.find(i) == self.find(j)


class Edge:
    __slots__ = ('u', 'v', 'weight')

    def __init__(self, u: str, v: str, weight: int) -> None:
        if u == v:
            raise ValueError(f'Self-loop on vertex {u!r} is not allowed')
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f'Edge weight must be an integer, got {weight!r}')
        if weight < 0:
            raise ValueError(f'Edge weight must be non-negative, got {weight}')

        object.__setattr__(self, 'u', u)
        object.__setattr__(self, 'v', v)
        object.__setattr__(self, 'weight', weight)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != 3:
            raise GraphFormatError(f'Invalid edge line: {s.strip()}')

        u, v, w = parts
        try:
            weight = parse_weight(w)
        except ValueError:
            raise GraphFormatError(f'Invalid edge weight in line: {s.strip()}') from None

        try:
            return cls(u, v, weight)
        except ValueError as e:
            raise GraphFormatError(f'{e}: {s.strip()}') from None

    def endpoints(self) -> frozenset:
        return frozenset((self.u, self.v))

    def key(self) -> tuple:
        # weight first, then the endpoint labels in sorted order
        return (self.weight, min(self.u, self.v), max(self.u, self.v))

    def connects_same_vertices(self, other: 'Edge') -> bool:
        return self.endpoints() == other.endpoints()

    def matches(self, other: 'Edge') -> bool:
        return self.connects_same_vertices(other) and self.weight == other.weight

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key() == other.key()

    def __lt__(self, other: 'Edge') -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key() < other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    def __str__(self):
        return f'{self.u} -- {self.v} (w={self.weight})'


class Graph:
    def __init__(self, edges: Iterable[Edge]) -> None:
        self.edges = tuple(edges)
        self.vertices = sorted({x for e in self.edges for x in (e.u, e.v)})

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'Graph':
        edges = []
        for line in lines:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            edges.append(Edge.from_line(line))

        return cls(edges)

    @classmethod
    def from_file(cls, fname) -> 'Graph':
        try:
            with open(fname, 'r', encoding='utf-8') as f:
                return cls.from_lines(f)
        except UnicodeDecodeError as e:
            raise GraphFormatError(f'{fname} is not valid UTF-8 text: {e.reason}') from None

    def __len__(self):
        return len(self.edges)


class MinimumSpanningTree:
    def __init__(self, edges: Iterable[Edge], vertices: Iterable[str]) -> None:
        self.edges = tuple(edges)
        self.vertices = sorted(vertices)

    @property
    def total_weight(self) -> int:
        return sum(e.weight for e in self.edges)

    def heaviest_edge(self) -> Optional[Edge]:
        if not self.edges:
            return None
        # max() keeps the first of several equally heavy edges
        return max(self.edges, key=lambda e: e.weight)


def kruskal(graph: Graph) -> MinimumSpanningTree:
    uf = UnionFind(graph.vertices)
    mst = []

    # perform kruskals
    for edge in sorted(graph.edges):
        if uf.union(edge.u, edge.v):
            mst.append(edge)

    # an empty graph needs no edges at all
    needed = max(len(graph.vertices) - 1, 0)
    if len(mst) != needed:
        raise GraphNotConnectedError('Graph is not connected. MST could not be formed.')

    return MinimumSpanningTree(mst, graph.vertices)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print(f'Usage: {sys.argv[0]} <filename>')
        sys.exit(1)

    fname = sys.argv[1]
    verbose = (len(sys.argv) > 2)

    try:
        tree = kruskal(Graph.from_file(fname))
    except (OSError, ValueError) as e:
        print(f'ERROR: {e}', file=sys.stderr)
        sys.exit(1)

    print('Final MST sum:', tree.total_weight)
    if verbose:
        print(list(tree.edges))
