# Single-source shortest paths with Dijkstra's algorithm, using the indexed
# heap for decrease-key. Graphs are given in compressed sparse row form:
# the edges leaving node u are indices[indptr[u]:indptr[u+1]] with weights
# weights[indptr[u]:indptr[u+1]].

import numpy as np

from indexed_heap import BinaryHeap, update_element


def csr_from_edges(n, edges):
    """
    Build the CSR arrays of a directed graph
    :param n: Number of nodes
    :param edges: Iterable of (from, to, weight) triples
    :return: indptr, indices, weights
    """
    edges = np.asarray(edges, dtype=float).reshape(-1, 3)
    sources = edges[:, 0].astype(np.intp)
    targets = edges[:, 1].astype(np.intp)

    if len(edges) and (min(sources.min(), targets.min()) < 0 or
                       max(sources.max(), targets.max()) >= n):
        raise ValueError("edge endpoint outside of 0 .. {}".format(n - 1))

    order = np.argsort(sources, kind='stable')
    counts = np.bincount(sources, minlength=n)
    indptr = np.concatenate(([0], np.cumsum(counts))).astype(np.intp)

    return indptr, targets[order], edges[order, 2]


def dijkstra(indptr, indices, weights, source):
    """
    Distances from source to every node
    :return: distances (inf where unreachable) and predecessors (-1 for the
        source and for unreachable nodes)
    """
    indptr = np.asarray(indptr, dtype=np.intp)
    indices = np.asarray(indices, dtype=np.intp)
    weights = np.asarray(weights, dtype=float)
    n = len(indptr) - 1

    if not 0 <= source < n:
        raise ValueError("source {} is not a node".format(source))
    if len(weights) and weights.min() < 0:
        raise ValueError("negative edge weight")

    distances = np.full(n, np.inf)
    predecessors = np.full(n, -1, dtype=np.intp)
    done = np.zeros(n, dtype=bool)

    distances[source] = 0.0
    heap = BinaryHeap(distances)
    heap.enroll(source)

    while not heap.empty():
        u = heap.pop_root()
        done[u] = True

        for k in range(indptr[u], indptr[u + 1]):
            v = indices[k]
            if done[v]:
                continue
            d = distances[u] + weights[k]
            if d < distances[v]:
                predecessors[v] = u
                if heap.in_heap(v):
                    update_element(distances, heap, v, d)
                else:
                    distances[v] = d
                    heap.enroll(v)

    return distances, predecessors


def shortest_path(indptr, indices, weights, source, target):
    """
    Nodes on a shortest path from source to target, both included, or None
    if target cannot be reached
    """
    distances, predecessors = dijkstra(indptr, indices, weights, source)
    if not 0 <= target < len(distances):
        raise ValueError("target {} is not a node".format(target))
    if np.isinf(distances[target]):
        return None

    path = [target]
    while path[-1] != source:
        path.append(int(predecessors[path[-1]]))
    path.reverse()
    return path
