"""Directed graphs as adjacency lists, with breadth- and depth-first traversal."""

from collections import deque


def build_graph(nodes, edges):
    """Adjacency lists for a directed graph on 0..nodes-1 from (from, to) edges."""
    if nodes < 0:
        raise ValueError("number of nodes must not be negative")
    graph = [[] for _ in range(nodes)]
    for v1, v2 in edges:
        if not (0 <= v1 < nodes and 0 <= v2 < nodes):
            raise ValueError(f"edge ({v1}, {v2}) leaves the graph of {nodes} nodes")
        graph[v1].append(v2)
    return graph


def _check_start(graph, start):
    if not 0 <= start < len(graph):
        raise IndexError(f"start node {start} is not in the graph")


def bfs(graph, start):
    """Nodes reachable from start in breadth-first order."""
    _check_start(graph, start)
    visited = [False] * len(graph)
    visited[start] = True
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in graph[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def dfs(graph, start):
    """Nodes reachable from start, visited with a stack; nodes are marked when pushed."""
    _check_start(graph, start)
    visited = [False] * len(graph)
    visited[start] = True
    stack = [start]
    order = []
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in graph[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append(neighbour)
    return order


def describe_graph(graph):
    """One line per node listing its neighbours, tab separated."""
    return "\n".join(
        f"The neighbours of node {node} are:" + "".join(f"\t{v}" for v in neighbours)
        for node, neighbours in enumerate(graph)
    )