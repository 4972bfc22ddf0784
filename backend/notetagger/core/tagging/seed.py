from __future__ import annotations

from types import MappingProxyType

# Keys are matched case-insensitively; "bigO" is stored as "bigo". Keys holding
# punctuation such as "O(n)" can never be produced by the tokenizer and are
# only reachable through direct lookup or autocomplete.
SEED_TAGS: MappingProxyType[str, str] = MappingProxyType(
    {
        # Data structures
        "array": "Arrays",
        "arrays": "Arrays",
        "list": "Lists",
        "lists": "Lists",
        "linkedlist": "Linked Lists",
        "linked": "Linked Lists",
        "stack": "Stacks",
        "stacks": "Stacks",
        "queue": "Queues",
        "queues": "Queues",
        "tree": "Trees",
        "trees": "Trees",
        "binary": "Binary Trees",
        "bst": "Binary Search Trees",
        "heap": "Heaps",
        "heaps": "Heaps",
        "graph": "Graphs",
        "graphs": "Graphs",
        "hash": "Hash Tables",
        "hashtable": "Hash Tables",
        "hashmap": "Hash Tables",
        "trie": "Tries",
        "tries": "Tries",
        # Algorithms
        "sort": "Sorting",
        "sorting": "Sorting",
        "search": "Searching",
        "searching": "Searching",
        "binary search": "Binary Search",
        "linear search": "Linear Search",
        "dfs": "Depth-First Search",
        "bfs": "Breadth-First Search",
        "dijkstra": "Dijkstra Algorithm",
        "dynamic": "Dynamic Programming",
        "dp": "Dynamic Programming",
        "greedy": "Greedy Algorithms",
        "backtrack": "Backtracking",
        "backtracking": "Backtracking",
        "recursion": "Recursion",
        "recursive": "Recursion",
        "iteration": "Iteration",
        "iterative": "Iteration",
        # Complexity
        "complexity": "Time Complexity",
        "time": "Time Complexity",
        "space": "Space Complexity",
        "bigO": "Big O Notation",
        "O(n)": "Big O Notation",
        "O(1)": "Big O Notation",
        "O(log n)": "Big O Notation",
        # Named sorts
        "quicksort": "Quick Sort",
        "mergesort": "Merge Sort",
        "bubblesort": "Bubble Sort",
        "insertionsort": "Insertion Sort",
        "selectionsort": "Selection Sort",
        "heapsort": "Heap Sort",
        "radixsort": "Radix Sort",
    }
)
