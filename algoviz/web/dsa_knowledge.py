# dsa_knowledge.py
#
# Canned knowledge for the DSA assistant: the system prompt sent with every
# AI request and the FAQ answers served without calling the AI at all.

SYSTEM_PROMPT = """You are an expert DSA (Data Structures and Algorithms) tutor and assistant. Your knowledge is specifically focused on helping users understand and learn DSA concepts.

IMPORTANT GUIDELINES:
1. ONLY answer questions related to data structures, algorithms, programming, and computer science
2. If asked about unrelated topics, politely redirect to DSA topics
3. Provide clear, concise explanations with examples when helpful
4. Include time and space complexity analysis when discussing algorithms
5. Use simple language but maintain technical accuracy
6. When explaining algorithms, describe the step-by-step process
7. Relate concepts to practical applications when possible

KNOWLEDGE BASE:
## Arrays
- Access: O(1) by index; Search: O(n) linear, O(log n) binary (if sorted); Insert/Delete: O(n)

## Linked Lists
- Singly: each node points to next; Doubly: next and previous; Access: O(n), Insert at head: O(1)

## Stacks (LIFO) - Push, Pop, Peek all O(1)
## Queues (FIFO) - Enqueue, Dequeue, Peek all O(1)

## Trees
- BST: left subtree < root < right subtree, O(log n) average, O(n) worst
- AVL: balance factor = height(left) - height(right) kept within [-1, 1] by LL/LR/RR/RL rotations
- Traversals: Inorder, Preorder, Postorder, Level-order

## Sorting Algorithms
- Bubble O(n^2) stable; Selection O(n^2) unstable; Insertion O(n^2) stable
- Merge O(n log n) stable, O(n) space; Quick O(n log n) average, O(n^2) worst
- Heap O(n log n) in-place, unstable; Radix O(d * (n + b)) stable

## Searching Algorithms
- Linear O(n); Binary O(log n), requires a sorted array

When answering:
- Be encouraging and supportive for learners
- Provide code examples in pseudocode or common languages when helpful
- Compare and contrast related concepts"""

QUICK_QUESTIONS = [
    "What is Big O notation?",
    "Explain bubble sort",
    "How does a stack work?",
    "Binary search vs linear search",
]

GREETING = ("Hi! I'm your DSA assistant. Ask me about data structures, algorithms, "
            "time complexity, or any topic you see in the visualizer!")

# Checked in insertion order; the first key contained in the question wins.
ALGORITHM_FAQS = {
    "bubble sort": """**Bubble Sort** compares adjacent elements and swaps them if they're in the wrong order. It repeats until the array is sorted.

**Time Complexity:** O(n²) average/worst, O(n) best
**Space Complexity:** O(1)
**Best for:** Small datasets or nearly sorted arrays""",

    "selection sort": """**Selection Sort** finds the minimum element and places it at the beginning, then repeats for the remaining array.

**Time Complexity:** O(n²) for all cases
**Space Complexity:** O(1)
**Best for:** Small datasets where memory writes are costly""",

    "quick sort": """**Quick Sort** uses divide-and-conquer with a pivot element to partition the array.

**Time Complexity:** O(n log n) average, O(n²) worst
**Space Complexity:** O(log n)
**Best for:** Large datasets, general-purpose sorting""",

    "merge sort": """**Merge Sort** divides the array in half, sorts each half, then merges them back together.

**Time Complexity:** O(n log n) for all cases
**Space Complexity:** O(n)
**Best for:** Stable sorting, linked lists, external sorting""",

    "linked list": """**Linked List** is a linear data structure where elements are stored in nodes, each pointing to the next.

**Operations:**
- Insert/Delete at head: O(1)
- Search/Access: O(n)
- Insert/Delete at position: O(n)

**Types:** Singly, Doubly, Circular""",

    "binary search": """**Binary Search** finds an element in a sorted array by repeatedly dividing the search interval in half.

**Time Complexity:** O(log n)
**Space Complexity:** O(1) iterative, O(log n) recursive
**Requirement:** Array must be sorted""",

    "stack": """**Stack** is a LIFO (Last In, First Out) data structure.

**Operations:**
- Push: O(1)
- Pop: O(1)
- Peek: O(1)

**Use cases:** Undo operations, expression evaluation, backtracking""",

    "queue": """**Queue** is a FIFO (First In, First Out) data structure.

**Operations:**
- Enqueue: O(1)
- Dequeue: O(1)
- Peek: O(1)

**Use cases:** BFS, task scheduling, print queues""",

    "big o": """**Big O Notation** describes the upper bound of an algorithm's time or space complexity.

**Common complexities (fastest to slowest):**
- O(1) - Constant
- O(log n) - Logarithmic
- O(n) - Linear
- O(n log n) - Linearithmic
- O(n²) - Quadratic
- O(2ⁿ) - Exponential""",
}


def match_faq(query):
    """Return the canned answer for the first FAQ key found in `query`, or None."""
    lower_query = query.lower()
    for key, answer in ALGORITHM_FAQS.items():
        if key in lower_query:
            return answer
    return None
