# structkit

Data structures for everyday use and for multithreaded code. Pure Python, no
dependencies.

## Containers

- `structkit.stacks`: `ArrayStack` (array whose capacity doubles when full) and
  `LinkedStack`, with `push`, `pop`, `top` and `len()`. Popping or peeking an
  empty stack raises `StackUnderflowError`, a subclass of `IndexError`.
- `structkit.queues`: `ArrayQueue` and `LinkedQueue`, with `enqueue`,
  `dequeue`, `front` and `len()`. An empty queue raises `QueueUnderflowError`,
  a subclass of `IndexError`.
- `structkit.bst`: `BinarySearchTree`, with `insert` (duplicates are ignored),
  `remove`, the `in` operator, `inorder()` and ascending iteration.
- `structkit.tree`: `Tree`, a fixed table of `TreeNode` slots addressed by id
  (10001 by default), with `node`, `set_root`, `add_child`, `assign_data` and
  `depth_first`, which yields node data in pre-order, newest child first.
- `structkit.vector`: `Vector`, a growable sequence that tracks a reserved
  capacity (`capacity`, `reserve`, `resize`, `shrink_to_fit`) and offers
  `push_back`, `pop_back`, `insert`, `insert_many`, `erase`, `erase_range`,
  `assign`, `swap`, `front`, `back`, bounds-checked `at`, indexing, reverse
  iteration, equality and ordering. `Vector.filled(count, value)` builds a
  vector of repeated values.

```python
from structkit.vector import Vector

v = Vector([1, 2, 3])
v.push_back(4)
v.erase(0)
print(list(v), v.capacity())   # [2, 3, 4] 6
```

## Thread-safe structures

- `structkit.blocking.ThreadSafeQueue`: `push`, blocking `wait_and_pop`,
  non-blocking `try_pop` (raises `queue.Empty` when there is nothing),
  `empty` and `copy`.
- `structkit.channel.Channel`: a bounded channel; with capacity 0 at most one
  value waits for a receiver. `send`, `receive`, `close`, and iteration that
  ends once the channel is closed and drained. Sending on a closed channel, or
  receiving from a closed and empty one, raises `ChannelClosed`.
- `structkit.lookup.LookupTable`: a hash table split into buckets with one lock
  each, offering `value_for(key, default)`, `add_or_update`, `remove` and
  `snapshot()`, which returns a consistent copy as a dict ordered by key.
- `structkit.safelist.ThreadSafeList`: a linked list with a lock per node,
  traversed hand over hand: `push_front`, `for_each`, `find_first_if` and
  `remove_if`.

## Running work concurrently

```python
from structkit.pool import ThreadPool
from structkit.parallel import parallel_quick_sort

with ThreadPool(4) as pool:
    future = pool.commit(pow, 2, 10)
    print(future.result())          # 1024

print(parallel_quick_sort([6, 1, 0, 7, 5, 2, 9, -1]))
```

`ThreadPool.commit` returns a `concurrent.futures.Future`; `idle_count()`
reports workers not running a task; `stop()` (also called on leaving the
`with` block) cancels queued tasks and waits for running ones. Committing to a
stopped pool raises `RuntimeError`.

`structkit.parallel.run_detached` runs a function on a daemon thread and
returns a future for its result. `sequential_quick_sort` and
`parallel_quick_sort` return new ascending lists, partitioning around the
first element.

## JSON-like parsing and pretty printing

`structkit.jsonparse.parse(text)` reads one value from the start of a string
and returns it with the number of characters consumed. It understands numbers,
double-quoted strings with backslash escapes, arrays and objects; anything else,
including `true`, `false` and `null`, comes back as `None` with nothing consumed.

```python
from structkit.jsonparse import parse

print(parse('{"a": [1, 2.5, "x"]}'))   # ({'a': [1, 2.5, 'x']}, 20)
```

`structkit.pretty.format_value` renders nested values: strings quoted, `None`
as `nullptr`, booleans as `true`/`false`, mappings and other iterables in
braces. A type can supply its own text through a `__pretty__` method.
`print_values` writes several values on one line, separated by spaces.

## What is not included

There are no fixed-capacity ring buffers and no spin lock or singleton helper;
the standard library's `threading` and `queue` modules cover those needs.

## Tests

The test suite uses pytest, available through the `test` extra.