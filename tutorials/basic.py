"""
Sorting a linked list
=====================

In this tutorial, we will build a linked list, look at the sorted runs it is made
of, and merge sort it.
"""

from runsort import LinkedList, is_sorted, merge, merge_sort, queue_sorted_segments

# %%
# First, let's create a list from some toy data.

lst = LinkedList.from_list([5, 3, 8, 1, 9, 9, 2])
print(lst, "sorted" if is_sorted(lst) else "unsorted")

# %%
# The sort starts by cutting the list into maximal non-decreasing runs. Splitting
# consumes the list: afterwards ``lst`` is empty and the runs own its nodes.

runs = queue_sorted_segments(lst)
print([str(run) for run in runs])
print(lst)

# %%
# Two sorted runs can be merged directly. On ties, the first argument wins.

merged = merge(runs.popleft(), runs.popleft())
print(merged)

# %%
# Finally, :py:func:`runsort.merge_sort` does the whole job in one call.

result = merge_sort(LinkedList.from_list([5, 3, 8, 1, 9, 9, 2]))
print(result, is_sorted(result))
