"""Test linked list utilities."""

import pytest

from runsort.exception import ContractViolation, CyclicListError
from runsort.linked import (
    LinkedList,
    Node,
    is_sorted,
    iter_nodes,
    length,
    render,
)


def test_convert_to_list():
    """Test converting a node to a list."""
    node = Node(1, next=Node(1, Node(2, Node(3, Node(4)))))

    assert node.to_list() == [1, 1, 2, 3, 4]


def test_node_equality_is_identity():
    """Test that nodes with the same data are distinct cells."""
    node = Node(3)

    assert node == node
    assert node != Node(3)


def test_append_linked_list():
    """Test appending to a linked list."""
    null = LinkedList()
    null.append(3)

    assert null.head.data == 3
    assert null.head.next is None

    null.append(4)

    assert null.to_list() == [3, 4]


def test_prepend_linked_list():
    """Test adding to the front of a linked list."""
    lst = LinkedList()
    lst.prepend(2)
    lst.prepend(1)

    assert lst.to_list() == [1, 2]


def test_linked_list_conversion():
    """Test converting a list of integers keeps the original order."""
    lst = [1, 2, 1, 3, 4]
    new = LinkedList.from_list(lst)

    assert new == LinkedList(
        head=Node(
            data=1,
            next=Node(
                data=2,
                next=Node(data=1, next=Node(data=3, next=Node(data=4, next=None))),
            ),
        )
    )
    assert list(new) == lst


def test_linked_list_equality():
    """Test element-wise comparison of handles."""
    assert LinkedList.from_list([1, 2]) == LinkedList.from_list([1, 2])
    assert LinkedList.from_list([1, 2]) != LinkedList.from_list([1, 2, 3])
    assert LinkedList.from_list([1, 2, 3]) != LinkedList.from_list([1, 2])
    assert LinkedList() == LinkedList()
    assert LinkedList.from_list([None]) != LinkedList()


def test_pop():
    """Test removing the first node."""
    lst = LinkedList.from_list([5, 6])

    assert lst.pop() == 5
    assert lst.to_list() == [6]
    assert lst.pop() == 6
    assert lst.is_empty()
    with pytest.raises(IndexError):
        lst.pop()


def test_detach():
    """Test handing the chain over to the caller."""
    lst = LinkedList.from_list([1, 2])
    head = lst.detach()

    assert head.to_list() == [1, 2]
    assert lst.is_empty()
    assert len(lst) == 0


@pytest.mark.parametrize(
    "values,expected",
    [([], "[]"), ([7], "[7]"), ([3, 1, 4], "[3,1,4]"), (["a", "b"], "[a,b]")],
)
def test_render(values, expected):
    """Test the bracketed rendering."""
    lst = LinkedList.from_list(values)

    assert render(lst) == expected
    assert lst.render() == expected
    assert str(lst) == expected
    assert render(lst.head) == expected


@pytest.mark.parametrize("values", [[], [1], [5, 3, 8, 1], list(range(50))])
def test_length(values):
    """Test counting nodes."""
    lst = LinkedList.from_list(values)

    assert length(lst) == len(values)
    assert lst.length() == len(values)
    assert len(lst) == len(values)
    assert length(lst.head) == len(values)


def test_length_of_none():
    """Test that a missing head is the empty list."""
    assert length(None) == 0
    assert render(None) == "[]"
    assert is_sorted(None)


@pytest.mark.parametrize(
    "values,expected",
    [
        ([], True),
        ([1], True),
        ([1, 2, 3], True),
        ([1, 3, 3, 4], True),
        ([2, 2, 2], True),
        ([5, 3, 8, 1], False),
        ([1, 2, 3, 2], False),
        ([2, 1], False),
    ],
)
def test_is_sorted(values, expected):
    """Test the sortedness check, which allows equal neighbours."""
    lst = LinkedList.from_list(values)

    assert is_sorted(lst) is expected
    assert lst.is_sorted() is expected


def test_long_list_no_recursion():
    """Test that traversals handle chains far deeper than the recursion limit."""
    lst = LinkedList.from_list(range(20_000))

    assert len(lst) == 20_000
    assert lst.is_sorted()
    assert render(lst).startswith("[0,1,2,")
    assert render(lst).endswith(",19998,19999]")


@pytest.mark.parametrize("size,loop_to", [(1, 0), (2, 0), (5, 2), (6, 5), (9, 0)])
def test_cycle_detected(size, loop_to):
    """Test that every traversal refuses a cyclic chain."""
    nodes = [Node(i) for i in range(size)]
    for node, nxt in zip(nodes, nodes[1:]):
        node.next = nxt
    nodes[-1].next = nodes[loop_to]
    lst = LinkedList(head=nodes[0])

    with pytest.raises(CyclicListError):
        length(lst)
    with pytest.raises(CyclicListError):
        render(lst)
    with pytest.raises(CyclicListError):
        list(iter_nodes(nodes[0]))
    # A cycle is a contract violation, reported like a failed assertion.
    with pytest.raises(ContractViolation):
        lst.to_list()
    with pytest.raises(AssertionError):
        lst.to_list()
